from __future__ import annotations

import argparse
import logging
import re
import sys

from commitm import __version__
from commitm.config import COLOR_CHOICES, load_app_config
from commitm.errors import FetchError
from commitm.fetch import search
from commitm.highlight import choose_decorator
from commitm.render import render_error, render_json, render_table

PAGE_PATTERN = re.compile(r"[+-]?[0-9]+", re.ASCII)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="commitm",
        description="Command line client for commit-m (http://commit-m.minamijoyo.com)",
    )
    parser.add_argument("keyword", nargs="?", default="", help="Search keyword(s)")
    parser.add_argument("page", nargs="?", default=None, help="Result page (default: 1)")
    parser.add_argument("--json", action="store_true", help="Output as json")
    parser.add_argument("--config", default=None, help="Optional config YAML")
    parser.add_argument(
        "--color",
        choices=COLOR_CHOICES,
        default=None,
        help="Colorize table output (default: from config, else auto)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def parse_page(value: str | None) -> int:
    if not value or not PAGE_PATTERN.fullmatch(value):
        return 1
    return int(value)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    keyword = args.keyword.strip()
    if not keyword:
        parser.print_help(sys.stderr)
        return 1

    try:
        config = load_app_config(args.config)
    except (FileNotFoundError, ValueError) as exc:
        if args.json:
            sys.stdout.write(render_json(error=f"Configuration error: {exc}") + "\n")
        else:
            print(f"Configuration error: {exc}")
        return 1

    page = parse_page(args.page)

    try:
        url, result = search(keyword, page, config)
    except FetchError as exc:
        if args.json:
            sys.stdout.write(render_json(error=str(exc)) + "\n")
        else:
            sys.stdout.write(render_error(exc.url, exc.reason))
        return 1

    if args.json:
        sys.stdout.write(render_json(result) + "\n")
        return 0

    decorator = choose_decorator(args.color or config.color)
    sys.stdout.write(render_table(result, url, args.keyword, page, decorator))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
