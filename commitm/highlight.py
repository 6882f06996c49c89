from __future__ import annotations

import html
import re
import sys
from typing import Literal, Protocol, TextIO

Role = Literal["repo", "sha1", "header_repo", "header_sha1", "match"]

_ANSI_RESET = "\033[0m"
_ANSI_ROLES: dict[str, str] = {
    "repo": "\033[34m",
    "header_repo": "\033[34m",
    "sha1": "\033[36m",
    "header_sha1": "\033[36m",
    "match": "\033[33m",
}


class Decorator(Protocol):
    def decorate(self, text: str, role: Role) -> str: ...

    def plain(self, text: str) -> str: ...


class PlainDecorator:
    def decorate(self, text: str, role: Role) -> str:
        return text

    def plain(self, text: str) -> str:
        return text


class AnsiDecorator:
    def decorate(self, text: str, role: Role) -> str:
        code = _ANSI_ROLES.get(role)
        if not code or not text:
            return text
        return f"{code}{text}{_ANSI_RESET}"

    def plain(self, text: str) -> str:
        return text


class HtmlDecorator:
    def decorate(self, text: str, role: Role) -> str:
        return f'<span class="{role}">{html.escape(text)}</span>'

    def plain(self, text: str) -> str:
        return html.escape(text)


def choose_decorator(color: str, stream: TextIO | None = None) -> Decorator:
    if color == "always":
        return AnsiDecorator()
    if color == "never":
        return PlainDecorator()

    stream = stream or sys.stdout
    if hasattr(stream, "isatty") and stream.isatty():
        return AnsiDecorator()
    return PlainDecorator()


def keyword_pattern(keyword: str) -> re.Pattern[str] | None:
    terms = [re.escape(term) for term in keyword.split()]
    if not terms:
        return None
    return re.compile("|".join(terms))


def highlight_words(message: str, keyword: str, decorator: Decorator) -> str:
    pattern = keyword_pattern(keyword)
    if pattern is None:
        return decorator.plain(message)

    parts: list[str] = []
    position = 0
    for match in pattern.finditer(message):
        parts.append(decorator.plain(message[position : match.start()]))
        parts.append(decorator.decorate(match.group(0), "match"))
        position = match.end()
    parts.append(decorator.plain(message[position:]))
    return "".join(parts)
