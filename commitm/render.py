from __future__ import annotations

import json

from commitm.highlight import Decorator, PlainDecorator, highlight_words
from commitm.models import JsonFormat, QueryResult
from commitm.width import ljust_width, max_width, rjust_width

SHA1_WIDTH = 7
# " " + " | " * 3 + sha1 column + trailing space
SEPARATOR_OVERHEAD = 18


def render_table(
    result: QueryResult,
    url: str,
    keyword: str,
    page: int,
    decorator: Decorator | None = None,
) -> str:
    decorator = decorator or PlainDecorator()
    plain = decorator.plain
    commits = result.commits
    if not commits:
        return "\n".join(["No Results Found.", f"  url: {plain(url)}", "", ""])

    repo_width = max_width(commit.repo for commit in commits)
    message_width = max_width(commit.message for commit in commits)
    url_width = max_width(commit.commit_url for commit in commits)

    lines = [
        plain(f"Search Result : {result.result_count} : {page}/{result.total_pages} pages"),
        f"  url: {plain(url)}",
        "",
        (
            f" {decorator.decorate(ljust_width('Repository', repo_width), 'header_repo')}"
            f" | {decorator.decorate(ljust_width('sha1', SHA1_WIDTH), 'header_sha1')}"
            f" | {plain(ljust_width('url', url_width))}"
            " | message "
        ),
        "-" * (repo_width + message_width + url_width + SEPARATOR_OVERHEAD),
    ]

    for commit in commits:
        lines.append(
            f" {decorator.decorate(ljust_width(commit.repo, repo_width), 'repo')}"
            f" | {decorator.decorate(rjust_width(commit.sha1, SHA1_WIDTH), 'sha1')}"
            f" | {plain(ljust_width(commit.commit_url, url_width))}"
            f" | {highlight_words(commit.message, keyword, decorator)}"
        )

    lines.append("")
    return "\n".join(lines)


def render_error(url: str, error: str) -> str:
    return "\n".join([f"Search failed: {error}", f"  url: {url}", "", ""])


def render_json(result: QueryResult | None = None, error: str | None = None) -> str:
    if error:
        payload = JsonFormat.from_error(error)
    else:
        payload = JsonFormat(commits=list(result.commits) if result else [])
    return json.dumps(payload.to_dict(), ensure_ascii=False)
