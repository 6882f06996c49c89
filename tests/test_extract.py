from __future__ import annotations

from pathlib import Path

from commitm.document import parse_document
from commitm.extract import (
    RowSchema,
    assemble_result,
    extract_commits,
    extract_result_count,
    extract_total_pages,
)

FIXTURES = Path(__file__).parent / "fixtures"


def _page(name: str = "search_page.html"):
    return parse_document((FIXTURES / name).read_text(encoding="utf-8"))


def _table(rows: str) -> str:
    return f'<html><body><table class="table">{rows}</table></body></html>'


def test_extract_commits_assigns_fields_by_position() -> None:
    commits, skipped = extract_commits(_page())

    assert len(commits) == 2
    assert skipped == 2

    first = commits[0]
    assert first.message == "Fix bug in parser"
    assert first.repo == "acme/widgets"
    assert first.repo_url == "https://github.com/acme/widgets"
    assert first.sha1 == "1a2b3c4"
    assert first.commit_url == "https://github.com/acme/widgets/commit/1a2b3c4d5e"

    second = commits[1]
    assert second.repo == "日本/ツール"
    assert second.message == "パーサーの修正 fix"


def test_row_with_empty_hash_is_dropped() -> None:
    doc = parse_document(
        _table(
            "<tr><td>good</td><td><a href='/r'>org/repo</a></td>"
            "<td><a href='/c'>abc1234</a></td></tr>"
            "<tr><td>bad</td><td><a href='/r'>org/repo</a></td><td>  </td></tr>"
        )
    )

    commits, skipped = extract_commits(doc)

    assert [commit.message for commit in commits] == ["good"]
    assert skipped == 1


def test_short_row_with_hash_keeps_missing_fields_empty() -> None:
    doc = parse_document(_table("<tr><td>msg</td><td>org/repo</td><td>abc1234</td></tr>"))

    commits, _ = extract_commits(doc)

    assert len(commits) == 1
    assert commits[0].repo_url == ""
    assert commits[0].commit_url == ""
    assert commits[0].sha1 == "abc1234"


def test_links_without_href_are_not_counted() -> None:
    doc = parse_document(
        _table(
            "<tr><td>msg <a>plain anchor</a></td>"
            "<td><a href='/repo'>org/repo</a></td>"
            "<td><a href='/commit'>abc1234</a></td></tr>"
        )
    )

    commits, _ = extract_commits(doc)

    assert commits[0].repo_url == "/repo"
    assert commits[0].commit_url == "/commit"


def test_extra_cells_and_links_are_ignored() -> None:
    doc = parse_document(
        _table(
            "<tr><td>msg</td><td><a href='/r'>repo</a></td><td><a href='/c'>abc</a></td>"
            "<td><a href='/x'>extra</a></td></tr>"
        )
    )

    commits, _ = extract_commits(doc)

    assert commits[0].commit_url == "/c"


def test_row_schema_defaults_missing_slots() -> None:
    commit = RowSchema().build(["  hello  "], [])

    assert commit.message == "hello"
    assert commit.repo == ""
    assert commit.sha1 == ""
    assert commit.repo_url == ""


def test_result_count_reads_direct_text_nodes_only() -> None:
    assert extract_result_count(_page()) == "42 results"


def test_result_count_empty_when_absent() -> None:
    doc = parse_document('<div class="container"><p>12 results</p></div>')

    assert extract_result_count(doc) == ""


def test_total_pages_reads_entry_before_next() -> None:
    assert extract_total_pages(_page()) == "3"


def test_total_pages_defaults_to_one_without_pagination() -> None:
    assert extract_total_pages(_page("empty_page.html")) == "1"


def test_assemble_result_on_empty_page() -> None:
    result = assemble_result(_page("empty_page.html"))

    assert result.commits == []
    assert result.result_count == ""
    assert result.total_pages == "1"
    assert result.skipped_rows == 1


def test_assemble_result_combines_extractors() -> None:
    result = assemble_result(_page())

    assert len(result.commits) == 2
    assert result.result_count == "42 results"
    assert result.total_pages == "3"


def test_total_pages_text_is_stripped() -> None:
    doc = parse_document(
        '<ul class="pagination"><li>\n  <a>7</a>\n</li><li class="next_page">Next</li></ul>'
    )

    assert extract_total_pages(doc) == "7"


def test_total_pages_whitespace_only_defaults_to_one() -> None:
    doc = parse_document('<ul class="pagination"><li>  </li><li class="next_page">Next</li></ul>')

    assert extract_total_pages(doc) == "1"
