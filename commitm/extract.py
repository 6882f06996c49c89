from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from commitm.document import ElementNode
from commitm.models import Commit, QueryResult

logger = logging.getLogger(__name__)

RESULT_ROWS_SELECTOR = "table.table tr"
RESULT_COUNT_CONTAINER = "div.container"
NEXT_PAGE_SELECTOR = "ul.pagination li.next_page"
RESULT_COUNT_PATTERN = re.compile(r"(\d+) results")
DEFAULT_TOTAL_PAGES = "1"


@dataclass(frozen=True)
class RowSchema:
    text_slots: tuple[str, ...] = ("message", "repo", "sha1")
    link_slots: tuple[str, ...] = ("repo_url", "commit_url")

    def build(self, cell_texts: list[str], hrefs: list[str]) -> Commit:
        values = {name: "" for name in (*self.text_slots, *self.link_slots)}
        values.update(_fill_slots(self.text_slots, cell_texts))
        values.update(_fill_slots(self.link_slots, hrefs))
        values["message"] = values.get("message", "").strip()
        return Commit(
            message=values["message"],
            repo=values.get("repo", ""),
            repo_url=values.get("repo_url", ""),
            sha1=values.get("sha1", ""),
            commit_url=values.get("commit_url", ""),
        )


DEFAULT_ROW_SCHEMA = RowSchema()


def extract_commits(
    doc: ElementNode,
    schema: RowSchema = DEFAULT_ROW_SCHEMA,
) -> tuple[list[Commit], int]:
    commits: list[Commit] = []
    skipped = 0

    for row in doc.select(RESULT_ROWS_SELECTOR):
        cell_texts: list[str] = []
        hrefs: list[str] = []
        for cell in row.select("td"):
            cell_texts.append(cell.text())
            for anchor in cell.select("a"):
                href = anchor.attr("href")
                if href:
                    hrefs.append(href)

        commit = schema.build(cell_texts, hrefs)
        if not commit.sha1.strip():
            skipped += 1
            continue
        commits.append(commit)

    if skipped:
        logger.debug("Skipped %d result row(s) without a commit hash", skipped)
    return commits, skipped


def extract_result_count(doc: ElementNode) -> str:
    for container in doc.select(RESULT_COUNT_CONTAINER):
        for node in container.text_children():
            match = RESULT_COUNT_PATTERN.search(node.text())
            if match:
                return match.group(0)
    return ""


def extract_total_pages(doc: ElementNode) -> str:
    # The entry before "next" is the highlighted page link, not a page count.
    for next_page in doc.select(NEXT_PAGE_SELECTOR):
        previous = next_page.previous_element_sibling()
        if previous is None:
            continue
        pages = previous.text().strip()
        if pages:
            return pages
    return DEFAULT_TOTAL_PAGES


def assemble_result(doc: ElementNode, schema: RowSchema = DEFAULT_ROW_SCHEMA) -> QueryResult:
    commits, skipped = extract_commits(doc, schema)
    return QueryResult(
        commits=commits,
        result_count=extract_result_count(doc),
        total_pages=extract_total_pages(doc),
        skipped_rows=skipped,
    )


def _fill_slots(slots: tuple[str, ...], values: list[str]) -> dict[str, str]:
    return {name: values[idx] for idx, name in enumerate(slots) if idx < len(values)}
