from __future__ import annotations

import logging
from urllib.parse import quote_plus

import requests

from commitm.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, AppConfig
from commitm.document import ElementNode, parse_document
from commitm.errors import FetchError
from commitm.extract import assemble_result
from commitm.models import QueryResult

logger = logging.getLogger(__name__)


def build_url(keyword: str, page: int, base_url: str = DEFAULT_BASE_URL) -> str:
    return f"{base_url}/commits/search?keyword={quote_plus(keyword)}&page={page}"


def fetch_document(
    url: str,
    session: requests.Session | None = None,
    timeout: int = DEFAULT_TIMEOUT,
) -> ElementNode:
    if session is None:
        with requests.Session() as client:
            return _fetch(client, url, timeout)
    return _fetch(session, url, timeout)


def search(
    keyword: str,
    page: int,
    config: AppConfig,
    session: requests.Session | None = None,
) -> tuple[str, QueryResult]:
    url = build_url(keyword, page, config.base_url)
    doc = fetch_document(url, session=session, timeout=config.timeout)
    return url, assemble_result(doc)


def _fetch(session: requests.Session, url: str, timeout: int) -> ElementNode:
    logger.info("Fetching %s", url)
    try:
        response = session.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as exc:
        raise FetchError(url, str(exc)) from exc

    logger.info("Fetched %s (HTTP %s, %d bytes)", url, response.status_code, len(response.content))
    return parse_document(response.content)
