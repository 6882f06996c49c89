from __future__ import annotations


class CommitmError(Exception):
    pass


class FetchError(CommitmError):
    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Failed to fetch {url}: {reason}")
        self.url = url
        self.reason = reason
