from __future__ import annotations

from typing import Iterable

import wcwidth


def display_width(text: str) -> int:
    total = 0
    for ch in text:
        total += max(wcwidth.wcwidth(ch), 0)
    return total


def max_width(values: Iterable[str]) -> int:
    return max((display_width(value) for value in values), default=0)


def ljust_width(text: str, width: int) -> str:
    return text + " " * max(width - display_width(text), 0)


def rjust_width(text: str, width: int) -> str:
    return " " * max(width - display_width(text), 0) + text
