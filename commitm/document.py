from __future__ import annotations

from typing import Protocol

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString, Tag


class Node(Protocol):
    is_text: bool

    def children(self) -> list[Node]: ...

    def text(self) -> str: ...

    def attr(self, name: str) -> str: ...


class TextNode:
    is_text = True

    def __init__(self, value: NavigableString) -> None:
        self._value = value

    def children(self) -> list[Node]:
        return []

    def text(self) -> str:
        return str(self._value)

    def attr(self, name: str) -> str:
        return ""


class ElementNode:
    is_text = False

    def __init__(self, element: Tag) -> None:
        self._element = element

    def children(self) -> list[Node]:
        nodes: list[Node] = []
        for child in self._element.children:
            node = _wrap(child)
            if node is not None:
                nodes.append(node)
        return nodes

    def text(self) -> str:
        return self._element.get_text()

    def attr(self, name: str) -> str:
        value = self._element.get(name)
        if value is None:
            return ""
        # multi-valued attributes such as class come back as lists
        if isinstance(value, list):
            return " ".join(value)
        return str(value)

    def select(self, selector: str) -> list[ElementNode]:
        return [ElementNode(match) for match in self._element.select(selector)]

    def previous_element_sibling(self) -> ElementNode | None:
        for sibling in self._element.previous_siblings:
            if isinstance(sibling, Tag):
                return ElementNode(sibling)
        return None

    def text_children(self) -> list[Node]:
        return [child for child in self.children() if child.is_text]


def parse_document(html: str | bytes) -> ElementNode:
    return ElementNode(BeautifulSoup(html, "html.parser"))


def _wrap(child: object) -> Node | None:
    if isinstance(child, Tag):
        return ElementNode(child)
    # comments, doctypes and CDATA are not page text
    if isinstance(child, NavigableString) and not isinstance(child, PreformattedString):
        return TextNode(child)
    return None
