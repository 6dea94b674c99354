"""HTML parsing back-ends used to obtain source elements."""

from __future__ import annotations

from typing import List, Protocol

from bs4 import BeautifulSoup, Tag

PARSER_FEATURES = ("html.parser", "lxml")

# Tree builders that wrap every fragment in <html><head>...</head><body>.
WRAPPING_FEATURES = frozenset({"lxml"})


class MarkupParser(Protocol):
    """Anything that turns a markup string into a root element."""

    def parse(self, markup: str) -> Tag:
        ...


def top_level_elements(soup: BeautifulSoup, *, wrapped: bool = False) -> List[Tag]:
    """Return the top-level elements of a parsed fragment in document order.

    With ``wrapped`` the synthetic html/head/body elements are skipped and the
    element children of head and then body are returned instead.
    """
    if not wrapped:
        return soup.find_all(True, recursive=False)
    elements: List[Tag] = []
    for section in (soup.head, soup.body):
        if section is not None:
            elements.extend(section.find_all(True, recursive=False))
    return elements


class SoupParser:
    def __init__(self, features: str = "html.parser") -> None:
        if features not in PARSER_FEATURES:
            raise ValueError(f"unsupported parser: {features}")
        self.features = features

    @property
    def wraps_fragments(self) -> bool:
        return self.features in WRAPPING_FEATURES

    def soup(self, markup: str) -> BeautifulSoup:
        # Keep multi-valued attributes such as class as plain strings.
        return BeautifulSoup(markup, self.features, multi_valued_attributes=None)

    def elements(self, markup: str) -> List[Tag]:
        return top_level_elements(self.soup(markup), wrapped=self.wraps_fragments)

    def parse(self, markup: str) -> Tag:
        elements = self.elements(markup)
        if not elements:
            raise ValueError("markup contains no element")
        return elements[0]
