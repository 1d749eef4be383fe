"""
Typed structural queries over parsed pages.

A Query wraps a CSS selector string so the selectors each mode uses stay
plain data. Selection is delegated to BeautifulSoup's ``select`` (backed
by soupsieve), which yields matches in document order.
"""

from __future__ import annotations

from dataclasses import dataclass

from bs4 import BeautifulSoup, Tag


@dataclass(frozen=True)
class Query:
    """A CSS selector that can be run against any parsed node."""

    css: str

    def select(self, root: Tag) -> list[Tag]:
        """Return every descendant of ``root`` matching the query, in document order."""
        return list(root.select(self.css))


def parse_document(text: str) -> BeautifulSoup:
    """Parse page text into a tree; built once per lookup and never mutated."""
    return BeautifulSoup(text, "html.parser")


def serialize(nodes: list[Tag]) -> str:
    """Concatenate the markup of ``nodes`` without separators."""
    return "".join(str(node) for node in nodes)
