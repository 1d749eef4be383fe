"""
Mode-specific fragment selection and compilation.

Each lookup mode gets one strategy object, chosen once by the
orchestrator. A strategy knows:
- where to slice the raw page before parsing
- which fragments of the parsed page hold the entry
- how to compile those fragments into one markup string
- whether a page with no entry can offer similar words instead
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from bs4 import BeautifulSoup, Tag

from ..config import SelectorConfig
from ..core.types import Mode
from .query import Query, parse_document, serialize
from .slicer import slice_document
from .suggestions import compile_suggestions


class ModeStrategy(ABC):
    """Selection and compilation rules for one lookup mode."""

    mode: Mode
    suggestions_query: Query | None = None

    def __init__(self, section_query: Query, marker: str | None = None):
        self.section_query = section_query
        self.marker = marker

    def parse(self, raw: str) -> BeautifulSoup:
        """Slice ``raw`` and parse what is left."""
        return parse_document(slice_document(raw, self.marker))

    def select_sections(self, parsed: Tag) -> list[Tag]:
        """Return the fragments holding the entry, in document order.

        An empty list means the page has no entry for the word.
        """
        return self.section_query.select(parsed)

    def suggest(self, parsed: Tag) -> str | None:
        """Return markup for similar words, or None when the mode has no fallback."""
        if self.suggestions_query is None:
            return None
        return compile_suggestions(parsed, self.suggestions_query)

    @abstractmethod
    def compile(self, sections: list[Tag]) -> str:
        """Serialize non-empty ``sections`` into one markup string."""
        raise NotImplementedError


class DefinitionStrategy(ModeStrategy):
    """Dictionary pages: one entry container, read part by part."""

    mode = Mode.DEFINITION

    def __init__(
        self,
        section_query: Query,
        parts_query: Query,
        marker: str | None,
        suggestions_query: Query | None = None,
    ):
        super().__init__(section_query, marker)
        self.parts_query = parts_query
        self.suggestions_query = suggestions_query

    def compile(self, sections: list[Tag]) -> str:
        # Only the first container counts when a page carries several
        return serialize(self.parts_query.select(sections[0]))


class EtymologyStrategy(ModeStrategy):
    """Etymology pages: every word-sense block, taken whole."""

    mode = Mode.ETYMOLOGY

    def compile(self, sections: list[Tag]) -> str:
        return serialize(sections)


def build_strategies(cfg: SelectorConfig) -> dict[Mode, ModeStrategy]:
    """Build the strategy for every mode from selector config."""
    return {
        Mode.DEFINITION: DefinitionStrategy(
            Query(cfg.definition_section),
            Query(cfg.definition_parts),
            marker=cfg.definition_marker,
            suggestions_query=Query(cfg.suggestions),
        ),
        Mode.ETYMOLOGY: EtymologyStrategy(Query(cfg.etymology_section)),
    }
