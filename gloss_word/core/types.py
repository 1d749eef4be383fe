"""
Core data types for gloss-word.

This module defines the small set of values that flow through the lookup
pipeline:
- Mode: which reference site and rule set a lookup uses
- LookupOutcome: the text a successful lookup emits and where it came from
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


SUGGESTIONS_HEADER = "Did you mean:\n\n"


class Mode(Enum):
    """Lookup mode. The value doubles as the cache table name."""

    DEFINITION = "dictionary"
    ETYMOLOGY = "etymology"

    @property
    def table(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return "Etymology" if self is Mode.ETYMOLOGY else "Definition"

    @classmethod
    def from_flag(cls, etymology: bool) -> Mode:
        return cls.ETYMOLOGY if etymology else cls.DEFINITION


@dataclass
class LookupOutcome:
    """Result of a lookup that produced output.

    Attributes:
        word: The normalized word that was looked up
        mode: Lookup mode
        text: Plain text to emit (entry text or suggestion list)
        source: "cache", "fetch", or "suggestions"
    """
    word: str
    mode: Mode
    text: str
    source: str

    @property
    def is_suggestion(self) -> bool:
        return self.source == "suggestions"

    def render(self) -> str:
        """Return exactly what should be written to standard output."""
        if self.is_suggestion:
            return SUGGESTIONS_HEADER + self.text
        return self.text


def normalize_word(word: str) -> str:
    """Lower-case a query and trim the ends; inner whitespace is preserved."""
    return word.strip().lower()
