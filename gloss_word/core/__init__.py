"""
Core domain types.

This package contains the lookup mode and outcome types shared by
every pipeline stage.
"""

from .types import SUGGESTIONS_HEADER, LookupOutcome, Mode, normalize_word

__all__ = [
    "Mode",
    "LookupOutcome",
    "SUGGESTIONS_HEADER",
    "normalize_word",
]
