"""
Document conversion.

This package wraps the external converter behind a small interface and
applies the per-mode text cleanup rules.
"""

from .base import Converter, HTML_FORMAT, MARKDOWN_FORMAT, NO_WRAP, PLAIN_FORMAT
from .normalizer import RULESETS, CleanupRule, RuleSet, TextNormalizer
from .pandoc import PandocConverter

__all__ = [
    "Converter",
    "PandocConverter",
    "TextNormalizer",
    "CleanupRule",
    "RuleSet",
    "RULESETS",
    "HTML_FORMAT",
    "MARKDOWN_FORMAT",
    "PLAIN_FORMAT",
    "NO_WRAP",
]
