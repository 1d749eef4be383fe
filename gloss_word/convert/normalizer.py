"""
Markup to plain text normalization.

Compiled markup goes through two converter passes:
1. HTML to Markdown, unwrapped so the line-anchored cleanup rules see
   whole lines
2. Markdown to plain text

Between the passes each mode applies its own regex cleanup, repairing
artifacts the HTML reader introduces for that site's markup. Every rule
is idempotent, so normalizing the same markup twice yields the same text.
"""

from __future__ import annotations

from dataclasses import dataclass
import re

from ..core.types import Mode
from .base import Converter, HTML_FORMAT, MARKDOWN_FORMAT, NO_WRAP, PLAIN_FORMAT


@dataclass(frozen=True)
class CleanupRule:
    """A named regex substitution."""

    name: str
    pattern: re.Pattern[str]
    replacement: str

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


@dataclass(frozen=True)
class RuleSet:
    """Cleanup applied before the plain-text pass, and after it."""

    before_plain: tuple[CleanupRule, ...] = ()
    after_plain: tuple[CleanupRule, ...] = ()

    def clean_intermediate(self, text: str) -> str:
        return _apply_all(self.before_plain, text)

    def clean_plain(self, text: str) -> str:
        return _apply_all(self.after_plain, text)


def _apply_all(rules: tuple[CleanupRule, ...], text: str) -> str:
    for rule in rules:
        text = rule.apply(text)
    return text


STRIP_FIGURES = CleanupRule(
    "strip_figures",
    re.compile(r"\n\n!\[.+$", re.MULTILINE),
    "",
)
UNESCAPE_QUOTES = CleanupRule(
    "unescape_quotes",
    re.compile(r'\\+"'),
    '"',
)
# Headword lines like "forest(n.)" lack the space before the part of speech
SPACE_PART_OF_SPEECH = CleanupRule(
    "space_part_of_speech",
    re.compile(r"(\S)(\([a-z]{1,3}\.\))\n"),
    r"\1 \2\n",
)
UNBOLD_NUMBERED_LABELS = CleanupRule(
    "unbold_numbered_labels",
    re.compile(r"\n\*\*(\d+\.)\*\*"),
    r"\n\1",
)
UNBOLD_LETTERED_LABELS = CleanupRule(
    "unbold_lettered_labels",
    re.compile(r"\n\*\*([a-z]\.)\*\*"),
    r"\n    \1",
)

RULESETS: dict[Mode, RuleSet] = {
    Mode.ETYMOLOGY: RuleSet(
        before_plain=(STRIP_FIGURES, UNESCAPE_QUOTES, SPACE_PART_OF_SPEECH),
        after_plain=(SPACE_PART_OF_SPEECH,),
    ),
    Mode.DEFINITION: RuleSet(
        before_plain=(UNBOLD_NUMBERED_LABELS, UNBOLD_LETTERED_LABELS, UNESCAPE_QUOTES),
    ),
}


class TextNormalizer:
    """Drives a Converter through the mode's conversion passes."""

    def __init__(self, converter: Converter, rulesets: dict[Mode, RuleSet] | None = None):
        self.converter = converter
        self.rulesets = rulesets if rulesets is not None else RULESETS

    def normalize(self, mode: Mode, markup: str) -> str:
        """Convert compiled entry markup to final plain text.

        Raises:
            ConversionError: if either converter pass fails
        """
        rules = self.rulesets[mode]
        intermediate = self.converter.convert(markup, HTML_FORMAT, MARKDOWN_FORMAT, (NO_WRAP,))
        cleaned = rules.clean_intermediate(intermediate)
        plain = self.converter.convert(cleaned, MARKDOWN_FORMAT, PLAIN_FORMAT)
        return rules.clean_plain(plain)

    def convert_plain(self, markup: str) -> str:
        """Single-pass markup to plain text, with no cleanup (used for suggestions)."""
        return self.converter.convert(markup, HTML_FORMAT, PLAIN_FORMAT)
