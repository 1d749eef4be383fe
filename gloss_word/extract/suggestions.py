"""Similar-word suggestions from a definition page that has no entry."""

from __future__ import annotations

from bs4 import Tag

from .query import Query, serialize


def compile_suggestions(parsed: Tag, query: Query) -> str | None:
    """Return the markup of every suggestion item, or None when there are none."""
    items = query.select(parsed)
    if not items:
        return None
    return serialize(items)
