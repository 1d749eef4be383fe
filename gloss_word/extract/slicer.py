"""Cheap pre-parse slicing of raw page text."""

from __future__ import annotations

import logging


logger = logging.getLogger("gloss_word.extract")


def slice_document(raw: str, marker: str | None) -> str:
    """Return the part of ``raw`` before the first ``marker``.

    The whole document is returned when there is no marker or it does not
    occur. This is a literal substring match, so a marker appearing early
    (in example text, say) truncates real content; the cut position is
    logged at debug level to make that visible.
    """
    if not marker:
        return raw
    index = raw.find(marker)
    if index < 0:
        return raw
    logger.debug("Sliced document at offset %d of %d", index, len(raw))
    return raw[:index]
