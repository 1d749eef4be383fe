"""
Error taxonomy for the lookup pipeline.

Transport, conversion and not-found errors abort a lookup and reach the
CLI. Cache errors are only raised by explicit cache maintenance commands;
during a lookup cache failures travel as ``CacheResult.error`` values.
"""

from __future__ import annotations


class GlossError(Exception):
    """Base class for all user-visible lookup failures."""


class TransportError(GlossError):
    """The network fetch failed or the body could not be decoded."""


class ConversionError(GlossError):
    """The external converter could not be run or produced unusable output."""


class CacheError(GlossError):
    """The cache store or its directory could not be used."""


class NotFoundError(GlossError):
    """No entry (and, for definitions, no suggestions) exists for the word."""
