"""
Page slicing, fragment selection and compilation.

This package turns a raw reference page into the markup string handed
to the text normalizer.
"""

from .query import Query, parse_document, serialize
from .slicer import slice_document
from .strategies import DefinitionStrategy, EtymologyStrategy, ModeStrategy, build_strategies
from .suggestions import compile_suggestions

__all__ = [
    "Query",
    "parse_document",
    "serialize",
    "slice_document",
    "ModeStrategy",
    "DefinitionStrategy",
    "EtymologyStrategy",
    "build_strategies",
    "compile_suggestions",
]
