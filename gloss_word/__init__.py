"""
gloss-word - a simple English dictionary lookup utility.

This package fetches a definition (thefreedictionary.com) or an
etymology (etymonline.com) for a word, converts the relevant part of
the page to plain text with Pandoc, and caches the result in SQLite.

Main entry point is the CLI via the `gloss` command.

Example:
    $ gloss atavism
    $ gloss -e forest
"""

__all__ = ["__version__", "Mode", "LookupOutcome", "LookupPipeline", "run_lookup"]
__version__ = "0.3.3"

from .core.types import LookupOutcome, Mode
from .runner import LookupPipeline, run_lookup
