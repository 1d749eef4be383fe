"""
Page fetching.

This package handles HTTP fetching and the URL conventions of the
supported reference sites.
"""

from .fetcher import FetchResult, build_lookup_url, fetch_url, make_fetcher

__all__ = [
    "FetchResult",
    "build_lookup_url",
    "fetch_url",
    "make_fetcher",
]
