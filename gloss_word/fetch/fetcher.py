"""
HTTP page fetching and lookup URL construction.

Each reference site gets its own URL convention: the definition site
encodes spaces as ``+``, the etymology site as ``%20``.
"""

from __future__ import annotations

from dataclasses import dataclass
import time
from urllib.parse import quote, quote_plus

import httpx

from ..config import FetchConfig
from ..core.types import Mode


@dataclass
class FetchResult:
    """Result of an HTTP fetch operation.

    Either text will be populated (success) or error will be populated (failure),
    but never both. status_code may be None for network-level failures.

    Attributes:
        url: The URL that was fetched
        status_code: HTTP status code, or None if request failed before getting response
        text: The response body text, or None on error
        error: Error message if fetch failed, None on success
    """
    url: str
    status_code: int | None
    text: str | None
    error: str | None


def build_lookup_url(mode: Mode, word: str, cfg: FetchConfig) -> str:
    """Return the page URL for ``word`` on the site serving ``mode``.

    Examples:
        >>> build_lookup_url(Mode.DEFINITION, "red herring", FetchConfig())
        'https://www.thefreedictionary.com/red+herring'
        >>> build_lookup_url(Mode.ETYMOLOGY, "red herring", FetchConfig())
        'https://www.etymonline.com/word/red%20herring'
    """
    if mode is Mode.ETYMOLOGY:
        return cfg.etymology_url + quote(word, safe="")
    return cfg.definition_url + quote_plus(word, safe="")


def fetch_url(
    url: str,
    timeout: float,
    retries: int,
    user_agent: str,
    trust_env: bool,
) -> FetchResult:
    """Fetch a URL using httpx.

    Uses a synchronous HTTP client that follows redirects and respects
    system proxy settings when trust_env is enabled. Status codes are
    recorded but not judged: a 404 page still carries the body the
    pipeline reads suggestions from.

    Args:
        url: The URL to fetch
        timeout: Request timeout in seconds
        retries: Number of retry attempts after initial failure
        user_agent: User-Agent header string
        trust_env: Whether to respect system proxy settings from environment

    Returns:
        FetchResult with text on success or error message on failure
    """
    headers = {"User-Agent": user_agent}
    last_error: str | None = None

    for attempt in range(retries + 1):
        try:
            with httpx.Client(
                timeout=timeout,
                headers=headers,
                follow_redirects=True,
                trust_env=trust_env,
            ) as client:
                resp = client.get(url)
                return FetchResult(url=url, status_code=resp.status_code, text=resp.text, error=None)
        except httpx.HTTPError as exc:
            last_error = f"{type(exc).__name__}: {exc}"
            if attempt < retries:
                time.sleep(0.5 * (attempt + 1))

    return FetchResult(url=url, status_code=None, text=None, error=last_error)


def make_fetcher(cfg: FetchConfig):
    """Bind fetch settings so the orchestrator only passes a URL."""

    def fetch(url: str) -> FetchResult:
        return fetch_url(
            url,
            timeout=cfg.timeout_seconds,
            retries=cfg.retries,
            user_agent=cfg.user_agent,
            trust_env=cfg.trust_env,
        )

    return fetch
