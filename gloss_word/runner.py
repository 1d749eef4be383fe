"""
Lookup orchestration for gloss-word.

This module coordinates one lookup:
1. Check the cache (a hit ends the lookup unless a refresh is forced)
2. Fetch the reference page
3. Slice, parse and select the entry fragments
4. Compile and normalize them into plain text
5. Write the text back to the cache (best effort)

When a definition page has no entry, its "similar words" list is
offered instead. Suggestions are never cached.
"""

from __future__ import annotations

from functools import partial
import logging
from typing import Callable

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

from .cache import LookupCache
from .config import AppConfig
from .convert.normalizer import TextNormalizer
from .convert.pandoc import PandocConverter
from .core.types import LookupOutcome, Mode, normalize_word
from .errors import NotFoundError, TransportError
from .extract.strategies import ModeStrategy, build_strategies
from .fetch.fetcher import FetchResult, build_lookup_url, make_fetcher
from .logging_utils import log_event, setup_logging
from .paths import resolve_cache_dir


Fetcher = Callable[[str], FetchResult]
UrlBuilder = Callable[[Mode, str], str]


class LookupPipeline:
    """Runs lookups against injected collaborators.

    Attributes:
        fetch: Callable returning a FetchResult for a URL
        normalizer: Converts compiled markup to plain text
        strategies: Per-mode selection and compilation rules
        url_builder: Builds the page URL for a mode and word
        cache: Lookup cache, or None to run uncached
        logger: Logger for pipeline events
    """

    def __init__(
        self,
        fetch: Fetcher,
        normalizer: TextNormalizer,
        strategies: dict[Mode, ModeStrategy],
        url_builder: UrlBuilder,
        cache: LookupCache | None = None,
        logger: logging.Logger | None = None,
    ):
        self.fetch = fetch
        self.normalizer = normalizer
        self.strategies = strategies
        self.url_builder = url_builder
        self.cache = cache
        self.logger = logger or logging.getLogger("gloss_word")

    def run(
        self,
        word: str,
        mode: Mode,
        refresh: bool = False,
        progress: Progress | None = None,
    ) -> LookupOutcome:
        """Look up ``word`` and return what should be printed.

        Raises:
            TransportError: if the page could not be fetched
            ConversionError: if the converter failed
            NotFoundError: if there is neither an entry nor suggestions
        """
        word = normalize_word(word)
        cached = self._read_cache(mode, word)
        if cached is not None and not refresh:
            log_event(self.logger, "Cache hit", event="cache_hit", word=word, mode=mode.table)
            return LookupOutcome(word=word, mode=mode, text=cached, source="cache")

        task = progress.add_task("Fetching...", total=None) if progress is not None else None
        try:
            return self._fetch_and_convert(word, mode, cache_hit=cached is not None)
        finally:
            if task is not None:
                progress.remove_task(task)

    def _fetch_and_convert(self, word: str, mode: Mode, cache_hit: bool) -> LookupOutcome:
        strategy = self.strategies[mode]
        url = self.url_builder(mode, word)
        result = self.fetch(url)
        if result.error is not None or result.text is None:
            raise TransportError(f"Failed to complete HTTP request: {result.error}")
        log_event(
            self.logger,
            "Fetched page",
            event="fetch",
            url=url,
            status_code=result.status_code,
            chars=len(result.text),
        )

        parsed = strategy.parse(result.text)
        sections = strategy.select_sections(parsed)
        log_event(self.logger, "Selected sections", event="select", count=len(sections))

        if sections:
            text = self.normalizer.normalize(mode, strategy.compile(sections))
            self._write_cache(mode, word, text, is_update=cache_hit)
            return LookupOutcome(word=word, mode=mode, text=text, source="fetch")

        suggestions = strategy.suggest(parsed)
        if suggestions is None:
            raise NotFoundError(f"{mode.label} not found")

        text = self.normalizer.convert_plain(suggestions)
        return LookupOutcome(word=word, mode=mode, text=text, source="suggestions")

    def _read_cache(self, mode: Mode, word: str) -> str | None:
        if self.cache is None:
            return None
        result = self.cache.lookup(mode, word)
        if not result.ok:
            log_event(self.logger, "Cache read failed", logging.DEBUG, event="cache_error", error=result.error)
            return None
        return result.value

    def _write_cache(self, mode: Mode, word: str, text: str, is_update: bool) -> None:
        if self.cache is None:
            return
        # Caching is optional; a failed write is only logged
        result = self.cache.upsert(mode, word, text, is_update=is_update)
        log_event(
            self.logger,
            "Cache write" if result.ok else "Cache write failed",
            logging.DEBUG,
            event="cache_write",
            word=word,
            update=is_update,
            error=result.error,
        )


def open_cache(cfg: AppConfig, logger: logging.Logger | None = None) -> LookupCache | None:
    """Open the cache database, or return None when it is disabled or unusable."""
    if not cfg.cache.enabled:
        return None
    cache = LookupCache(resolve_cache_dir(cfg.cache.dir) / cfg.cache.filename)
    result = cache.ensure_schema()
    if not result.ok:
        log_event(logger, "Cache unavailable", logging.DEBUG, event="cache_error", error=result.error)
        return None
    return cache


def build_pipeline(
    cfg: AppConfig,
    cache: LookupCache | None,
    logger: logging.Logger | None = None,
) -> LookupPipeline:
    """Wire the real collaborators from configuration."""
    return LookupPipeline(
        fetch=make_fetcher(cfg.fetch),
        normalizer=TextNormalizer(PandocConverter(cfg.converter.pandoc_path)),
        strategies=build_strategies(cfg.selectors),
        url_builder=partial(build_lookup_url, cfg=cfg.fetch),
        cache=cache,
        logger=logger,
    )


def run_lookup(
    word: str,
    mode: Mode,
    cfg: AppConfig,
    refresh: bool = False,
    show_progress: bool = True,
    console: Console | None = None,
) -> LookupOutcome:
    """Run a complete lookup from configuration.

    Sets up logging, opens the cache and shows a transient spinner while
    the page is fetched and converted.

    Args:
        word: The word or phrase to look up
        mode: Definition or etymology
        cfg: Application configuration
        refresh: Fetch even on a cache hit, then update the cached entry
        show_progress: Whether to display the spinner
        console: Rich console for the spinner (stderr if None)

    Returns:
        The LookupOutcome to print
    """
    logger = setup_logging(cfg.logging, resolve_cache_dir(cfg.cache.dir))
    cache = open_cache(cfg, logger)
    pipeline = build_pipeline(cfg, cache, logger)

    if not show_progress:
        return pipeline.run(word, mode, refresh=refresh)

    with Progress(
        SpinnerColumn(),
        TextColumn("{task.description}"),
        console=console or Console(stderr=True),
        transient=True,
    ) as progress:
        return pipeline.run(word, mode, refresh=refresh, progress=progress)
