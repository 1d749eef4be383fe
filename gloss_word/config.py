"""
Configuration management using YAML files and dataclasses.

This module defines all configuration dataclasses and provides loading
from YAML files with defaults. Configuration sections:
- FetchConfig: HTTP fetching settings and target site URLs
- ConverterConfig: External document converter settings
- SelectorConfig: Structural queries used to pick page fragments
- CacheConfig: Cache store location and switch
- LoggingConfig: Logging behavior
- AppConfig: Root configuration container
"""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from pathlib import Path
from typing import Any

import yaml


CONFIG_ENV = "GLOSS_WORD_CONFIG"


@dataclass
class FetchConfig:
    """Configuration for HTTP page fetching.

    Attributes:
        timeout_seconds: HTTP request timeout
        retries: Number of retry attempts for failed requests (0 = none)
        trust_env: Whether to respect system proxy settings
        user_agent: HTTP User-Agent header string
        definition_url: Base URL the definition word is appended to
        etymology_url: Base URL the etymology word is appended to
    """

    timeout_seconds: float = 20.0
    retries: int = 0
    trust_env: bool = True
    user_agent: str = (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/120.0.0.0 Safari/537.36"
    )
    definition_url: str = "https://www.thefreedictionary.com/"
    etymology_url: str = "https://www.etymonline.com/word/"


@dataclass
class ConverterConfig:
    """Configuration for the Pandoc converter.

    Attributes:
        pandoc_path: Executable name or path of the pandoc binary
    """

    pandoc_path: str = "pandoc"


@dataclass
class SelectorConfig:
    """CSS queries used to slice and select page fragments.

    Attributes:
        definition_marker: Literal text where the irrelevant tail of a
            definition page starts
        definition_section: Entry container on the definition page
        definition_parts: Inner elements compiled from the entry container
        etymology_section: Word-sense blocks on the etymology page
        suggestions: "Did you mean" list items on the definition page
    """

    definition_marker: str = '<div id="Thesaurus">'
    definition_section: str = 'div#Definition section[data-src="hm"]'
    definition_parts: str = "div.pseg, h2, hr.hmsep"
    etymology_section: str = 'div[class*="word--"]:not([class*="word_4pc"])'
    suggestions: str = "ul.suggestions li"


@dataclass
class CacheConfig:
    """Configuration for the lookup cache.

    Attributes:
        enabled: Whether to read and write the cache at all
        dir: Custom cache directory (defaults to the platform cache location)
        filename: SQLite database file name inside the cache directory
    """

    enabled: bool = True
    dir: str | None = None
    filename: str = "entries.sqlite"


@dataclass
class LoggingConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR")
        console: Whether to log to the console (stderr)
        file: Whether to log to a file in the cache directory
        format: Log file format ("jsonl" or "plain")
        filename: Name of the log file
    """

    level: str = "WARNING"
    console: bool = True
    file: bool = False
    format: str = "jsonl"
    filename: str = "gloss.jsonl"


@dataclass
class AppConfig:
    """Root configuration container aggregating all config sections."""

    fetch: FetchConfig = field(default_factory=FetchConfig)
    converter: ConverterConfig = field(default_factory=ConverterConfig)
    selectors: SelectorConfig = field(default_factory=SelectorConfig)
    cache: CacheConfig = field(default_factory=CacheConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | None) -> AppConfig:
    """Load configuration from a YAML file with defaults.

    Falls back to the file named by ``GLOSS_WORD_CONFIG`` when no path is
    given. A fresh AppConfig is returned every time so callers can mutate it.
    """
    path = path or os.getenv(CONFIG_ENV)
    if not path:
        return AppConfig()

    with open(Path(path).expanduser(), "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"Config file {path} must contain a mapping")
    return _merge_config(AppConfig(), raw)


def _merge_config(base: AppConfig, raw: dict[str, Any]) -> AppConfig:
    """Merge raw YAML config into base AppConfig."""
    data = _asdict(base)
    for key, value in raw.items():
        if key not in data:
            continue
        if isinstance(value, dict) and isinstance(data[key], dict):
            data[key].update({k: v for k, v in value.items() if k in data[key]})
    return _fromdict(data)


def _asdict(cfg: AppConfig) -> dict[str, Any]:
    """Convert AppConfig to nested dictionary."""
    return {
        "fetch": {
            "timeout_seconds": cfg.fetch.timeout_seconds,
            "retries": cfg.fetch.retries,
            "trust_env": cfg.fetch.trust_env,
            "user_agent": cfg.fetch.user_agent,
            "definition_url": cfg.fetch.definition_url,
            "etymology_url": cfg.fetch.etymology_url,
        },
        "converter": {
            "pandoc_path": cfg.converter.pandoc_path,
        },
        "selectors": {
            "definition_marker": cfg.selectors.definition_marker,
            "definition_section": cfg.selectors.definition_section,
            "definition_parts": cfg.selectors.definition_parts,
            "etymology_section": cfg.selectors.etymology_section,
            "suggestions": cfg.selectors.suggestions,
        },
        "cache": {
            "enabled": cfg.cache.enabled,
            "dir": cfg.cache.dir,
            "filename": cfg.cache.filename,
        },
        "logging": {
            "level": cfg.logging.level,
            "console": cfg.logging.console,
            "file": cfg.logging.file,
            "format": cfg.logging.format,
            "filename": cfg.logging.filename,
        },
    }


def _fromdict(data: dict[str, Any]) -> AppConfig:
    """Reconstruct AppConfig from nested dictionary."""
    return AppConfig(
        fetch=FetchConfig(**data["fetch"]),
        converter=ConverterConfig(**data["converter"]),
        selectors=SelectorConfig(**data["selectors"]),
        cache=CacheConfig(**data["cache"]),
        logging=LoggingConfig(**data["logging"]),
    )
