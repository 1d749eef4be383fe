"""
Command-line interface for gloss-word.

Uses Typer to expose a single ``gloss`` command that looks up a word's
definition (or etymology with ``-e``) and prints it as plain text.
"""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import typer
import yaml
from rich.console import Console

from .cache import clear_cache_dir
from .config import load_config
from .core.types import Mode
from .errors import GlossError
from .paths import resolve_cache_dir
from .runner import run_lookup

app = typer.Typer(add_completion=False)
err_console = Console(stderr=True)


@app.command()
def lookup(
    word: str | None = typer.Argument(None, help="The word or phrase to look up"),
    etymology: bool = typer.Option(
        False, "--etymology", "-e", help="Search for etymology instead of definition."
    ),
    fetch_update: bool = typer.Option(
        False, "--fetch-update", "-f", help="Fetch new data; update cache if applicable."
    ),
    clear_cache: bool = typer.Option(
        False, "--clear-cache", help="Delete cache directory and its contents."
    ),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True, dir_okay=False),
    progress: bool = typer.Option(True, "--progress/--no-progress"),
    no_cache: bool = typer.Option(False, "--no-cache", help="Neither read nor write the cache."),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
):
    """Look up a definition or etymology.

    Args:
        word: Word or phrase to look up (lower-cased before use)
        etymology: Use the etymology site instead of the dictionary
        fetch_update: Bypass a cache hit and overwrite the cached entry
        clear_cache: Delete the cache directory and exit
        config: Optional path to YAML config file
        progress: Whether to show the fetch spinner
        no_cache: Disable the cache for this run
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    try:
        cfg = load_config(str(config) if config else None)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc

    if log_level:
        cfg.logging.level = log_level
    if no_cache:
        cfg.cache.enabled = False

    if clear_cache:
        try:
            clear_cache_dir(resolve_cache_dir(cfg.cache.dir))
        except GlossError as exc:
            _fail(exc)
        err_console.print("Cache directory deleted")
        return

    if not word:
        raise typer.BadParameter("Missing word to look up", param_hint="WORD")

    try:
        outcome = run_lookup(
            word,
            Mode.from_flag(etymology),
            cfg,
            refresh=fetch_update,
            show_progress=progress,
            console=err_console,
        )
    except GlossError as exc:
        _fail(exc)

    typer.echo(outcome.render(), nl=False)


def _fail(exc: GlossError) -> NoReturn:
    err_console.print(f"Error: {exc}", markup=False, highlight=False)
    raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
