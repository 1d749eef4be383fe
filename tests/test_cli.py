"""Tests for the gloss command-line interface."""

from __future__ import annotations

from typer.testing import CliRunner

from gloss_word import cli
from gloss_word.core.types import LookupOutcome, Mode
from gloss_word.errors import NotFoundError
from gloss_word.paths import CACHE_DIR_ENV


runner = CliRunner()


def _fake_lookup(calls, outcome=None, error=None):
    def fake(word, mode, cfg, refresh=False, show_progress=True, console=None):
        calls.append({"word": word, "mode": mode, "refresh": refresh, "cfg": cfg})
        if error is not None:
            raise error
        return outcome

    return fake


def test_prints_entry_verbatim(monkeypatch):
    calls = []
    outcome = LookupOutcome(word="atavism", mode=Mode.DEFINITION, text="at·a·vism\n\nn.\n", source="fetch")
    monkeypatch.setattr(cli, "run_lookup", _fake_lookup(calls, outcome))

    result = runner.invoke(cli.app, ["Atavism"])

    assert result.exit_code == 0
    assert "at·a·vism\n\nn.\n" in result.output
    assert calls[0]["word"] == "Atavism"
    assert calls[0]["mode"] is Mode.DEFINITION
    assert calls[0]["refresh"] is False


def test_etymology_and_refresh_flags(monkeypatch):
    calls = []
    outcome = LookupOutcome(word="forest", mode=Mode.ETYMOLOGY, text="forest (n.)\n", source="fetch")
    monkeypatch.setattr(cli, "run_lookup", _fake_lookup(calls, outcome))

    result = runner.invoke(cli.app, ["-e", "-f", "--no-cache", "forest"])

    assert result.exit_code == 0
    assert calls[0]["mode"] is Mode.ETYMOLOGY
    assert calls[0]["refresh"] is True
    assert calls[0]["cfg"].cache.enabled is False


def test_prints_suggestions_with_header(monkeypatch):
    outcome = LookupOutcome(word="atavsim", mode=Mode.DEFINITION, text="-   atavism\n", source="suggestions")
    monkeypatch.setattr(cli, "run_lookup", _fake_lookup([], outcome))

    result = runner.invoke(cli.app, ["atavsim"])

    assert result.exit_code == 0
    assert "Did you mean:\n\n-   atavism\n" in result.output


def test_not_found_exits_with_error(monkeypatch):
    monkeypatch.setattr(cli, "run_lookup", _fake_lookup([], error=NotFoundError("Definition not found")))

    result = runner.invoke(cli.app, ["qwxz"])

    assert result.exit_code == 1
    assert "Definition not found" in result.output


def test_missing_word_is_usage_error():
    result = runner.invoke(cli.app, [])
    assert result.exit_code == 2


def test_clear_cache_deletes_directory(tmp_path, monkeypatch):
    cache_dir = tmp_path / "cache"
    cache_dir.mkdir()
    (cache_dir / "entries.sqlite").write_text("", encoding="utf-8")
    monkeypatch.setenv(CACHE_DIR_ENV, str(cache_dir))

    result = runner.invoke(cli.app, ["--clear-cache"])

    assert result.exit_code == 0
    assert not cache_dir.exists()


def test_clear_missing_cache_fails(tmp_path, monkeypatch):
    monkeypatch.setenv(CACHE_DIR_ENV, str(tmp_path / "missing"))

    result = runner.invoke(cli.app, ["--clear-cache"])

    assert result.exit_code == 1
    assert "Cache directory not found" in result.output
