"""Tests for the pandoc subprocess wrapper, with the subprocess faked."""

from __future__ import annotations

import os
import subprocess

import pytest

from gloss_word.convert import HTML_FORMAT, MARKDOWN_FORMAT, NO_WRAP, PLAIN_FORMAT, PandocConverter
from gloss_word.convert import pandoc
from gloss_word.errors import ConversionError


def _fake_run(calls, returncode=0, stdout=b"converted\n", stderr=b""):
    def fake(args, capture_output, check):
        with open(args[1], encoding="utf-8") as handle:
            calls.append({"args": args, "input": handle.read()})
        return subprocess.CompletedProcess(args, returncode, stdout=stdout, stderr=stderr)

    return fake


def test_invokes_pandoc_with_formats_and_options(monkeypatch):
    calls = []
    monkeypatch.setattr(pandoc.subprocess, "run", _fake_run(calls))

    output = PandocConverter("/usr/bin/pandoc").convert("<p>x</p>", HTML_FORMAT, MARKDOWN_FORMAT, (NO_WRAP,))

    assert output == "converted\n"
    args = calls[0]["args"]
    assert args[0] == "/usr/bin/pandoc"
    assert args[1].endswith(".html")
    assert args[2:] == ["-f", HTML_FORMAT, "-t", MARKDOWN_FORMAT, NO_WRAP]
    assert calls[0]["input"] == "<p>x</p>"


def test_removes_temporary_input(monkeypatch):
    calls = []
    monkeypatch.setattr(pandoc.subprocess, "run", _fake_run(calls))

    PandocConverter().convert("text", MARKDOWN_FORMAT, PLAIN_FORMAT)

    assert calls[0]["args"][1].endswith(".md")
    assert not os.path.exists(calls[0]["args"][1])


def test_nonzero_exit_is_conversion_error(monkeypatch):
    calls = []
    monkeypatch.setattr(pandoc.subprocess, "run", _fake_run(calls, returncode=64, stderr=b"Unknown input format"))

    with pytest.raises(ConversionError, match="Unknown input format"):
        PandocConverter().convert("text", MARKDOWN_FORMAT, PLAIN_FORMAT)
    assert not os.path.exists(calls[0]["args"][1])


def test_undecodable_output_is_conversion_error(monkeypatch):
    monkeypatch.setattr(pandoc.subprocess, "run", _fake_run([], stdout=b"\xff\xfe\xfa"))

    with pytest.raises(ConversionError, match="Failed to convert Pandoc output"):
        PandocConverter().convert("text", MARKDOWN_FORMAT, PLAIN_FORMAT)


def test_missing_binary_is_conversion_error():
    converter = PandocConverter("definitely-not-a-pandoc-binary")
    with pytest.raises(ConversionError, match="Failed to execute Pandoc"):
        converter.convert("<p>x</p>", HTML_FORMAT, PLAIN_FORMAT)


def test_unwritable_temp_dir_is_conversion_error(monkeypatch):
    def broken(*args, **kwargs):
        raise OSError("read-only file system")

    monkeypatch.setattr(pandoc.tempfile, "NamedTemporaryFile", broken)

    with pytest.raises(ConversionError, match="Failed to write converter input"):
        PandocConverter().convert("text", MARKDOWN_FORMAT, PLAIN_FORMAT)
