"""
Pandoc-backed converter.

Input is written to a temporary file and passed to a ``pandoc``
subprocess; the converted document is read back from its stdout.
"""

from __future__ import annotations

import logging
import os
import subprocess
import tempfile
from typing import Sequence

from ..errors import ConversionError
from .base import Converter, HTML_FORMAT


logger = logging.getLogger("gloss_word.convert")


class PandocConverter(Converter):
    """Runs the pandoc executable once per conversion."""

    def __init__(self, pandoc_path: str = "pandoc"):
        self.pandoc_path = pandoc_path

    def convert(
        self,
        text: str,
        from_format: str,
        to_format: str,
        options: Sequence[str] = (),
    ) -> str:
        suffix = ".html" if from_format == HTML_FORMAT else ".md"
        try:
            with tempfile.NamedTemporaryFile(
                "w", suffix=suffix, encoding="utf-8", delete=False
            ) as handle:
                handle.write(text)
                input_path = handle.name
        except OSError as exc:
            raise ConversionError(f"Failed to write converter input: {exc}") from exc

        try:
            return self._run(input_path, from_format, to_format, options)
        finally:
            try:
                os.unlink(input_path)
            except OSError:
                logger.debug("Could not remove temporary file %s", input_path)

    def _run(
        self,
        input_path: str,
        from_format: str,
        to_format: str,
        options: Sequence[str],
    ) -> str:
        args = [self.pandoc_path, input_path, "-f", from_format, "-t", to_format, *options]
        logger.debug("Running %s", " ".join(args))
        try:
            proc = subprocess.run(args, capture_output=True, check=False)
        except OSError as exc:
            raise ConversionError(f"Failed to execute Pandoc: {exc}") from exc

        if proc.returncode != 0:
            stderr = proc.stderr.decode("utf-8", errors="replace").strip()
            raise ConversionError(f"Pandoc exited with status {proc.returncode}: {stderr}")

        try:
            return proc.stdout.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ConversionError("Failed to convert Pandoc output to string") from exc
