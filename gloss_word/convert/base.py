"""Abstract interface for document converters."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence


# HTML with smart typography; div containers are read as plain content
HTML_FORMAT = "html+smart-native_divs"
MARKDOWN_FORMAT = "markdown"
PLAIN_FORMAT = "plain"
NO_WRAP = "--wrap=none"


class Converter(ABC):
    """Converts text between document formats."""

    @abstractmethod
    def convert(
        self,
        text: str,
        from_format: str,
        to_format: str,
        options: Sequence[str] = (),
    ) -> str:
        """Return ``text`` converted from ``from_format`` to ``to_format``.

        Raises:
            ConversionError: if the conversion cannot be run or its output
                cannot be decoded
        """
        raise NotImplementedError
