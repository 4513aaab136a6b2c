"""Byte charsets for message text."""

import codecs
from typing import Protocol

from ..utils.constants import DEFAULT_CHARSET


class Charset(Protocol):
    """Converts bytes in a game charset to text."""

    def decode(self, data: bytes) -> str: ...


class CodepageCharset:
    """Charset backed by a Python codec, e.g. "cp437" or "latin-1".

    Undecodable bytes are replaced rather than raising, so that garbled
    messages still display.
    """

    def __init__(self, encoding: str = DEFAULT_CHARSET):
        """Initialize charset.

        Args:
            encoding: Codec name known to Python's codec registry

        Raises:
            LookupError: If the codec does not exist
        """
        self.encoding = codecs.lookup(encoding).name

    def decode(self, data: bytes) -> str:
        return data.decode(self.encoding, errors="replace")

    def __repr__(self) -> str:
        return f"CodepageCharset({self.encoding!r})"
