"""Utility functions and constants for turncodec."""

from .constants import (
    DEFAULT_CHARSET,
    HEADER_TWEAK_PREFIXES,
    MAX_COMMAND_LENGTH,
    MESSAGE_CHAR_OFFSET,
)
from .matching import string_match

__all__ = [
    "DEFAULT_CHARSET",
    "HEADER_TWEAK_PREFIXES",
    "MAX_COMMAND_LENGTH",
    "MESSAGE_CHAR_OFFSET",
    "string_match",
]
