"""Message text decoding."""

from .charset import Charset, CodepageCharset
from .decoder import RewrapMode, decode_message
from .header import normalize_header
from .inbox import InboxErrorType, InboxFile, InboxFileError, MessageEntry

__all__ = [
    "Charset",
    "CodepageCharset",
    "InboxErrorType",
    "InboxFile",
    "InboxFileError",
    "MessageEntry",
    "RewrapMode",
    "decode_message",
    "normalize_header",
]
