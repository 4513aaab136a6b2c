"""Auxiliary command and message codec for turn-based host games."""

from .config import CodecSettings
from .interface import CommandParser, get_command_text, parse_command, trim_command
from .messages import CodepageCharset, InboxFile, decode_message, normalize_header
from .models import Command, CommandKind, Reference, ReferenceType

__all__ = [
    "CodecSettings",
    "CodepageCharset",
    "Command",
    "CommandKind",
    "CommandParser",
    "InboxFile",
    "Reference",
    "ReferenceType",
    "decode_message",
    "get_command_text",
    "normalize_header",
    "parse_command",
    "trim_command",
]
