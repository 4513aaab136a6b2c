"""Text interface between users, the command model and the host."""

from .command_parser import CommandParser, parse_command
from .command_text import get_command_text, trim_command

__all__ = [
    "CommandParser",
    "get_command_text",
    "parse_command",
    "trim_command",
]
