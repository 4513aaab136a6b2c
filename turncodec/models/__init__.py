"""Data models for turncodec."""

from .command import (
    Command,
    CommandClass,
    CommandKind,
    RaceNameSlot,
    get_affected_minefield,
    get_affected_planet,
    get_affected_ship,
    get_affected_unit,
    get_command_class,
    get_command_info,
    get_command_order,
    is_message_introducer,
    is_replaceable_command,
    sort_commands,
)
from .reference import Reference, ReferenceType

__all__ = [
    "Command",
    "CommandClass",
    "CommandKind",
    "RaceNameSlot",
    "Reference",
    "ReferenceType",
    "get_affected_minefield",
    "get_affected_planet",
    "get_affected_ship",
    "get_affected_unit",
    "get_command_class",
    "get_command_info",
    "get_command_order",
    "is_message_introducer",
    "is_replaceable_command",
    "sort_commands",
]
