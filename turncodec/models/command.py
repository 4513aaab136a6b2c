"""Auxiliary command data model.

Auxiliary commands are instructions embedded in a turn submission that are
interpreted by the remote host rather than by the game engine itself, e.g.
alliance configuration or requests for data files. This module defines the
command value type and the static per-kind classification used by turn
containers to order and deduplicate commands.
"""

import re
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Callable, Iterable, List, Optional

from ..utils.matching import string_match
from .reference import Reference, ReferenceType


class CommandKind(Enum):
    """Closed set of auxiliary command kinds."""

    LANGUAGE = "language"
    SEND_CONFIG = "send_config"
    SEND_RACE_NAMES = "send_race_names"
    SET_RACE_NAME = "set_race_name"
    FILTER = "filter"
    CONFIG_ALLY = "config_ally"
    ADD_DROP_ALLY = "add_drop_ally"
    GIVE_SHIP = "give_ship"
    GIVE_PLANET = "give_planet"
    REMOTE_CONTROL = "remote_control"
    REMOTE_DEFAULT = "remote_default"
    BEAM_UP = "beam_up"
    LEGACY_ALLIANCE_TEXT = "legacy_alliance_text"
    SEND_FCODES = "send_fcodes"
    SEND_FILE = "send_file"
    ENEMIES = "enemies"
    UNLOAD = "unload"
    TRANSFER = "transfer"
    SHOW_SHIP = "show_ship"
    SHOW_PLANET = "show_planet"
    SHOW_MINEFIELD = "show_minefield"
    REFIT = "refit"
    OTHER = "other"


class RaceNameSlot(IntEnum):
    """Which race name a SET_RACE_NAME command changes (stored as its id)."""

    LONG = 1
    SHORT = 2
    ADJECTIVE = 3


@dataclass(frozen=True)
class Command:
    """A single auxiliary command.

    The meaning of ``id`` depends on ``kind``: a ship, planet or minefield
    id, a player number, or a RaceNameSlot. Kinds without an entity use 0.
    The grammar of ``arg`` is kind-specific as well.
    """

    kind: CommandKind
    id: int = 0
    arg: str = ""

    def __post_init__(self):
        """Validate command data after initialization."""
        if not isinstance(self.kind, CommandKind):
            raise ValueError(f"Invalid command kind: {self.kind!r}")
        if self.id < 0:
            raise ValueError(f"Invalid command id: {self.id} (must be >= 0)")


@dataclass(frozen=True)
class CommandClass:
    """Static classification facets of a command kind."""

    order: int = 0  # Transmission order, 0-2
    affects: ReferenceType = ReferenceType.NULL
    replaceable: bool = True  # False: never a duplicate of another command


_COMMAND_CLASSES = {
    CommandKind.LANGUAGE: CommandClass(),
    CommandKind.SEND_CONFIG: CommandClass(order=1),
    CommandKind.SEND_RACE_NAMES: CommandClass(order=2),
    CommandKind.SET_RACE_NAME: CommandClass(),
    CommandKind.FILTER: CommandClass(),
    CommandKind.CONFIG_ALLY: CommandClass(order=1),
    CommandKind.ADD_DROP_ALLY: CommandClass(),
    CommandKind.GIVE_SHIP: CommandClass(affects=ReferenceType.SHIP),
    CommandKind.GIVE_PLANET: CommandClass(affects=ReferenceType.PLANET),
    CommandKind.REMOTE_CONTROL: CommandClass(order=2, affects=ReferenceType.SHIP),
    CommandKind.REMOTE_DEFAULT: CommandClass(order=2),
    CommandKind.BEAM_UP: CommandClass(affects=ReferenceType.SHIP),
    CommandKind.LEGACY_ALLIANCE_TEXT: CommandClass(),
    CommandKind.SEND_FCODES: CommandClass(order=2),
    CommandKind.SEND_FILE: CommandClass(replaceable=False),
    CommandKind.ENEMIES: CommandClass(),
    CommandKind.UNLOAD: CommandClass(affects=ReferenceType.SHIP),
    CommandKind.TRANSFER: CommandClass(affects=ReferenceType.SHIP),
    CommandKind.SHOW_SHIP: CommandClass(affects=ReferenceType.SHIP),
    CommandKind.SHOW_PLANET: CommandClass(affects=ReferenceType.PLANET),
    CommandKind.SHOW_MINEFIELD: CommandClass(affects=ReferenceType.MINEFIELD),
    CommandKind.REFIT: CommandClass(affects=ReferenceType.SHIP),
    CommandKind.OTHER: CommandClass(replaceable=False),
}

_COMMAND_INFO = {
    CommandKind.LANGUAGE: "Set language for host messages",
    CommandKind.SEND_CONFIG: "Request host configuration file",
    CommandKind.SEND_RACE_NAMES: "Request race names file",
    CommandKind.SET_RACE_NAME: "Change race name",
    CommandKind.FILTER: "Enable or disable message filtering",
    CommandKind.CONFIG_ALLY: "Change alliance levels offered to a player",
    CommandKind.ADD_DROP_ALLY: "Offer or cancel an alliance",
    CommandKind.GIVE_SHIP: "Give ship to another player",
    CommandKind.GIVE_PLANET: "Give planet to another player",
    CommandKind.REMOTE_CONTROL: "Remote control a ship",
    CommandKind.REMOTE_DEFAULT: "Set default remote control permission",
    CommandKind.BEAM_UP: "Beam up cargo from a planet",
    CommandKind.LEGACY_ALLIANCE_TEXT: "Alliance settings for legacy hosts",
    CommandKind.SEND_FCODES: "Request list of special friendly codes",
    CommandKind.SEND_FILE: "Send a file to another player",
    CommandKind.ENEMIES: "Declare or cancel enemy status",
    CommandKind.UNLOAD: "Unload cargo to a foreign planet",
    CommandKind.TRANSFER: "Transfer cargo to a foreign ship",
    CommandKind.SHOW_SHIP: "Send ship information to other players",
    CommandKind.SHOW_PLANET: "Send planet information to other players",
    CommandKind.SHOW_MINEFIELD: "Send minefield information to other players",
    CommandKind.REFIT: "Refit ship with new components",
    CommandKind.OTHER: "Unrecognized command",
}

_MESSAGE_INTRODUCERS = ("RUmor", "RUmour", "Message")
_FIRST_WORD = re.compile(r"\s*([^\s:]*)")


def get_command_class(kind: CommandKind) -> CommandClass:
    """Look up the classification facets of a command kind."""
    return _COMMAND_CLASSES[kind]


def _get_affected(cmd: Command, affects: ReferenceType) -> int:
    if _COMMAND_CLASSES[cmd.kind].affects is affects:
        return cmd.id
    return 0


def get_affected_ship(cmd: Command) -> int:
    """Get id of the ship affected by a command, 0 if none."""
    return _get_affected(cmd, ReferenceType.SHIP)


def get_affected_planet(cmd: Command) -> int:
    """Get id of the planet affected by a command, 0 if none."""
    return _get_affected(cmd, ReferenceType.PLANET)


def get_affected_minefield(cmd: Command) -> int:
    """Get id of the minefield affected by a command, 0 if none."""
    return _get_affected(cmd, ReferenceType.MINEFIELD)


def get_affected_unit(cmd: Command) -> Reference:
    """Get a reference to the unit affected by a command.

    Args:
        cmd: Command to inspect

    Returns:
        Ship, planet or minefield reference, or a null reference if the
        command does not affect a unit
    """
    candidates = [
        (ReferenceType.SHIP, get_affected_ship(cmd)),
        (ReferenceType.PLANET, get_affected_planet(cmd)),
        (ReferenceType.MINEFIELD, get_affected_minefield(cmd)),
    ]
    for ref_type, unit_id in candidates:
        if unit_id != 0:
            return Reference(ref_type, unit_id)
    return Reference()


def is_replaceable_command(kind: CommandKind) -> bool:
    """Check whether a new command of this kind replaces one with the same id."""
    return _COMMAND_CLASSES[kind].replaceable


def get_command_order(kind: CommandKind) -> int:
    """Get transmission order of a command kind.

    Commands with lower order must reach the host before commands with higher
    order, e.g. a language change before a configuration request.
    """
    return _COMMAND_CLASSES[kind].order


def sort_commands(commands: Iterable[Command]) -> List[Command]:
    """Sort commands into transmission order.

    The sort is stable: commands of equal order keep their original sequence.

    Args:
        commands: Commands in insertion order

    Returns:
        New list of commands sorted by get_command_order()
    """
    return sorted(commands, key=lambda cmd: get_command_order(cmd.kind))


def get_command_info(
    kind: CommandKind, translator: Optional[Callable[[str], str]] = None
) -> str:
    """Get a one-line description of a command kind for display.

    Args:
        kind: Command kind
        translator: Optional function translating the English description

    Returns:
        Human-readable description
    """
    text = _COMMAND_INFO[kind]
    return translator(text) if translator else text


def is_message_introducer(text: str) -> bool:
    """Check whether a line starts a message rather than a command.

    Lines starting with "rumor", "rumour" or "message" (or abbreviations
    thereof) introduce free text for other players and must not be parsed
    as commands.
    """
    word = _FIRST_WORD.match(text).group(1)
    return any(string_match(pattern, word) for pattern in _MESSAGE_INTRODUCERS)
