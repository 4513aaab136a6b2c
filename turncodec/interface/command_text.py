"""Canonical wire text for auxiliary commands."""

from ..models.command import Command, CommandKind, RaceNameSlot
from ..utils.constants import MAX_COMMAND_LENGTH

_TEMPLATES = {
    CommandKind.LANGUAGE: "language {arg}",
    CommandKind.SEND_CONFIG: "send config",
    CommandKind.SEND_RACE_NAMES: "send racenames",
    CommandKind.SEND_FCODES: "send fcodes",
    CommandKind.FILTER: "filter {arg}",
    CommandKind.CONFIG_ALLY: "allies config {id} {arg}",
    CommandKind.ADD_DROP_ALLY: "allies {arg} {id}",
    CommandKind.GIVE_SHIP: "give ship {id} to {arg}",
    CommandKind.GIVE_PLANET: "give planet {id} to {arg}",
    CommandKind.REMOTE_CONTROL: "remote {arg} {id}",
    CommandKind.REMOTE_DEFAULT: "remote {arg} default",
    CommandKind.LEGACY_ALLIANCE_TEXT: "$thost-allies {arg}",
    CommandKind.SEND_FILE: "$send-file {arg}",
    CommandKind.ENEMIES: "enemies {arg} {id}",
    CommandKind.REFIT: "refit {id} {arg}",
}

# Verb and shortest acceptable abbreviation for length-limited commands
_TRIMMED_VERBS = {
    CommandKind.BEAM_UP: ("beamup", 2),
    CommandKind.UNLOAD: ("unload", 3),
    CommandKind.TRANSFER: ("transfer", 3),
    CommandKind.SHOW_SHIP: ("show ship", 6),
    CommandKind.SHOW_PLANET: ("show planet", 6),
    CommandKind.SHOW_MINEFIELD: ("show minefield", 6),
}

_RACE_NAME_WORDS = {
    RaceNameSlot.LONG: "long",
    RaceNameSlot.SHORT: "short",
    RaceNameSlot.ADJECTIVE: "adj",
}


def trim_command(verb: str, min_len: int, arg: str) -> str:
    """Shorten a command verb so the line fits the legacy length limit.

    Some hosts reject command lines longer than MAX_COMMAND_LENGTH. The verb
    is abbreviated as far as needed, but never below min_len characters.
    If the argument alone is too long the result still exceeds the limit.

    Args:
        verb: Full command verb, e.g. "beamup"
        min_len: Shortest abbreviation the host still accepts
        arg: Argument text including its leading space

    Returns:
        Command line

    Examples:
        >>> trim_command("beamup", 2, " 140 T999 D99 M99 S999 C999 $999 N99")
        'beam 140 T999 D99 M99 S999 C999 $999 N99'
    """
    if len(verb) + len(arg) > MAX_COMMAND_LENGTH:
        if len(arg) > MAX_COMMAND_LENGTH - min_len:
            verb = verb[:min_len]
        else:
            verb = verb[: MAX_COMMAND_LENGTH - len(arg)]
    return verb + arg


def get_command_text(cmd: Command) -> str:
    """Format a command the way the host expects it in a turn file.

    Args:
        cmd: Command to format

    Returns:
        Command line text
    """
    if cmd.kind is CommandKind.OTHER:
        return cmd.arg

    if cmd.kind is CommandKind.SET_RACE_NAME:
        return f"race {_RACE_NAME_WORDS[cmd.id]} {cmd.arg}"

    if cmd.kind in _TRIMMED_VERBS:
        verb, min_len = _TRIMMED_VERBS[cmd.kind]
        return trim_command(verb, min_len, f" {cmd.id} {cmd.arg}")

    return _TEMPLATES[cmd.kind].format(id=cmd.id, arg=cmd.arg)
