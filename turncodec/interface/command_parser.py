"""Free-text parser for auxiliary commands.

This module parses user-typed lines like "allies add 7" or "be 333 n100"
into Command objects. Keywords may be abbreviated down to their mandatory
letters (see string_match), so "s c" and "send config" are the same command.
"""

import logging
import re
from typing import Callable, List, Optional, Tuple

from ..models.command import Command, CommandKind, RaceNameSlot
from ..utils.matching import string_match

logger = logging.getLogger(__name__)

_WORD = re.compile(r"\S+")
_NUMBER = re.compile(r"[0-9]+")

_REMOTE_FLAGS = ("Allow", "Forbid", "Control", "Drop")


class _Words:
    """Whitespace-separated words of a command line.

    Words are addressed relative to ``offset`` so a leading "phost:" prefix
    can be skipped without re-splitting the line.
    """

    def __init__(self, text: str):
        self.text = text
        self.spans = [match.span() for match in _WORD.finditer(text)]
        self.offset = 0

    def word(self, index: int) -> str:
        index += self.offset
        if index >= len(self.spans):
            return ""
        start, end = self.spans[index]
        return self.text[start:end]

    def rest(self, index: int) -> str:
        """Return the line starting at the given word, internal spacing kept."""
        index += self.offset
        if index >= len(self.spans):
            return ""
        return self.text[self.spans[index][0] :].strip()

    def number(self, index: int) -> Optional[int]:
        word = self.word(index)
        if not _NUMBER.fullmatch(word):
            return None
        return int(word)


class CommandParser:
    """Parse free-text lines into auxiliary Commands."""

    def __init__(self):
        """Initialize parser with its verb table."""
        self._families: List[Tuple[str, Callable[[_Words, bool], Optional[Command]]]] = [
            ("Send", self._parse_send),
            ("Language", self._parse_language),
            ("Filter", self._parse_filter),
            ("Give", self._parse_give),
            ("Allies", self._parse_allies),
            ("REmote", self._parse_remote),
            ("BEamup", self._parse_beamup),
            ("UNLoad", self._parse_unload),
            ("TRAnsfer", self._parse_transfer),
            ("RAcename", self._parse_race_name),
            ("ENEmies", self._parse_enemies),
            ("SHow", self._parse_show),
            ("REFit", self._parse_refit),
        ]

    def parse(
        self, text: str, from_file: bool = False, accept_proto: bool = False
    ) -> Optional[Command]:
        """Parse a line of text into a Command.

        Args:
            text: Line typed by the user or read from a command file
            from_file: True if the line comes from a command file; enables
                the file-only "$thost-allies" and "$send-file" commands
            accept_proto: True to accept incomplete commands whose required
                argument is still missing (for live preview while typing)

        Returns:
            Command if the line is a valid command, None otherwise
        """
        words = _Words(text)
        verb = words.word(0)

        if from_file:
            if verb.upper() == "$THOST-ALLIES":
                return Command(CommandKind.LEGACY_ALLIANCE_TEXT, 0, words.rest(1))
            if string_match("$SEND-File", verb):
                return Command(CommandKind.SEND_FILE, 0, words.rest(1))

        if verb.lower() in ("phost", "phost:"):
            words.offset = 1
            verb = words.word(0)

        for pattern, handler in self._families:
            if string_match(pattern, verb):
                command = handler(words, accept_proto)
                if command is None:
                    logger.debug(f"Malformed '{pattern}' command: {text!r}")
                return command

        logger.debug(f"Not a command: {text!r}")
        return None

    def _parse_send(self, words: _Words, accept_proto: bool) -> Optional[Command]:
        what = words.word(1)
        if string_match("Config", what):
            return Command(CommandKind.SEND_CONFIG)
        if string_match("Racenames", what):
            return Command(CommandKind.SEND_RACE_NAMES)
        if string_match("Fcodes", what):
            return Command(CommandKind.SEND_FCODES)
        return None

    def _parse_language(self, words: _Words, accept_proto: bool) -> Optional[Command]:
        arg = words.rest(1)
        if not arg and not accept_proto:
            return None
        return Command(CommandKind.LANGUAGE, 0, arg)

    def _parse_filter(self, words: _Words, accept_proto: bool) -> Optional[Command]:
        arg = words.rest(1)
        if not arg and not accept_proto:
            return None
        return Command(CommandKind.FILTER, 0, arg)

    def _parse_give(self, words: _Words, accept_proto: bool) -> Optional[Command]:
        """Parse 'give ship|planet <id> [to] <player>'."""
        what = words.word(1)
        if string_match("Ship", what):
            kind = CommandKind.GIVE_SHIP
        elif string_match("Planet", what):
            kind = CommandKind.GIVE_PLANET
        else:
            return None

        unit_id = words.number(2)
        if unit_id is None:
            return None

        index = 4 if string_match("To", words.word(3)) else 3
        receiver = words.word(index)
        if not receiver and not accept_proto:
            return None
        return Command(kind, unit_id, receiver)

    def _parse_allies(self, words: _Words, accept_proto: bool) -> Optional[Command]:
        """Parse 'allies config <player> <flags>' and 'allies add|drop <player>'."""
        action = words.word(1)
        player = words.number(2)
        if player is None:
            return None

        if string_match("Config", action):
            flags = words.rest(3)
            if not flags and not accept_proto:
                return None
            return Command(CommandKind.CONFIG_ALLY, player, flags)
        if string_match("Add", action) or string_match("Drop", action):
            return Command(CommandKind.ADD_DROP_ALLY, player, action)
        return None

    def _parse_remote(self, words: _Words, accept_proto: bool) -> Optional[Command]:
        """Parse 'remote <flag> <ship>' and 'remote <flag> default'.

        The flag of a default setting is passed through unchecked.
        """
        flag = words.word(1)
        if string_match("Default", words.word(2)):
            return Command(CommandKind.REMOTE_DEFAULT, 0, flag)

        ship_id = words.number(2)
        if ship_id is None:
            return None
        if not accept_proto and not any(string_match(p, flag) for p in _REMOTE_FLAGS):
            return None
        return Command(CommandKind.REMOTE_CONTROL, ship_id, flag)

    def _parse_unit_with_rest(
        self, kind: CommandKind, words: _Words
    ) -> Optional[Command]:
        unit_id = words.number(1)
        if unit_id is None:
            return None
        return Command(kind, unit_id, words.rest(2))

    def _parse_beamup(self, words: _Words, accept_proto: bool) -> Optional[Command]:
        return self._parse_unit_with_rest(CommandKind.BEAM_UP, words)

    def _parse_unload(self, words: _Words, accept_proto: bool) -> Optional[Command]:
        return self._parse_unit_with_rest(CommandKind.UNLOAD, words)

    def _parse_transfer(self, words: _Words, accept_proto: bool) -> Optional[Command]:
        return self._parse_unit_with_rest(CommandKind.TRANSFER, words)

    def _parse_refit(self, words: _Words, accept_proto: bool) -> Optional[Command]:
        return self._parse_unit_with_rest(CommandKind.REFIT, words)

    def _parse_race_name(self, words: _Words, accept_proto: bool) -> Optional[Command]:
        which = words.word(1)
        if string_match("Long", which):
            slot = RaceNameSlot.LONG
        elif string_match("Short", which):
            slot = RaceNameSlot.SHORT
        elif string_match("Adjective", which):
            slot = RaceNameSlot.ADJECTIVE
        else:
            return None
        return Command(CommandKind.SET_RACE_NAME, int(slot), words.rest(2))

    def _parse_enemies(self, words: _Words, accept_proto: bool) -> Optional[Command]:
        action = words.word(1)
        player = words.number(2)
        if player is None:
            return None
        if not accept_proto and not (
            string_match("Add", action) or string_match("Drop", action)
        ):
            return None
        return Command(CommandKind.ENEMIES, player, action)

    def _parse_show(self, words: _Words, accept_proto: bool) -> Optional[Command]:
        """Parse 'show ship|planet|minefield <id> [to] <players>'."""
        what = words.word(1)
        if string_match("Ship", what):
            kind = CommandKind.SHOW_SHIP
        elif string_match("Planet", what):
            kind = CommandKind.SHOW_PLANET
        elif string_match("Minefield", what):
            kind = CommandKind.SHOW_MINEFIELD
        else:
            return None

        unit_id = words.number(2)
        if unit_id is None:
            return None

        index = 4 if string_match("To", words.word(3)) else 3
        return Command(kind, unit_id, words.rest(index))


def parse_command(
    text: str, from_file: bool = False, accept_proto: bool = False
) -> Optional[Command]:
    """Parse a line of text into a Command using a default parser."""
    return _DEFAULT_PARSER.parse(text, from_file, accept_proto)


_DEFAULT_PARSER = CommandParser()
