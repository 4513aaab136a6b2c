"""Tests for the command model and its classification."""

import pytest

from turncodec.models import (
    Command,
    CommandKind,
    Reference,
    ReferenceType,
    get_affected_minefield,
    get_affected_planet,
    get_affected_ship,
    get_affected_unit,
    get_command_info,
    get_command_order,
    is_message_introducer,
    is_replaceable_command,
    sort_commands,
)

K = CommandKind

# One sample command per kind: (command, affected reference type)
SAMPLES = [
    (Command(K.LANGUAGE, 0, "en"), ReferenceType.NULL),
    (Command(K.SEND_CONFIG, 0, ""), ReferenceType.NULL),
    (Command(K.SEND_RACE_NAMES, 9, ""), ReferenceType.NULL),
    (Command(K.SET_RACE_NAME, 1, "Ho"), ReferenceType.NULL),
    (Command(K.FILTER, 0, "no"), ReferenceType.NULL),
    (Command(K.CONFIG_ALLY, 9, "+c"), ReferenceType.NULL),
    (Command(K.ADD_DROP_ALLY, 9, "a"), ReferenceType.NULL),
    (Command(K.GIVE_SHIP, 12, "11"), ReferenceType.SHIP),
    (Command(K.GIVE_PLANET, 17, "10"), ReferenceType.PLANET),
    (Command(K.REMOTE_CONTROL, 4, "a"), ReferenceType.SHIP),
    (Command(K.REMOTE_DEFAULT, 0, "d"), ReferenceType.NULL),
    (Command(K.BEAM_UP, 77, "M7"), ReferenceType.SHIP),
    (Command(K.LEGACY_ALLIANCE_TEXT, 0, "ff"), ReferenceType.NULL),
    (Command(K.SEND_FCODES, 0, ""), ReferenceType.NULL),
    (Command(K.SEND_FILE, 0, "ab"), ReferenceType.NULL),
    (Command(K.ENEMIES, 4, "a"), ReferenceType.NULL),
    (Command(K.UNLOAD, 33, "$5"), ReferenceType.SHIP),
    (Command(K.TRANSFER, 150, "N3"), ReferenceType.SHIP),
    (Command(K.SHOW_SHIP, 259, "3"), ReferenceType.SHIP),
    (Command(K.SHOW_PLANET, 149, "4"), ReferenceType.PLANET),
    (Command(K.SHOW_MINEFIELD, 1, "5"), ReferenceType.MINEFIELD),
    (Command(K.REFIT, 451, "12"), ReferenceType.SHIP),
    (Command(K.OTHER, 0, "Yo"), ReferenceType.NULL),
]


class TestCommand:
    """Test Command dataclass."""

    def test_defaults(self):
        """Kinds without entity default to id 0 and empty arg."""
        cmd = Command(K.SEND_CONFIG)
        assert cmd.id == 0
        assert cmd.arg == ""

    def test_negative_id(self):
        """Command validation rejects negative ids."""
        with pytest.raises(ValueError, match="Invalid command id"):
            Command(K.GIVE_SHIP, -1, "3")

    def test_invalid_kind(self):
        """Command validation rejects non-kind values."""
        with pytest.raises(ValueError, match="Invalid command kind"):
            Command("language", 0, "en")

    def test_hashable(self):
        """Commands are values."""
        assert len({Command(K.FILTER, 0, "y"), Command(K.FILTER, 0, "y")}) == 1

    def test_samples_cover_all_kinds(self):
        assert {cmd.kind for cmd, _ in SAMPLES} == set(CommandKind)


@pytest.mark.parametrize("cmd,affected", SAMPLES)
def test_affected_unit(cmd, affected):
    """Affected unit follows the kind's classification."""
    assert get_affected_ship(cmd) == (cmd.id if affected is ReferenceType.SHIP else 0)
    assert get_affected_planet(cmd) == (cmd.id if affected is ReferenceType.PLANET else 0)
    assert get_affected_minefield(cmd) == (
        cmd.id if affected is ReferenceType.MINEFIELD else 0
    )

    ref = get_affected_unit(cmd)
    if affected is ReferenceType.NULL:
        assert ref == Reference()
        assert not ref.is_set()
    else:
        assert ref == Reference(affected, cmd.id)
        assert ref.is_set()


def test_affected_unit_ignores_id_of_entityless_kind():
    """Player numbers are never reported as units."""
    assert get_affected_unit(Command(K.ENEMIES, 4, "add")) == Reference()
    assert get_affected_ship(Command(K.SEND_RACE_NAMES, 9)) == 0


class TestCommandOrder:
    """Test ordering constraints."""

    def test_language_before_config_before_racenames(self):
        assert get_command_order(K.LANGUAGE) < get_command_order(K.SEND_CONFIG)
        assert get_command_order(K.SEND_CONFIG) < get_command_order(K.SEND_RACE_NAMES)

    def test_set_before_send(self):
        assert get_command_order(K.SET_RACE_NAME) < get_command_order(K.SEND_RACE_NAMES)
        assert get_command_order(K.FILTER) < get_command_order(K.SEND_CONFIG)

    def test_alliance_sequence(self):
        assert get_command_order(K.ADD_DROP_ALLY) < get_command_order(K.CONFIG_ALLY)
        assert get_command_order(K.CONFIG_ALLY) < get_command_order(K.REMOTE_CONTROL)

    def test_range(self):
        assert all(0 <= get_command_order(kind) <= 2 for kind in CommandKind)

    def test_sort_commands_is_stable(self):
        """Commands of equal order keep insertion order."""
        commands = [
            Command(K.SEND_RACE_NAMES),
            Command(K.SEND_CONFIG),
            Command(K.GIVE_SHIP, 3, "4"),
            Command(K.LANGUAGE, 0, "en"),
            Command(K.GIVE_SHIP, 1, "4"),
        ]
        assert sort_commands(commands) == [
            Command(K.GIVE_SHIP, 3, "4"),
            Command(K.LANGUAGE, 0, "en"),
            Command(K.GIVE_SHIP, 1, "4"),
            Command(K.SEND_CONFIG),
            Command(K.SEND_RACE_NAMES),
        ]


def test_replaceable():
    """Only free-text kinds are never replaced."""
    assert not is_replaceable_command(K.SEND_FILE)
    assert not is_replaceable_command(K.OTHER)
    assert is_replaceable_command(K.GIVE_SHIP)
    assert is_replaceable_command(K.LANGUAGE)


def test_command_info():
    """Every kind has a description, passed through the translator."""
    for kind in CommandKind:
        assert get_command_info(kind)
    assert get_command_info(K.GIVE_SHIP, lambda s: f"[{s}]") == (
        f"[{get_command_info(K.GIVE_SHIP)}]"
    )


@pytest.mark.parametrize(
    "text,expected",
    [
        ("message 1 2 3", True),
        ("message u", True),
        ("m u", True),
        ("rumor u", True),
        ("rumour u", True),
        ("ru u", True),
        ("rumor: the fleet has landed", True),
        ("  Message: hi", True),
        ("r u", False),
        ("hello there", False),
        ("remote c 333", False),
        ("", False),
    ],
)
def test_is_message_introducer(text, expected):
    assert is_message_introducer(text) is expected
