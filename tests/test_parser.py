import math

import pytest

from toyrobot.core.types import (
    Direction,
    LeftCommand,
    MoveCommand,
    PlaceCommand,
    ReportCommand,
    ResetCommand,
    RightCommand,
    UndoCommand,
)
from toyrobot.table.parser import parse_command


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("MOVE", MoveCommand()),
        ("LEFT", LeftCommand()),
        ("RIGHT", RightCommand()),
        ("REPORT", ReportCommand()),
        ("RESET", ResetCommand()),
        ("UNDO", UndoCommand()),
        ("move", MoveCommand()),
        ("  Report\t", ReportCommand()),
        ("uNdO", UndoCommand()),
    ],
)
def test_bare_keywords(raw, expected):
    assert parse_command(raw) == expected


def test_place():
    assert parse_command("PLACE 1,2,EAST") == PlaceCommand(x=1, y=2, facing=Direction.EAST)


def test_place_is_case_insensitive():
    assert parse_command("  place 0,3,north ") == PlaceCommand(x=0, y=3, facing=Direction.NORTH)


def test_place_tolerates_spaces_around_fields():
    assert parse_command("PLACE 1, 2, WEST") == PlaceCommand(x=1, y=2, facing=Direction.WEST)


def test_place_keeps_out_of_range_coordinates():
    assert parse_command("PLACE -1,7,SOUTH") == PlaceCommand(x=-1, y=7, facing=Direction.SOUTH)


def test_place_fractional_coordinates_parse():
    cmd = parse_command("PLACE 1.5,2,NORTH")
    assert cmd.x == 1.5
    assert cmd.y == 2 and isinstance(cmd.y, int)


def test_place_whole_float_becomes_int():
    cmd = parse_command("PLACE 2.0,3,NORTH")
    assert cmd.x == 2 and isinstance(cmd.x, int)


def test_place_nan_parses_as_number():
    cmd = parse_command("PLACE nan,0,NORTH")
    assert math.isnan(cmd.x)


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "   ",
        "JUMP",
        "MOVE 2",
        "MOVEMOVE",
        "PLACE",
        "PLACE   ",
        "PLACE 1,2",
        "PLACE 1,2,NORTH,4",
        "PLACE a,2,NORTH",
        "PLACE 1,,NORTH",
        "PLACE 1,2,UP",
        "PLACE 1,2,",
        "PLACE1,2,NORTH",
        "PLACER 1,2,NORTH",
        "PLACE 1_0,0,NORTH",
        "PLACE 0,1_000,NORTH",
    ],
)
def test_invalid_text_returns_none(raw):
    assert parse_command(raw) is None
