"""Parse raw command text into typed commands."""

import math

from ..core.types import (
    Command,
    Direction,
    LeftCommand,
    MoveCommand,
    PlaceCommand,
    ReportCommand,
    ResetCommand,
    RightCommand,
    UndoCommand,
)


# Zero-argument commands, keyed by upper-case keyword
BARE_COMMANDS: dict[str, Command] = {
    cmd.keyword: cmd
    for cmd in (
        MoveCommand(),
        LeftCommand(),
        RightCommand(),
        ReportCommand(),
        ResetCommand(),
        UndoCommand(),
    )
}


def _parse_number(text: str) -> int | float | None:
    """Parse a coordinate; whole numbers come back as int."""
    text = text.strip()
    if not text or "_" in text:
        return None  # digit separators are not coordinates
    try:
        value = float(text)
    except ValueError:
        return None
    if math.isfinite(value) and value.is_integer():
        return int(value)
    return value


def _parse_direction(text: str) -> Direction | None:
    try:
        return Direction[text.strip().upper()]
    except KeyError:
        return None


def _parse_place(args: str) -> PlaceCommand | None:
    """Parse the "X,Y,F" part of a PLACE command."""
    fields = args.split(",")
    if len(fields) != 3:
        return None

    x = _parse_number(fields[0])
    y = _parse_number(fields[1])
    facing = _parse_direction(fields[2])
    if x is None or y is None or facing is None:
        return None
    return PlaceCommand(x=x, y=y, facing=facing)


def parse_command(raw: str) -> Command | None:
    """Convert one line of text into a command.

    Keywords are case-insensitive and surrounding whitespace is ignored.
    Coordinates are not range-checked here; off-table values are refused
    later, when the command is applied.

    Args:
        raw: Text as typed by the user

    Returns:
        The parsed command, or None if the text is not a valid command
    """
    trimmed = raw.strip()
    if not trimmed:
        return None

    parts = trimmed.split(maxsplit=1)
    if parts[0].upper() == PlaceCommand.keyword:
        if len(parts) < 2:
            return None
        return _parse_place(parts[1])

    return BARE_COMMANDS.get(trimmed.upper())
