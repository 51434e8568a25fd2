"""
Shared data types for the toy robot simulator.

These types are the contracts between modules.
All values are immutable: every transition builds a new one.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Union


# ─────────────────────────────────────────────────────────────
# DIRECTION
# ─────────────────────────────────────────────────────────────


class Direction(Enum):
    """Compass facing, declared in clockwise order."""

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    def __str__(self) -> str:
        return self.name

    def right(self) -> "Direction":
        """Next direction clockwise."""
        return Direction((self.value + 1) % 4)

    def left(self) -> "Direction":
        """Next direction counter-clockwise."""
        return Direction((self.value + 3) % 4)

    @property
    def delta(self) -> tuple[int, int]:
        """(dx, dy) of one step forward."""
        return {
            Direction.NORTH: (0, 1),
            Direction.EAST: (1, 0),
            Direction.SOUTH: (0, -1),
            Direction.WEST: (-1, 0),
        }[self]

    @property
    def arrow(self) -> str:
        """Get arrow symbol for display."""
        return {"NORTH": "↑", "EAST": "→", "SOUTH": "↓", "WEST": "←"}[self.name]


# ─────────────────────────────────────────────────────────────
# ROBOT & SIMULATION STATE
# ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class RobotState:
    """
    Position and facing of the robot on the table.

    An unplaced robot has x, y and facing all set to None; a placed one
    has all three set, with whole-number coordinates on the table.
    """

    x: int | None = None
    y: int | None = None
    facing: Direction | None = None
    placed: bool = False

    def __post_init__(self) -> None:
        if self.placed:
            if self.x is None or self.y is None or self.facing is None:
                raise ValueError(f"Placed robot needs x, y and facing: {self!r}")

            from ..table.geometry import is_on_board

            if not (isinstance(self.x, int) and isinstance(self.y, int) and is_on_board(self.x, self.y)):
                raise ValueError(f"Placed robot must stand on the table: {self!r}")
        elif self.x is not None or self.y is not None or self.facing is not None:
            raise ValueError(f"Unplaced robot cannot carry a position: {self!r}")


@dataclass(frozen=True)
class Simulation:
    """
    Current robot state plus the undo history.

    history holds the states that were current before each accepted
    state-changing command, oldest first.
    """

    current: RobotState = field(default_factory=RobotState)
    history: tuple[RobotState, ...] = ()
    has_ever_been_placed: bool = False


# ─────────────────────────────────────────────────────────────
# COMMANDS
# ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class PlaceCommand:
    """PLACE X,Y,F"""

    keyword: ClassVar[str] = "PLACE"

    x: int | float
    y: int | float
    facing: Direction

    def __str__(self) -> str:
        return f"PLACE {self.x},{self.y},{self.facing.name}"


@dataclass(frozen=True)
class MoveCommand:
    keyword: ClassVar[str] = "MOVE"

    def __str__(self) -> str:
        return self.keyword


@dataclass(frozen=True)
class LeftCommand:
    keyword: ClassVar[str] = "LEFT"

    def __str__(self) -> str:
        return self.keyword


@dataclass(frozen=True)
class RightCommand:
    keyword: ClassVar[str] = "RIGHT"

    def __str__(self) -> str:
        return self.keyword


@dataclass(frozen=True)
class ReportCommand:
    keyword: ClassVar[str] = "REPORT"

    def __str__(self) -> str:
        return self.keyword


@dataclass(frozen=True)
class ResetCommand:
    keyword: ClassVar[str] = "RESET"

    def __str__(self) -> str:
        return self.keyword


@dataclass(frozen=True)
class UndoCommand:
    keyword: ClassVar[str] = "UNDO"

    def __str__(self) -> str:
        return self.keyword


Command = Union[
    PlaceCommand,
    MoveCommand,
    LeftCommand,
    RightCommand,
    ReportCommand,
    ResetCommand,
    UndoCommand,
]


# ─────────────────────────────────────────────────────────────
# RESULTS
# ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class StepResult:
    """
    Outcome of applying one command.

    Check ignored first, then report_output, then note.
    """

    sim: Simulation
    report_output: str | None = None
    note: str | None = None
    ignored: bool = False


@dataclass(frozen=True)
class ProgramResult:
    """Final simulation and collected reports of a batch run."""

    final_simulation: Simulation
    reports: tuple[str, ...] = ()


@dataclass(frozen=True)
class LogEntry:
    """One line of the interactive command log."""

    id: int
    raw: str
    parsed: bool
    error: str | None = None
    report_output: str | None = None
    note: str | None = None
