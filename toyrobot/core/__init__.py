"""Core infrastructure for the toy robot simulator."""

from .bus import EventBus, get_event_bus, reset_event_bus
from .config import (
    LoggingSettings,
    Settings,
    ShellSettings,
    get_settings,
    reset_settings,
)
from .events import Event, EventType
from .types import (
    Command,
    Direction,
    LeftCommand,
    LogEntry,
    MoveCommand,
    PlaceCommand,
    ProgramResult,
    ReportCommand,
    ResetCommand,
    RightCommand,
    RobotState,
    Simulation,
    StepResult,
    UndoCommand,
)


__all__ = [
    # Config
    "get_settings",
    "reset_settings",
    "Settings",
    "ShellSettings",
    "LoggingSettings",
    # Types
    "Direction",
    "RobotState",
    "Simulation",
    "Command",
    "PlaceCommand",
    "MoveCommand",
    "LeftCommand",
    "RightCommand",
    "ReportCommand",
    "ResetCommand",
    "UndoCommand",
    "StepResult",
    "ProgramResult",
    "LogEntry",
    # Events
    "Event",
    "EventType",
    "EventBus",
    "get_event_bus",
    "reset_event_bus",
]
