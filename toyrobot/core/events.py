"""
Event definitions for the toy robot simulator.

Events let hosts observe a session without reaching into its state.
The pure stepper never publishes; only the session does.
"""

import time
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class EventType(Enum):
    """Types of events in the system."""

    # Command events
    COMMAND_INVALID = auto()  # Text did not parse
    COMMAND_IGNORED = auto()  # Swallowed before the first placement
    COMMAND_APPLIED = auto()  # Accepted without a note
    COMMAND_REJECTED = auto()  # Parsed but refused, carries a note

    # Robot events
    ROBOT_PLACED = auto()
    ROBOT_MOVED = auto()
    ROBOT_ROTATED = auto()
    ROBOT_REPORTED = auto()

    # Simulation events
    SIMULATION_RESET = auto()
    HISTORY_UNDONE = auto()


@dataclass
class Event:
    """
    Base event structure.

    Attributes:
        type: The type of event
        data: Event-specific payload
        timestamp: When the event was created
        source: Which module created the event
    """

    type: EventType
    data: Any = None
    timestamp: float = field(default_factory=time.time)
    source: str = "unknown"

    def __str__(self) -> str:
        return f"[{self.source}] {self.type.name}: {self.data}"
