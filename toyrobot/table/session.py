"""Interactive command session for the toy robot."""

import logging

from ..core.bus import EventBus, get_event_bus
from ..core.events import Event, EventType
from ..core.types import (
    Command,
    LeftCommand,
    LogEntry,
    MoveCommand,
    PlaceCommand,
    ReportCommand,
    ResetCommand,
    RightCommand,
    RobotState,
    Simulation,
    UndoCommand,
)
from .parser import parse_command
from .rules import report
from .stepper import create_initial_simulation, step


logger = logging.getLogger(__name__)

INVALID_COMMAND = "Invalid command"

# Event published when a command of this type is accepted
_ACCEPTED_EVENTS: dict[type, EventType] = {
    PlaceCommand: EventType.ROBOT_PLACED,
    MoveCommand: EventType.ROBOT_MOVED,
    LeftCommand: EventType.ROBOT_ROTATED,
    RightCommand: EventType.ROBOT_ROTATED,
    ReportCommand: EventType.ROBOT_REPORTED,
    ResetCommand: EventType.SIMULATION_RESET,
    UndoCommand: EventType.HISTORY_UNDONE,
}


class ToyRobotSession:
    """Holds the latest simulation and a command log for a host UI.

    Stateful wrapper around the pure stepper that:
    - Parses raw text and rejects invalid commands
    - Keeps the most recent simulation value
    - Records a newest-first log of what happened
    - Emits events for every command it handles
    """

    def __init__(self, bus: EventBus | None = None, log_limit: int = 100):
        """Initialize session.

        Args:
            bus: Event bus (uses global if None)
            log_limit: Maximum number of log entries kept
        """
        self.bus = bus or get_event_bus()
        self.log_limit = log_limit
        self._sim = create_initial_simulation()
        self._logs: list[LogEntry] = []
        self._next_id = 1

    def run_command(self, raw: str) -> LogEntry | None:
        """Parse and apply one line of text.

        Args:
            raw: Text as typed by the user

        Returns:
            The recorded log entry, or None for blank input and for commands
            swallowed before the robot was first placed
        """
        text = raw.strip()
        if not text:
            return None

        cmd = parse_command(text)
        if cmd is None:
            logger.info("Invalid command: %r", text)
            self._publish(EventType.COMMAND_INVALID, {"raw": text})
            return self._record(raw=text, parsed=False, error=INVALID_COMMAND)

        return self._apply(cmd, text)

    def execute(self, cmd: Command) -> LogEntry | None:
        """Apply an already parsed command, logged under its canonical text."""
        return self._apply(cmd, str(cmd))

    def _apply(self, cmd: Command, text: str) -> LogEntry | None:
        result = step(self._sim, cmd)
        self._sim = result.sim

        if result.ignored:
            logger.debug("%s ignored: robot never placed", cmd)
            self._publish(EventType.COMMAND_IGNORED, {"command": str(cmd)})
            return None

        if result.note is not None:
            logger.debug("%s rejected: %s", cmd, result.note)
            self._publish(EventType.COMMAND_REJECTED, {"command": str(cmd), "note": result.note})
        else:
            logger.debug("%s applied, history depth %d", cmd, len(self._sim.history))
            data = {"command": str(cmd), "state": report(self._sim.current)}
            self._publish(EventType.COMMAND_APPLIED, data)
            self._publish(_ACCEPTED_EVENTS[type(cmd)], data)

        return self._record(
            raw=text,
            parsed=True,
            report_output=result.report_output,
            note=result.note,
        )

    def undo(self) -> LogEntry | None:
        """Revert the most recent state-changing command."""
        return self.execute(UndoCommand())

    def reset(self) -> LogEntry | None:
        """Take the robot off the table (undoable)."""
        return self.execute(ResetCommand())

    def _record(self, **fields) -> LogEntry:
        entry = LogEntry(id=self._next_id, **fields)
        self._next_id += 1
        self._logs.insert(0, entry)
        del self._logs[self.log_limit:]
        return entry

    def _publish(self, event_type: EventType, data: dict) -> None:
        self.bus.publish(Event(type=event_type, data=data, source="session"))

    def clear_log(self) -> None:
        """Clear the command log (ids keep counting)."""
        self._logs.clear()

    @property
    def logs(self) -> list[LogEntry]:
        """Log entries, newest first."""
        return list(self._logs)

    @property
    def simulation(self) -> Simulation:
        """Get the current simulation value."""
        return self._sim

    @property
    def state(self) -> RobotState:
        """Get the current robot state."""
        return self._sim.current
