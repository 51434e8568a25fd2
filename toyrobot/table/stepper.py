"""Apply commands to a simulation, keeping the undo history."""

from ..core.types import (
    Command,
    LeftCommand,
    MoveCommand,
    PlaceCommand,
    ReportCommand,
    ResetCommand,
    RightCommand,
    Simulation,
    StepResult,
    UndoCommand,
)
from . import rules


NOTE_PLACE_OFF_BOARD = "PLACE ignored: coordinates off the board"
NOTE_MOVE_NOT_PLACED = "MOVE ignored: robot not placed"
NOTE_MOVE_WOULD_FALL = "MOVE ignored: would fall off table"
NOTE_LEFT_NOT_PLACED = "LEFT ignored: robot not placed"
NOTE_RIGHT_NOT_PLACED = "RIGHT ignored: robot not placed"
NOTE_REPORT_NOT_PLACED = "REPORT ignored: robot not placed"
NOTE_UNDO_NO_HISTORY = "UNDO ignored: no history"


def create_initial_simulation() -> Simulation:
    """Unplaced robot, empty history."""
    return Simulation(
        current=rules.create_initial_state(),
        history=(),
        has_ever_been_placed=False,
    )


def _push(sim: Simulation, **changes) -> Simulation:
    """New simulation with the current state pushed onto history."""
    return Simulation(
        current=changes.get("current", sim.current),
        history=sim.history + (sim.current,),
        has_ever_been_placed=changes.get("has_ever_been_placed", sim.has_ever_been_placed),
    )


def _step_place(sim: Simulation, cmd: PlaceCommand) -> StepResult:
    placed = rules.place(sim.current, cmd.x, cmd.y, cmd.facing)
    if placed is sim.current:
        return StepResult(sim=sim, note=NOTE_PLACE_OFF_BOARD)
    return StepResult(sim=_push(sim, current=placed, has_ever_been_placed=True))


def _step_move(sim: Simulation) -> StepResult:
    moved_state, moved = rules.move(sim.current)
    if not moved:
        note = NOTE_MOVE_WOULD_FALL if sim.current.placed else NOTE_MOVE_NOT_PLACED
        return StepResult(sim=sim, note=note)
    return StepResult(sim=_push(sim, current=moved_state))


def _step_rotate(sim: Simulation, clockwise: bool) -> StepResult:
    if not sim.current.placed:
        return StepResult(
            sim=sim,
            note=NOTE_RIGHT_NOT_PLACED if clockwise else NOTE_LEFT_NOT_PLACED,
        )
    turn = rules.rotate_right if clockwise else rules.rotate_left
    return StepResult(sim=_push(sim, current=turn(sim.current)))


def _step_report(sim: Simulation) -> StepResult:
    output = rules.report(sim.current)
    if output is None:
        return StepResult(sim=sim, note=NOTE_REPORT_NOT_PLACED)
    return StepResult(sim=sim, report_output=output)


def _step_reset(sim: Simulation) -> StepResult:
    # Always recorded, even when already unplaced, so UNDO can revert it
    return StepResult(
        sim=_push(sim, current=rules.create_initial_state(), has_ever_been_placed=False)
    )


def _step_undo(sim: Simulation) -> StepResult:
    if not sim.history:
        return StepResult(sim=sim, note=NOTE_UNDO_NO_HISTORY)

    restored = sim.history[-1]
    history = sim.history[:-1]

    # Shallow rule: only the restored state and an empty history are looked at
    if restored.placed:
        has_ever_been_placed = True
    elif not history:
        has_ever_been_placed = False
    else:
        has_ever_been_placed = sim.has_ever_been_placed

    return StepResult(
        sim=Simulation(
            current=restored,
            history=history,
            has_ever_been_placed=has_ever_been_placed,
        )
    )


def step(sim: Simulation, cmd: Command) -> StepResult:
    """Apply one command to a simulation.

    Until the robot has been placed, every command other than PLACE (and
    UNDO with something to undo) is swallowed: the input simulation comes
    back untouched with ignored=True.

    Args:
        sim: Simulation before the command
        cmd: Parsed command

    Returns:
        StepResult with the new simulation, the report text (REPORT only)
        and an advisory note for refused commands

    Raises:
        TypeError: If cmd is not one of the command types
    """
    can_undo = isinstance(cmd, UndoCommand) and bool(sim.history)
    if not sim.has_ever_been_placed and not isinstance(cmd, PlaceCommand) and not can_undo:
        return StepResult(sim=sim, ignored=True)

    if isinstance(cmd, PlaceCommand):
        return _step_place(sim, cmd)
    if isinstance(cmd, MoveCommand):
        return _step_move(sim)
    if isinstance(cmd, LeftCommand):
        return _step_rotate(sim, clockwise=False)
    if isinstance(cmd, RightCommand):
        return _step_rotate(sim, clockwise=True)
    if isinstance(cmd, ReportCommand):
        return _step_report(sim)
    if isinstance(cmd, ResetCommand):
        return _step_reset(sim)
    if isinstance(cmd, UndoCommand):
        return _step_undo(sim)

    raise TypeError(f"Unknown command: {cmd!r}")
