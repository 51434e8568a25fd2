"""Robot state transitions on the tabletop.

Every function takes a RobotState and returns a RobotState; nothing is
mutated. A rejected transition returns the very same object it was given,
so callers can detect it with an identity check.
"""

from ..core.types import Direction, RobotState
from .geometry import is_on_board


def create_initial_state() -> RobotState:
    """Unplaced robot."""
    return RobotState()


def place(state: RobotState, x: int | float, y: int | float, facing: Direction) -> RobotState:
    """Put the robot on the table, discarding any previous position.

    Args:
        state: Current state (returned unchanged if the target is off the table)
        x: Target column
        y: Target row
        facing: Target facing

    Returns:
        New placed state, or `state` itself if (x, y) is off the table
    """
    if not is_on_board(x, y):
        return state
    return RobotState(x=int(x), y=int(y), facing=facing, placed=True)


def move(state: RobotState) -> tuple[RobotState, bool]:
    """Step one cell forward.

    Returns:
        Tuple of (new_state, moved). moved is False, and the input state is
        returned, if the robot is unplaced or the step would leave the table.
    """
    if not state.placed:
        return state, False

    dx, dy = state.facing.delta
    next_x = state.x + dx
    next_y = state.y + dy

    # Protect the robot from falling
    if not is_on_board(next_x, next_y):
        return state, False

    return RobotState(x=next_x, y=next_y, facing=state.facing, placed=True), True


def rotate_left(state: RobotState) -> RobotState:
    """Turn 90 degrees counter-clockwise in place."""
    if not state.placed:
        return state
    return RobotState(x=state.x, y=state.y, facing=state.facing.left(), placed=True)


def rotate_right(state: RobotState) -> RobotState:
    """Turn 90 degrees clockwise in place."""
    if not state.placed:
        return state
    return RobotState(x=state.x, y=state.y, facing=state.facing.right(), placed=True)


def report(state: RobotState) -> str | None:
    """Canonical "X,Y,FACING" text, or None if the robot is unplaced."""
    if not state.placed:
        return None
    return f"{state.x},{state.y},{state.facing.name}"
