"""Toy robot tabletop simulator."""

from .core.types import Direction, RobotState, Simulation, StepResult
from .table import execute_program, parse_command, step


__version__ = "0.1.0"

__all__ = [
    "Direction",
    "RobotState",
    "Simulation",
    "StepResult",
    "execute_program",
    "parse_command",
    "step",
]
