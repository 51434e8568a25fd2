"""Tabletop logic for the toy robot."""

from .geometry import BOARD_SIZE, is_on_board
from .parser import parse_command
from .program import execute_program
from .rules import create_initial_state, move, place, report, rotate_left, rotate_right
from .session import ToyRobotSession
from .stepper import create_initial_simulation, step


__all__ = [
    "BOARD_SIZE",
    "ToyRobotSession",
    "create_initial_simulation",
    "create_initial_state",
    "execute_program",
    "is_on_board",
    "move",
    "parse_command",
    "place",
    "report",
    "rotate_left",
    "rotate_right",
    "step",
]
