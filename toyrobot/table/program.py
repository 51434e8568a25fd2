"""Batch execution of command scripts."""

from collections.abc import Iterable

from ..core.types import ProgramResult
from .parser import parse_command
from .stepper import create_initial_simulation, step


def execute_program(lines: Iterable[str]) -> ProgramResult:
    """Run raw command lines from a fresh simulation.

    Lines that do not parse are skipped. Report text is collected in order.

    Args:
        lines: Raw command text, one command per item

    Returns:
        ProgramResult with the final simulation and every report produced
    """
    sim = create_initial_simulation()
    reports: list[str] = []

    for raw in lines:
        cmd = parse_command(raw)
        if cmd is None:
            continue
        result = step(sim, cmd)
        sim = result.sim
        if result.report_output is not None:
            reports.append(result.report_output)

    return ProgramResult(final_simulation=sim, reports=tuple(reports))
