"""
CLI for the toy robot simulator.

Usage:
    toyrobot --help
    toyrobot run commands.txt
    toyrobot run --board < commands.txt
    toyrobot shell
"""

import logging
import sys
from pathlib import Path
from typing import Annotated

import typer

from ..core.config import get_settings
from ..core.types import LogEntry, RobotState
from ..table.geometry import BOARD_SIZE
from ..table.program import execute_program
from ..table.session import ToyRobotSession


app = typer.Typer(
    name="toyrobot",
    help="Toy robot tabletop simulator.",
    add_completion=False,
    no_args_is_help=True,
)

COMMAND_HELP = "Commands: PLACE X,Y,F  MOVE  LEFT  RIGHT  REPORT  RESET  UNDO  (q to quit)"


def board_to_ascii(state: RobotState) -> str:
    """Convert the table to ASCII display, north at the top."""
    lines = []
    border = "  +" + "---+" * BOARD_SIZE

    lines.append(border)
    for y in range(BOARD_SIZE - 1, -1, -1):
        cells = []
        for x in range(BOARD_SIZE):
            if state.placed and state.x == x and state.y == y:
                cells.append(f" {state.facing.arrow} ")
            else:
                cells.append("   ")
        lines.append(f"{y} |" + "|".join(cells) + "|")
        lines.append(border)
    lines.append("   " + "".join(f" {x}  " for x in range(BOARD_SIZE)))

    return "\n".join(lines)


def format_entry(entry: LogEntry) -> str:
    """Text shown for one log entry."""
    if not entry.parsed:
        return entry.error or "Invalid command"
    if entry.report_output is not None:
        return entry.report_output
    if entry.note is not None:
        return entry.note
    return "OK"


def _configure_logging() -> None:
    settings = get_settings().logging
    logging.basicConfig(level=settings.level, format=settings.format)


@app.callback()
def _main_callback() -> None:
    _configure_logging()


@app.command()
def run(
    file: Annotated[
        Path | None,
        typer.Argument(help="Command file, one command per line ('-' or omitted reads stdin)"),
    ] = None,
    board: Annotated[bool, typer.Option("--board", help="Print the final table")] = False,
):
    """
    Run a command script and print every REPORT.

    Examples:
        run commands.txt
        run --board < commands.txt
    """
    if file is None or str(file) == "-":
        lines = sys.stdin.read().splitlines()
    else:
        try:
            lines = file.read_text(encoding="utf-8").splitlines()
        except OSError as e:
            typer.echo(f"Error reading {file}: {e}", err=True)
            raise typer.Exit(1) from e

    result = execute_program(lines)
    for output in result.reports:
        typer.echo(output)

    if board:
        typer.echo(board_to_ascii(result.final_simulation.current))


@app.command()
def shell(
    show_board: Annotated[
        bool | None,
        typer.Option("--board/--no-board", help="Draw the table after every command"),
    ] = None,
):
    """
    Interactive session: type commands, see reports and notes.
    """
    settings = get_settings().shell
    draw = settings.show_board if show_board is None else show_board
    session = ToyRobotSession(log_limit=settings.log_limit)

    typer.echo("\n" + "=" * 50)
    typer.echo("  TOY ROBOT")
    typer.echo("=" * 50)
    typer.echo(COMMAND_HELP + "\n")

    if draw:
        typer.echo(board_to_ascii(session.state))

    while True:
        try:
            line = typer.prompt(
                settings.prompt.rstrip(), default="", show_default=False, prompt_suffix=" "
            )
        except (EOFError, KeyboardInterrupt, typer.Abort):
            typer.echo("\nBye.")
            break

        cmd = line.strip().lower()
        if cmd in {"q", "quit", "exit"}:
            break
        if cmd == "help":
            typer.echo(COMMAND_HELP)
            continue

        entry = session.run_command(line)
        if entry is None:
            continue

        typer.echo(format_entry(entry))
        if draw:
            typer.echo(board_to_ascii(session.state))


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
