from __future__ import annotations

import logging
import time

import click

from .display import (
    ProgressReporter,
    TerminalReplay,
    format_duration,
    render_solution,
)
from .exceptions import SudokuError
from .parser import load_grid
from .solver import solve

DEFAULT_REPORT_EVERY = 1000
DEFAULT_DELAY = 0.01

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

_file_logger = logging.getLogger(__name__)


def configure_logging(log_file, log_level):
    logging.basicConfig(
        filename=log_file,
        filemode="w",
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        datefmt="%H:%M:%S",
        level=getattr(logging, log_level),
    )


@click.command()
@click.argument("input_file", type=click.Path(dir_okay=False))
@click.option(
    "-v", "--verbose", is_flag=True, help="Replay the search in the terminal."
)
@click.option(
    "--delay",
    type=click.FloatRange(min=0),
    default=DEFAULT_DELAY,
    show_default=True,
    help="Seconds to pause after each replay frame.",
)
@click.option(
    "--every",
    type=click.IntRange(min=1),
    default=DEFAULT_REPORT_EVERY,
    show_default=True,
    help="Report to the replay or progress bar every this many steps.",
)
@click.option("--progress", is_flag=True, help="Show a progress bar.")
@click.option("--no-color", is_flag=True, help="Don't colour solved cells.")
@click.option(
    "--log-file", default="solve.log", show_default=True, type=click.Path()
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="ERROR",
    show_default=True,
)
def main(
    input_file, verbose, delay, every, progress, no_color, log_file, log_level
):
    """Solve the sudoku in INPUT_FILE."""
    configure_logging(log_file, log_level.upper())
    try:
        run(input_file, verbose, delay, every, progress, not no_color)
    except (OSError, UnicodeDecodeError, SudokuError) as e:
        _file_logger.error("%s", e)
        click.echo(f"Error: {e}")
        raise SystemExit(1)
    click.echo("Done!")


def run(input_file, verbose, delay, every, progress, color):
    board = load_grid(input_file)

    click.echo(board)
    click.echo("Solving!\n")

    start = time.perf_counter()
    if verbose:
        replay = TerminalReplay(board, delay=delay)
        solved = replay.run(solve, board, observer=replay, report_every=every)
    elif progress:
        with ProgressReporter(every) as reporter:
            solved = solve(board, observer=reporter, report_every=every)
    else:
        solved = solve(board)
    run_time = time.perf_counter() - start

    click.echo(render_solution(board, solved, color=color))
    click.echo(f"Time taken: {format_duration(run_time)}")
    return solved


if __name__ == "__main__":
    main()
