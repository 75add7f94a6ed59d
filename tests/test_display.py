import io

import click
import pytest

from sudoku_solver import Position
from sudoku_solver.display import (
    ProgressReporter,
    TerminalReplay,
    format_duration,
    render_solution,
)

from .conftest import SOLUTION


def test_render_solution_without_color(puzzle, solution):
    assert render_solution(puzzle, solution, color=False) == SOLUTION


def test_render_solution_colors_only_filled_cells(puzzle, solution):
    output = render_solution(puzzle, solution)
    assert click.unstyle(output) == SOLUTION
    first_line = output.splitlines()[0]
    assert first_line.startswith("53" + click.style("4", fg="blue"))


def test_render_unchanged_grid_has_no_styling(solution):
    assert render_solution(solution, solution) == SOLUTION


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (0.000123, "123 μs"),
        (0.004999, "4999 μs"),
        (0.005, "5 ms"),
        (1.2345, "1234 ms"),
    ],
)
def test_format_duration(seconds, expected):
    assert format_duration(seconds) == expected


def test_replay_is_noop_outside_curses(puzzle):
    replay = TerminalReplay(puzzle, delay=0)
    replay(puzzle, Position(2, 0), 1)
    assert replay.screen is None


def test_progress_reporter_counts_steps(puzzle):
    with ProgressReporter(5, file=io.StringIO()) as reporter:
        reporter(puzzle, Position(2, 0), 5)
        reporter(puzzle, Position(3, 0), 10)
        assert reporter.bar.n == 10
