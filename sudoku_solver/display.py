from __future__ import annotations

import curses
import time

import click
from tqdm import tqdm

from .grid import EMPTY_MARKER, SIZE, Grid, Position

SOLVED_COLOR = "blue"
# Below this many microseconds the time is reported in μs, above it in ms.
MICROSECOND_LIMIT = 5000

WINDOW_WIDTH = SIZE * 2 + 2 * 2 + 1


def render_solution(original: Grid, solved: Grid, color: bool = True) -> str:
    """Render `solved`, highlighting the cells that were empty in `original`."""
    output = ""
    for base_line, solved_line in zip(
        original.render().splitlines(), solved.render().splitlines()
    ):
        for base_char, solved_char in zip(base_line, solved_line):
            if color and base_char != solved_char:
                output += click.style(solved_char, fg=SOLVED_COLOR)
            else:
                output += solved_char
        output += "\n"
    return output


def format_duration(seconds: float) -> str:
    micros = round(seconds * 1_000_000)
    if micros < MICROSECOND_LIMIT:
        return f"{micros} μs"
    return f"{micros // 1000} ms"


class TerminalReplay:
    """Observer that redraws the working grid in a curses window.

    Use `run` to call the solve inside a curses session, passing the
    instance itself as the observer.
    """

    def __init__(self, original: Grid, delay: float = 0.01):
        self.original = original
        self.delay = delay
        self.screen = None

    def run(self, func, *args, **kwargs):
        return curses.wrapper(self._run, func, *args, **kwargs)

    def _run(self, screen, func, *args, **kwargs):
        self.screen = screen
        self._init_colors()
        try:
            return func(*args, **kwargs)
        finally:
            self.screen = None

    def _init_colors(self):
        if self.screen is None:
            return
        curses.curs_set(0)
        curses.start_color()
        curses.use_default_colors()
        curses.init_pair(1, curses.COLOR_BLUE, -1)  # Placed by the search
        curses.init_pair(2, curses.COLOR_RED, -1)  # Most recent placement

    def __call__(self, grid: Grid, position: Position, step: int):
        if self.screen is None:
            return
        self._refresh_screen(grid, position, step)
        if self.delay:
            time.sleep(self.delay)

    def _refresh_screen(self, grid, position, step):
        self.screen.erase()
        self.screen.addstr(0, 0, f"STEP {step}".ljust(WINDOW_WIDTH, "="))

        y = 1
        for row in range(SIZE):
            x = 0
            for column in range(SIZE):
                cell_position = Position(column, row)
                value = grid.get(cell_position)
                char = EMPTY_MARKER if value is None else str(value)
                if cell_position == position:
                    attr = curses.color_pair(2)
                elif self.original.get(cell_position) is None:
                    attr = curses.color_pair(1)
                else:
                    attr = curses.A_NORMAL
                self.screen.addstr(y, x, char, attr)
                x += 2
                if column in {2, 5}:
                    self.screen.addstr(y, x, "| ")
                    x += 2
            y += 1
            if row in {2, 5}:
                self.screen.addstr(y, 0, "-" * (WINDOW_WIDTH - 1))
                y += 1

        self.screen.refresh()


class ProgressReporter:
    """Observer that advances a tqdm bar by one cadence's worth of steps."""

    def __init__(self, report_every: int, **tqdm_kwargs):
        self.report_every = report_every
        tqdm_kwargs.setdefault("unit", "step")
        tqdm_kwargs.setdefault("desc", "Solving")
        self.bar = tqdm(**tqdm_kwargs)

    def __call__(self, grid, position, step):
        self.bar.update(self.report_every)

    def close(self):
        self.bar.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
