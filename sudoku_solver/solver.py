from __future__ import annotations

import logging
from typing import Callable, Optional

from .constraints import Row, groups_for
from .exceptions import Unsolvable
from .grid import DIGITS, SIZE, Grid, Position

_file_logger = logging.getLogger(__name__)

Observer = Callable[[Grid, Position, int], None]


def is_valid(grid: Grid, position: Position) -> bool:
    """
    Check the row, column and box of `position` for repeats of its value.

    Only the groups touching `position` are looked at, so this relies on
    every other filled cell already being consistent.
    """
    value = grid.get(position)
    return all(group.is_satisfied(grid, value) for group in groups_for(position))


def find_conflicts(grid: Grid) -> list[Position]:
    """Filled cells whose value repeats within their row, column or box."""
    return [
        position
        for row in range(SIZE)
        for position in Row(row).positions
        if grid.get(position) is not None and not is_valid(grid, position)
    ]


class Solver:
    """Depth-first backtracking over the empty cells of a working grid.

    The working grid is mutated in place and every placement that doesn't
    lead to a solution is reset to empty before `search` returns.
    """

    def __init__(
        self,
        grid: Grid,
        observer: Optional[Observer] = None,
        report_every: int = 1,
    ):
        if report_every < 1:
            raise ValueError("report_every must be at least 1")
        self.grid = grid
        self.empty_positions = grid.empty_positions()
        self.observer = observer
        self.report_every = report_every
        self.steps = 0

    def search(self, index: int = 0) -> bool:
        if index == len(self.empty_positions):
            return True

        position = self.empty_positions[index]
        for value in DIGITS:
            self.grid.set(position, value)
            self._step(position)
            if is_valid(self.grid, position):
                if self.search(index + 1):
                    return True
                self.grid.set(position, None)

        _file_logger.debug(
            "%sBacktracking from %s", " " * index, _describe(position)
        )
        self.grid.set(position, None)
        return False

    def _step(self, position):
        self.steps += 1
        if self.observer is not None and self.steps % self.report_every == 0:
            self.observer(self.grid, position, self.steps)


def solve(
    grid: Grid,
    observer: Optional[Observer] = None,
    report_every: int = 1,
    check_givens: bool = True,
) -> Grid:
    """
    Return a solved copy of `grid`, leaving `grid` itself untouched.

    With `check_givens` the filled cells are checked for repeats before
    searching, and any repeat raises `Unsolvable` straight away. Without it
    a grid with no empty cells is returned as it is, valid or not.
    """
    working = grid.copy()

    if check_givens:
        conflicts = find_conflicts(working)
        if conflicts:
            raise Unsolvable(
                "Unsolvable: conflicting digits at {}".format(
                    ", ".join(_describe(position) for position in conflicts)
                )
            )

    if working.is_complete():
        _file_logger.info("No empty cells, nothing to solve")
        return working

    solver = Solver(working, observer=observer, report_every=report_every)
    _file_logger.info("Solving %d empty cells", len(solver.empty_positions))
    if not solver.search():
        _file_logger.info("Exhausted search after %d steps", solver.steps)
        raise Unsolvable()

    _file_logger.info("Solution found after %d steps", solver.steps)
    return working


def _describe(position):
    return f"R{position.row + 1}C{position.column + 1}"
