from __future__ import annotations

import collections
from typing import Optional, Sequence

import numpy as np

from .exceptions import InvalidCellValue, WrongColumnCount, WrongRowCount

SIZE = 9
BOX_SIZE = 3
DIGITS = list(range(1, SIZE + 1))

EMPTY_MARKER = "-"
# Digits are stored as-is, empty cells as 0.
EMPTY_FILL = 0

Position = collections.namedtuple("Position", "column row")

Cell = Optional[int]


class Grid:
    """A 9x9 matrix of optional digits.

    Cells are addressed by `Position(column, row)`, both counted from 0.
    Each cell is `None` for empty or a digit 1-9; `construct` rejects
    anything else, 0 included.

    Nothing here checks Sudoku rules: a grid with repeated digits is still a
    valid `Grid`, it just won't solve.
    """

    def __init__(self, data: np.ndarray):
        self.data = data

    @classmethod
    def construct(cls, rows: Sequence[Sequence[Cell]]) -> Grid:
        rows = list(rows)
        if len(rows) != SIZE:
            raise WrongRowCount(len(rows))

        rows = [list(row) for row in rows]
        for i, row in enumerate(rows):
            if len(row) != SIZE:
                raise WrongColumnCount(i, len(row))

        data = np.full((SIZE, SIZE), EMPTY_FILL, dtype=int)
        for i, row in enumerate(rows):
            for j, cell in enumerate(row):
                if cell is None:
                    continue
                if cell not in DIGITS:
                    raise InvalidCellValue(i, j, cell)
                data[i, j] = cell

        return cls(data)

    @classmethod
    def empty(cls) -> Grid:
        return cls(np.full((SIZE, SIZE), EMPTY_FILL, dtype=int))

    def get(self, position: Position) -> Cell:
        column, row = position
        value = int(self.data[row, column])
        return None if value == EMPTY_FILL else value

    def set(self, position: Position, value: Cell):
        column, row = position
        self.data[row, column] = EMPTY_FILL if value is None else value

    def __getitem__(self, position):
        return self.get(position)

    def __setitem__(self, position, value):
        self.set(position, value)

    def copy(self) -> Grid:
        return Grid(np.copy(self.data))

    def rows(self) -> list[list[Cell]]:
        return [
            [self.get(Position(column, row)) for column in range(SIZE)]
            for row in range(SIZE)
        ]

    def empty_positions(self) -> list[Position]:
        """Empty cells in row-major order, which is also the search order."""
        return [
            Position(column, row)
            for row in range(SIZE)
            for column in range(SIZE)
            if self.data[row, column] == EMPTY_FILL
        ]

    def is_complete(self) -> bool:
        return not np.any(self.data == EMPTY_FILL)

    def render(self) -> str:
        output = ""
        for row in self.rows():
            output += "".join(
                EMPTY_MARKER if cell is None else str(cell) for cell in row
            )
            output += "\n"
        return output

    def __str__(self):
        return self.render()

    def __repr__(self):
        return "Grid({!r})".format(self.rows())

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return np.array_equal(self.data, other.data)

    __hash__ = None
