from __future__ import annotations

import functools
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import numpy as np

from .grid import BOX_SIZE, SIZE, Position

if TYPE_CHECKING:
    from .grid import Grid


class Constraint(ABC):

    def __init__(self, cells: list[Position]):
        self.cells = np.array(cells)
        # Offsets into the row-major flattened grid.
        self.flat_indices = self.cells[:, 1] * SIZE + self.cells[:, 0]

    @property
    def positions(self) -> list[Position]:
        return [Position(int(column), int(row)) for column, row in self.cells]

    def values(self, grid: Grid) -> np.ndarray:
        return grid.data.ravel()[self.flat_indices]

    @abstractmethod
    def is_satisfied(self, grid: Grid, value: int) -> bool:
        """
        Check whether `value` being present in this group's cells on `grid`
        keeps the constraint intact.
        """
        ...


class NoRepeatsConstraint(Constraint):

    def is_satisfied(self, grid, value):
        if value is None:
            return True
        return np.count_nonzero(self.values(grid) == value) <= 1


class Row(NoRepeatsConstraint):

    def __init__(self, row):
        super().__init__([Position(i, row) for i in range(SIZE)])


class Column(NoRepeatsConstraint):

    def __init__(self, column):
        super().__init__([Position(column, i) for i in range(SIZE)])


class Box(NoRepeatsConstraint):

    def __init__(self, position):
        column, row = position
        box_column = column - column % BOX_SIZE
        box_row = row - row % BOX_SIZE
        super().__init__(
            [
                Position(box_column + i, box_row + j)
                for j in range(BOX_SIZE)
                for i in range(BOX_SIZE)
            ]
        )


@functools.lru_cache(maxsize=None)
def groups_for(position: Position) -> tuple[Constraint, ...]:
    """Row, column and box containing `position`, in that order."""
    column, row = position
    return Row(row), Column(column), Box(position)
