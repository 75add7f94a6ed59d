import pytest

from sudoku_solver import Grid, parse_grid

PUZZLE = """\
53--7----
6--195---
-98----6-
8---6---3
4--8-3--1
7---2---6
-6----28-
---419--5
----8--79
"""

SOLUTION = """\
534678912
672195348
198342567
859761423
426853791
713924856
961537284
287419635
345286179
"""


@pytest.fixture
def puzzle():
    return parse_grid(PUZZLE)


@pytest.fixture
def solution():
    return parse_grid(SOLUTION)


@pytest.fixture
def empty_grid():
    return Grid.empty()


def assert_valid_solution(grid):
    rows = grid.rows()
    digits = set(range(1, 10))
    for i in range(9):
        assert set(rows[i]) == digits
        assert {rows[j][i] for j in range(9)} == digits
    for box_row in range(0, 9, 3):
        for box_column in range(0, 9, 3):
            box = {
                rows[box_row + j][box_column + i]
                for j in range(3)
                for i in range(3)
            }
            assert box == digits
