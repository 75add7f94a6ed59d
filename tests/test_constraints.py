from sudoku_solver import Box, Column, Grid, Position, Row
from sudoku_solver.constraints import groups_for


def test_box_rounds_down_to_multiple_of_three():
    box = Box(Position(5, 7))
    assert box.positions[0] == Position(3, 6)
    assert box.positions[-1] == Position(5, 8)
    assert len(box.positions) == 9


def test_row_and_column_cells():
    assert Row(4).positions == [Position(i, 4) for i in range(9)]
    assert Column(4).positions == [Position(4, i) for i in range(9)]


def test_groups_for_order():
    row, column, box = groups_for(Position(1, 2))
    assert isinstance(row, Row)
    assert isinstance(column, Column)
    assert isinstance(box, Box)
    assert Position(1, 2) in box.positions


def test_no_repeats_allows_single_occurrence():
    grid = Grid.empty()
    grid.set(Position(3, 0), 5)
    assert Row(0).is_satisfied(grid, 5)
    grid.set(Position(8, 0), 5)
    assert not Row(0).is_satisfied(grid, 5)
    assert Row(1).is_satisfied(grid, 5)


def test_box_compares_by_value():
    grid = Grid.empty()
    grid.set(Position(0, 0), 9)
    grid.set(Position(2, 2), 9)
    assert not Box(Position(1, 1)).is_satisfied(grid, 9)
    assert Box(Position(1, 1)).is_satisfied(grid, 8)
    assert Box(Position(4, 4)).is_satisfied(grid, 9)
