from .constraints import Box, Column, Constraint, NoRepeatsConstraint, Row
from .exceptions import (
    SolveError,
    SudokuError,
    Unsolvable,
    ValidationError,
    InvalidCellValue,
    WrongColumnCount,
    WrongRowCount,
)
from .grid import DIGITS, SIZE, Grid, Position
from .parser import load_grid, parse_grid
from .solver import Solver, find_conflicts, is_valid, solve
