class SudokuError(Exception):
    """Base class for everything this package raises."""


class ValidationError(SudokuError, ValueError):
    """Indicates the input does not have the shape of a 9x9 grid."""


class WrongRowCount(ValidationError):
    """Indicates the grid does not have exactly 9 rows."""

    def __init__(self, count):
        self.count = count
        super().__init__(f"Invalid row count: expected 9, got {count}")


class WrongColumnCount(ValidationError):
    """Indicates a row does not have exactly 9 cells."""

    def __init__(self, row, count):
        self.row = row
        self.count = count
        super().__init__(
            f"Invalid columns count in row {row}: expected 9, got {count}"
        )


class InvalidCellValue(ValidationError):
    """Indicates a cell holds something other than empty or a digit 1-9."""

    def __init__(self, row, column, value):
        self.row = row
        self.column = column
        self.value = value
        super().__init__(
            f"Invalid value {value!r} in row {row}, column {column}"
        )


class SolveError(SudokuError):
    """Indicates the search could not produce a solution."""


class Unsolvable(SolveError):
    """Indicates the search space was exhausted without a solution."""

    def __init__(self, message="Unsolvable"):
        super().__init__(message)
