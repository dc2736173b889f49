"""
Errors raised while turning adjacency-matrix text into a Graph.

All of them derive from MatrixParseError, itself a ValueError, so callers
can catch the whole family at once and keep their previous graph.
"""

from __future__ import annotations


class MatrixParseError(ValueError):
    """Base class for adjacency-matrix parse failures."""


class EmptyMatrixError(MatrixParseError):
    """The input contains no non-empty line."""

    def __init__(self) -> None:
        super().__init__("Matrix is empty: enter at least one row")


class MalformedNumberError(MatrixParseError):
    """A token is not a base-10 integer or does not fit in 64 bits."""

    def __init__(
        self, token: str, row: int, column: int, reason: str = "entries must be integers"
    ) -> None:
        self.token = token
        self.row = row
        self.column = column
        super().__init__(f"Invalid number {token!r} at row {row}, column {column}: {reason}")


class NotSquareError(MatrixParseError):
    """Some row's length differs from the number of rows."""

    def __init__(self, rows: int, row: int, columns: int) -> None:
        self.rows = rows
        self.row = row
        self.columns = columns
        super().__init__(
            f"Matrix must be square: row {row} has {columns} entries "
            f"but there are {rows} rows"
        )


class NotSymmetricError(MatrixParseError):
    """matrix[i][j] differs from matrix[j][i] for some pair."""

    def __init__(self, i: int, j: int, value_ij: int, value_ji: int) -> None:
        self.i = i
        self.j = j
        self.value_ij = value_ij
        self.value_ji = value_ji
        super().__init__(
            f"Matrix must be symmetric: entry ({i}, {j}) is {value_ij} "
            f"but entry ({j}, {i}) is {value_ji}"
        )
