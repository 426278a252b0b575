"""Custom exception hierarchy for grid mutations."""

from __future__ import annotations

from typing import Any


class GunpeyError(Exception):
    """Base exception for the puzzle core."""


class GridMutationError(GunpeyError):
    """Raised when a gameplay mutation is rejected. The grid is left untouched."""


class SameTargetError(GridMutationError):
    """Raised when a swap names the same cell twice."""

    def __init__(self, a: Any, b: Any) -> None:
        super().__init__(f"can't swap tiles a={a} and b={b} because they are the same tile")
        self.a = a
        self.b = b


class OutOfBoundsError(GridMutationError):
    """Raised when a position or index falls outside the grid."""

    def __init__(self, a: Any, b: Any = None) -> None:
        if b is None:
            message = f"position {a} is out of bounds"
        else:
            message = f"can't swap tiles a={a} and b={b} because one of them is out of bounds"
        super().__init__(message)
        self.a = a
        self.b = b


class RowLengthMismatchError(GridMutationError):
    """Raised when a pushed row is not exactly one grid width long."""

    def __init__(self, actual: int, expected: int) -> None:
        super().__init__(
            f"invalid row size, input row length is {actual} "
            f"which does not equal expected row length of {expected}"
        )
        self.actual = actual
        self.expected = expected


class IncompleteGridError(GridMutationError):
    """Raised when a row is popped while an earlier pop is still unfilled."""

    def __init__(self, missing_cells: int) -> None:
        super().__init__(
            f"can't pop the top row, grid is already missing {missing_cells} cells; "
            "push a row first"
        )
        self.missing_cells = missing_cells
