"""Puzzle-logic core for a Gunpey-style falling-block connection game.

This package exposes the public API surface via:

- ``gunpey.engine.grid.Grid``: the cell container, its mutations and the
  left-to-right activation recalculation.
- ``gunpey.engine.rows.RowGenerator``: the random row source used when a new
  row cycles in.
- ``gunpey.core.models``: ``GridPos``, ``LineFragment`` and ``Cell`` values.
- ``gunpey.core.exceptions``: errors raised by rejected grid mutations.
"""

from .core.constants import Adjacency, FragmentKind
from .core.exceptions import (
    GridMutationError,
    GunpeyError,
    IncompleteGridError,
    OutOfBoundsError,
    RowLengthMismatchError,
    SameTargetError,
)
from .core.models import Cell, GridPos, LineFragment, corner_nodes, gp
from .core.adjacency import are_fragments_connecting
from .engine.grid import Grid, new_small_grid
from .engine.rows import RowGenerator, RowGeneratorConfig, new_random_row

__all__ = [
    "Adjacency",
    "Cell",
    "FragmentKind",
    "Grid",
    "GridMutationError",
    "GridPos",
    "GunpeyError",
    "IncompleteGridError",
    "LineFragment",
    "OutOfBoundsError",
    "RowGenerator",
    "RowGeneratorConfig",
    "RowLengthMismatchError",
    "SameTargetError",
    "are_fragments_connecting",
    "corner_nodes",
    "gp",
    "new_random_row",
    "new_small_grid",
]

__version__ = "0.1.0"
