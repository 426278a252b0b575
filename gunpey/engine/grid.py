"""Grid representation, mutations and activation bookkeeping."""

from __future__ import annotations

import copy
import logging
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from ..core.constants import (
    Adjacency,
    COMPASS_ADJACENCIES,
    DEFAULT_GRID_HEIGHT,
    DEFAULT_GRID_WIDTH,
    FragmentKind,
)
from ..core.exceptions import (
    IncompleteGridError,
    OutOfBoundsError,
    RowLengthMismatchError,
    SameTargetError,
)
from ..core.models import Cell, GridPos, corner_nodes
from ..utils.logger import get_logger
from ..utils.pretty import format_grid
from . import activation
from .rows import RowGenerator, RowSource


LOGGER = get_logger(__name__)

CharGrid = List[List[str]]
Bitmask = List[List[int]]


def pos_from_index(index: int, width: int) -> GridPos:
    return GridPos(index % width, index // width)


def index_to_corner_nodes(index: int, kind: FragmentKind, width: int) -> Tuple[GridPos, GridPos]:
    return corner_nodes(pos_from_index(index, width), kind)


def _check_dimensions(width: int, height: int) -> None:
    if width <= 0:
        raise ValueError("width of new Grid must be greater than 0")
    if height <= 1:
        raise ValueError("height of new Grid must be greater than 1")


class Grid:
    """Row-major cells with row 0 at the bottom (``index = x + width * y``).

    Every structural mutation ends with a full activation recalculation.
    Rejected mutations raise a :class:`~gunpey.core.exceptions.GridMutationError`
    and leave the grid untouched.
    """

    def __init__(self, width: int, height: int, cells: Optional[Sequence[Cell]] = None) -> None:
        _check_dimensions(width, height)
        self.width = width
        self.height = height
        if cells is None:
            self.cells: List[Cell] = [Cell.empty() for _ in range(width * height)]
        else:
            if len(cells) != width * height:
                raise ValueError(
                    f"expected {width * height} cells for a {width}x{height} grid, got {len(cells)}"
                )
            self.cells = [copy.deepcopy(cell) for cell in cells]

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------
    @classmethod
    def from_str(cls, layout: str) -> Grid:
        """Build a grid from text rows, top row first.

        ``.`` is an empty cell, ``∧ ∨ \\ /`` are inactive fragments, and the
        codes ``c i l r`` (inactive) or ``C I L R`` (active) name a fragment
        together with its activation state. No recalculation happens here, so
        fixtures may spell out any activation pattern.
        """

        rows = [row.strip() for row in layout.strip().splitlines()]
        return cls.from_chars([list(row) for row in rows if row])

    @classmethod
    def from_chars(cls, chars: CharGrid) -> Grid:
        if not chars or not chars[0]:
            raise ValueError("grid layout is empty")
        width = len(chars[0])
        height = len(chars)
        for y, row in enumerate(chars):
            if len(row) != width:
                raise ValueError(f"row {y} has {len(row)} cells, expected {width}")
        _check_dimensions(width, height)

        cells = [Cell.from_char(char) for row in reversed(chars) for char in row]
        LOGGER.debug("creating new grid from chars with width=%s, height=%s", width, height)
        return cls(width, height, cells)

    @classmethod
    def random(cls, width: int, height: int, row_source: Optional[RowSource] = None) -> Grid:
        """Fill every row from ``row_source`` and compute activation.

        Without a source, rows come from a default :class:`RowGenerator`.
        """

        _check_dimensions(width, height)
        row_source = row_source or RowGenerator()
        cells: List[Cell] = []
        for _ in range(height):
            row = list(row_source(width))
            if len(row) != width:
                raise RowLengthMismatchError(len(row), width)
            cells.extend(row)
        grid = cls(width, height, cells)
        grid.recalculate_active_cells()
        return grid

    def copy(self) -> Grid:
        clone = Grid(self.width, self.height)
        clone.cells = copy.deepcopy(self.cells)
        return clone

    def is_complete(self) -> bool:
        """False while a popped row is waiting for its replacement."""
        return len(self.cells) == self.width * self.height

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (self.width, self.height, self.cells) == (other.width, other.height, other.cells)

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height})"

    def __str__(self) -> str:
        return "\n".join("".join(row) for row in self.as_chars())

    # ------------------------------------------------------------------
    # Position helpers
    # ------------------------------------------------------------------
    def index_from_pos(self, pos: GridPos) -> Optional[int]:
        if not 0 <= pos.x < self.width:
            return None
        index = pos.x + self.width * pos.y
        if 0 <= index < len(self.cells):
            return index
        return None

    def pos_from_index(self, index: int) -> GridPos:
        return pos_from_index(index, self.width)

    def contains(self, pos: GridPos) -> bool:
        return self.index_from_pos(pos) is not None

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def cell_at(self, pos: GridPos) -> Optional[Cell]:
        index = self.index_from_pos(pos)
        return self.cells[index] if index is not None else None

    def _require_cell(self, pos: GridPos) -> Cell:
        cell = self.cell_at(pos)
        if cell is None:
            raise OutOfBoundsError(pos)
        return cell

    def is_cell_active(self, pos: GridPos) -> bool:
        return self._require_cell(pos).is_active()

    def is_cell_empty(self, pos: GridPos) -> bool:
        return self._require_cell(pos).is_empty()

    def above(self, pos: GridPos) -> Optional[GridPos]:
        if pos.y == self.height - 1:
            return None
        return GridPos(pos.x, pos.y + 1)

    def below(self, pos: GridPos) -> Optional[GridPos]:
        if pos.y == 0:
            return None
        return GridPos(pos.x, pos.y - 1)

    def left(self, pos: GridPos) -> Optional[GridPos]:
        if pos.x == 0:
            return None
        return GridPos(pos.x - 1, pos.y)

    def right(self, pos: GridPos) -> Optional[GridPos]:
        if pos.x == self.width - 1:
            return None
        return GridPos(pos.x + 1, pos.y)

    def above_left(self, pos: GridPos) -> Optional[GridPos]:
        above = self.above(pos)
        return self.left(above) if above is not None else None

    def above_right(self, pos: GridPos) -> Optional[GridPos]:
        above = self.above(pos)
        return self.right(above) if above is not None else None

    def below_left(self, pos: GridPos) -> Optional[GridPos]:
        below = self.below(pos)
        return self.left(below) if below is not None else None

    def below_right(self, pos: GridPos) -> Optional[GridPos]:
        below = self.below(pos)
        return self.right(below) if below is not None else None

    _NEIGHBOR_LOOKUPS = {
        Adjacency.ABOVE_LEFT: "above_left",
        Adjacency.ABOVE: "above",
        Adjacency.ABOVE_RIGHT: "above_right",
        Adjacency.LEFT: "left",
        Adjacency.RIGHT: "right",
        Adjacency.BELOW_LEFT: "below_left",
        Adjacency.BELOW: "below",
        Adjacency.BELOW_RIGHT: "below_right",
    }

    def neighbor(self, pos: GridPos, adjacency: Adjacency) -> Optional[GridPos]:
        if adjacency == Adjacency.SAME:
            return pos
        name = self._NEIGHBOR_LOOKUPS.get(adjacency)
        if name is None:
            return None
        return getattr(self, name)(pos)

    def neighbors(self, pos: GridPos) -> Iterable[GridPos]:
        for adjacency in COMPASS_ADJACENCIES:
            neighbor = self.neighbor(pos, adjacency)
            if neighbor is not None:
                yield neighbor

    # ------------------------------------------------------------------
    # Cell manipulation
    # ------------------------------------------------------------------
    def swap_cells(self, pos_a: GridPos, pos_b: GridPos) -> None:
        if pos_a == pos_b:
            raise SameTargetError(pos_a, pos_b)

        index_a = self.index_from_pos(pos_a)
        index_b = self.index_from_pos(pos_b)
        if index_a is None or index_b is None:
            raise OutOfBoundsError(pos_a, pos_b)

        LOGGER.debug("swapping cells %s and %s", pos_a, pos_b)
        self._swap_cells_by_index(index_a, index_b)
        self.recalculate_active_cells()

    def _swap_cells_by_index(self, index_a: int, index_b: int) -> None:
        if index_a == index_b:
            raise SameTargetError(index_a, index_b)
        valid = range(len(self.cells))
        if index_a not in valid or index_b not in valid:
            raise OutOfBoundsError(index_a, index_b)
        self.cells[index_a], self.cells[index_b] = self.cells[index_b], self.cells[index_a]

    def set_cell(self, pos: GridPos, cell: Cell) -> None:
        index = self.index_from_pos(pos)
        if index is None:
            raise OutOfBoundsError(pos)
        self.cells[index] = copy.deepcopy(cell)
        self.recalculate_active_cells()

    def pop_top_row(self) -> List[Cell]:
        """Remove and return the top row, left to right. No recalculation.

        Only one row may be missing at a time: a second pop before the
        matching push raises :class:`IncompleteGridError`.
        """

        if not self.is_complete():
            raise IncompleteGridError(self.width * self.height - len(self.cells))
        LOGGER.debug("removing top row from grid")
        popped = self.cells[-self.width:]
        del self.cells[-self.width:]
        return popped

    def push_bottom_row(self, new_row: Sequence[Cell]) -> None:
        """Insert ``new_row`` as row 0, shifting every row up by one.

        The caller normally pops the top row first; if it has not, the top row
        is evicted so the grid keeps its height. Incoming fragments start
        inactive.
        """

        if len(new_row) != self.width:
            raise RowLengthMismatchError(len(new_row), self.width)

        incoming = [copy.deepcopy(cell) for cell in new_row]
        for cell in incoming:
            cell.deactivate()

        LOGGER.debug("pushing new row to bottom of grid")
        self.cells = incoming + self.cells
        overflow = len(self.cells) - self.width * self.height
        if overflow > 0:
            LOGGER.debug("evicting %s cells above the top row", overflow)
            del self.cells[-overflow:]
        self.recalculate_active_cells()

    def cycle_rows(self, row_source: RowSource) -> List[Cell]:
        """Pop the top row and push a fresh one from ``row_source``.

        Returns the popped row. A bad row from the source leaves the grid as it
        was before the call.
        """

        new_row = list(row_source(self.width))
        if len(new_row) != self.width:
            LOGGER.warning("row source produced %s cells for width %s", len(new_row), self.width)
            raise RowLengthMismatchError(len(new_row), self.width)
        popped = self.pop_top_row()
        self.push_bottom_row(new_row)
        return popped

    # ------------------------------------------------------------------
    # Activation
    # ------------------------------------------------------------------
    def recalculate_active_cells(self) -> Dict[GridPos, activation.CellStatus]:
        statuses = activation.recalculate_active_cells(self)
        if LOGGER.isEnabledFor(logging.DEBUG):
            LOGGER.debug("state of grid after recalculation of active cells:\n%s", format_grid(self))
        return statuses

    def active_positions(self) -> List[GridPos]:
        return [self.pos_from_index(i) for i, cell in enumerate(self.cells) if cell.is_active()]

    # ------------------------------------------------------------------
    # Serialization helpers
    # ------------------------------------------------------------------
    def cell_rows(self) -> Iterator[List[Cell]]:
        """Rows bottom to top."""
        for start in range(0, len(self.cells), self.width):
            yield self.cells[start:start + self.width]

    def cell_rows_in_render_order(self) -> List[List[Cell]]:
        """Rows top to bottom, the way they are displayed."""
        return list(reversed(list(self.cell_rows())))

    def as_chars(self) -> CharGrid:
        return [[cell.to_char() for cell in row] for row in self.cell_rows_in_render_order()]

    def as_str(self) -> str:
        """Fixture codes, readable back through :meth:`from_str`."""
        return "\n".join(
            "".join(cell.to_str() for cell in row) for row in self.cell_rows_in_render_order()
        )

    def as_active_bitmask(self) -> Bitmask:
        return [[int(cell.is_active()) for cell in row] for row in self.cell_rows_in_render_order()]


def new_small_grid() -> Grid:
    return Grid(DEFAULT_GRID_WIDTH, DEFAULT_GRID_HEIGHT)
