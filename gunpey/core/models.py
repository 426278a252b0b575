"""Data models supporting the connectivity engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .adjacency import are_fragments_connecting
from .constants import (
    Adjacency,
    CODE_TO_KIND,
    EMPTY_CHAR,
    FragmentKind,
    GLYPH_TO_KIND,
)


@dataclass(frozen=True, order=True)
class GridPos:
    """A cell coordinate, or a corner node in the (width+1)x(height+1) lattice.

    ``x`` grows to the right from column 0 and ``y`` grows upward from the
    bottom row 0.
    """

    x: int
    y: int

    def __add__(self, other: GridPos) -> GridPos:
        return GridPos(self.x + other.x, self.y + other.y)

    def __sub__(self, other: GridPos) -> GridPos:
        return GridPos(self.x - other.x, self.y - other.y)

    def __str__(self) -> str:
        return f"(x: {self.x}, y: {self.y})"

    def to_tuple(self) -> Tuple[int, int]:
        return self.x, self.y

    def step(self, adjacency: Adjacency) -> GridPos:
        dx, dy = adjacency.step
        return GridPos(self.x + dx, self.y + dy)

    def adjacency(self, other: GridPos) -> Adjacency:
        """Where ``other`` sits relative to this position."""
        return Adjacency.from_delta(other.x - self.x, other.y - self.y)


def gp(x: int, y: int) -> GridPos:
    return GridPos(x, y)


def corner_nodes(cell_pos: GridPos, kind: FragmentKind) -> Tuple[GridPos, GridPos]:
    """Return the two lattice nodes the fragment's line segment spans."""

    if kind == FragmentKind.CARET:
        return cell_pos, cell_pos + GridPos(1, 0)
    if kind == FragmentKind.INVERTED_CARET:
        return cell_pos + GridPos(0, 1), cell_pos + GridPos(1, 1)
    if kind == FragmentKind.LEFT_SLASH:
        return cell_pos + GridPos(0, 1), cell_pos + GridPos(1, 0)
    return cell_pos, cell_pos + GridPos(1, 1)


@dataclass
class LineFragment:
    """An oriented line shape plus its cached activation flag."""

    kind: FragmentKind
    is_active: bool = False

    @classmethod
    def from_char(cls, char: str) -> LineFragment:
        """Parse a glyph (always inactive) or a fixture code (uppercase = active)."""

        if char in GLYPH_TO_KIND:
            return cls(GLYPH_TO_KIND[char])
        if char in CODE_TO_KIND:
            return cls(CODE_TO_KIND[char])
        if char.lower() in CODE_TO_KIND:
            return cls(CODE_TO_KIND[char.lower()], is_active=True)
        raise ValueError(f"invalid line fragment character {char!r}")

    def to_char(self) -> str:
        return self.kind.glyph

    def to_str(self) -> str:
        return self.kind.code.upper() if self.is_active else self.kind.code


@dataclass
class Cell:
    """A grid slot: empty when ``fragment`` is ``None``."""

    fragment: Optional[LineFragment] = field(default=None)

    @classmethod
    def empty(cls) -> Cell:
        return cls()

    @classmethod
    def filled(cls, kind: FragmentKind, active: bool = False) -> Cell:
        return cls(LineFragment(kind, is_active=active))

    @classmethod
    def from_char(cls, char: str) -> Cell:
        if char == EMPTY_CHAR:
            return cls()
        return cls(LineFragment.from_char(char))

    @property
    def kind(self) -> Optional[FragmentKind]:
        return self.fragment.kind if self.fragment is not None else None

    def is_empty(self) -> bool:
        return self.fragment is None

    def is_active(self) -> bool:
        return self.fragment is not None and self.fragment.is_active

    def activate(self) -> None:
        if self.fragment is not None:
            self.fragment.is_active = True

    def deactivate(self) -> None:
        if self.fragment is not None:
            self.fragment.is_active = False

    def is_connected_to(self, other: Cell, adjacency: Adjacency) -> bool:
        if self.fragment is None or other.fragment is None:
            return False
        return are_fragments_connecting(self.fragment, adjacency, other.fragment)

    def corner_nodes(self, cell_pos: GridPos) -> Tuple[GridPos, ...]:
        if self.fragment is None:
            return ()
        return corner_nodes(cell_pos, self.fragment.kind)

    def has_corner_node(self, cell_pos: GridPos, node: GridPos) -> bool:
        return node in self.corner_nodes(cell_pos)

    def to_char(self) -> str:
        return self.fragment.to_char() if self.fragment is not None else EMPTY_CHAR

    def to_str(self) -> str:
        return self.fragment.to_str() if self.fragment is not None else EMPTY_CHAR

    def __str__(self) -> str:
        return self.to_char()
