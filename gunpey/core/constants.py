"""Shared constants and enumerations for the Gunpey puzzle core."""

from __future__ import annotations

from enum import Enum, IntFlag
from typing import Dict, Tuple


DEFAULT_GRID_WIDTH = 5
DEFAULT_GRID_HEIGHT = 10
EMPTY_CHAR = "."


class Corner(IntFlag):
    """The four corners of a cell, as bits of a 4-bit mask.

    ::

        ABOVE_LEFT   ABOVE_RIGHT      0b1000  0b0100
        BELOW_LEFT   BELOW_RIGHT      0b0010  0b0001
    """

    NONE = 0
    BELOW_RIGHT = 0b0001
    BELOW_LEFT = 0b0010
    ABOVE_RIGHT = 0b0100
    ABOVE_LEFT = 0b1000


class FragmentKind(str, Enum):
    """The four line shapes a filled cell can hold."""

    CARET = "CARET"
    INVERTED_CARET = "INVERTED_CARET"
    LEFT_SLASH = "LEFT_SLASH"
    RIGHT_SLASH = "RIGHT_SLASH"

    @property
    def glyph(self) -> str:
        return FRAGMENT_GLYPHS[self]

    @property
    def code(self) -> str:
        """Lowercase fixture letter; uppercase marks an active fragment."""
        return FRAGMENT_CODES[self]

    @property
    def label(self) -> str:
        return FRAGMENT_LABELS[self]

    @property
    def corners(self) -> Corner:
        return FRAGMENT_CORNERS[self]

    def __str__(self) -> str:
        return self.label


FRAGMENT_GLYPHS: Dict[FragmentKind, str] = {
    FragmentKind.CARET: "∧",
    FragmentKind.INVERTED_CARET: "∨",
    FragmentKind.LEFT_SLASH: "\\",
    FragmentKind.RIGHT_SLASH: "/",
}

FRAGMENT_CODES: Dict[FragmentKind, str] = {
    FragmentKind.CARET: "c",
    FragmentKind.INVERTED_CARET: "i",
    FragmentKind.LEFT_SLASH: "l",
    FragmentKind.RIGHT_SLASH: "r",
}

FRAGMENT_LABELS: Dict[FragmentKind, str] = {
    FragmentKind.CARET: "caret",
    FragmentKind.INVERTED_CARET: "inverted caret",
    FragmentKind.LEFT_SLASH: "left slash",
    FragmentKind.RIGHT_SLASH: "right slash",
}

FRAGMENT_CORNERS: Dict[FragmentKind, Corner] = {
    FragmentKind.CARET: Corner.BELOW_LEFT | Corner.BELOW_RIGHT,
    FragmentKind.INVERTED_CARET: Corner.ABOVE_LEFT | Corner.ABOVE_RIGHT,
    FragmentKind.LEFT_SLASH: Corner.ABOVE_LEFT | Corner.BELOW_RIGHT,
    FragmentKind.RIGHT_SLASH: Corner.ABOVE_RIGHT | Corner.BELOW_LEFT,
}

GLYPH_TO_KIND: Dict[str, FragmentKind] = {glyph: kind for kind, glyph in FRAGMENT_GLYPHS.items()}
CODE_TO_KIND: Dict[str, FragmentKind] = {code: kind for kind, code in FRAGMENT_CODES.items()}


class Adjacency(str, Enum):
    """Relation of one grid position to another one step away (or not)."""

    ABOVE_LEFT = "ABOVE_LEFT"
    ABOVE = "ABOVE"
    ABOVE_RIGHT = "ABOVE_RIGHT"
    LEFT = "LEFT"
    SAME = "SAME"
    RIGHT = "RIGHT"
    BELOW_LEFT = "BELOW_LEFT"
    BELOW = "BELOW"
    BELOW_RIGHT = "BELOW_RIGHT"
    NOT_ADJACENT = "NOT_ADJACENT"

    @classmethod
    def from_delta(cls, dx: int, dy: int) -> "Adjacency":
        return DELTA_TO_ADJACENCY.get((dx, dy), cls.NOT_ADJACENT)

    @property
    def step(self) -> Tuple[int, int]:
        """``(dx, dy)`` from a position to the neighbor in this direction."""
        return ADJACENCY_STEPS[self]

    @property
    def opposite(self) -> "Adjacency":
        return OPPOSITE_ADJACENCY[self]

    def __str__(self) -> str:
        return self.value.lower().replace("_", " ")


ADJACENCY_STEPS: Dict[Adjacency, Tuple[int, int]] = {
    Adjacency.ABOVE_LEFT: (-1, 1),
    Adjacency.ABOVE: (0, 1),
    Adjacency.ABOVE_RIGHT: (1, 1),
    Adjacency.LEFT: (-1, 0),
    Adjacency.SAME: (0, 0),
    Adjacency.RIGHT: (1, 0),
    Adjacency.BELOW_LEFT: (-1, -1),
    Adjacency.BELOW: (0, -1),
    Adjacency.BELOW_RIGHT: (1, -1),
}

DELTA_TO_ADJACENCY: Dict[Tuple[int, int], Adjacency] = {
    step: adjacency for adjacency, step in ADJACENCY_STEPS.items()
}

OPPOSITE_ADJACENCY: Dict[Adjacency, Adjacency] = {
    Adjacency.ABOVE_LEFT: Adjacency.BELOW_RIGHT,
    Adjacency.ABOVE: Adjacency.BELOW,
    Adjacency.ABOVE_RIGHT: Adjacency.BELOW_LEFT,
    Adjacency.LEFT: Adjacency.RIGHT,
    Adjacency.SAME: Adjacency.SAME,
    Adjacency.RIGHT: Adjacency.LEFT,
    Adjacency.BELOW_LEFT: Adjacency.ABOVE_RIGHT,
    Adjacency.BELOW: Adjacency.ABOVE,
    Adjacency.BELOW_RIGHT: Adjacency.ABOVE_LEFT,
    Adjacency.NOT_ADJACENT: Adjacency.NOT_ADJACENT,
}

COMPASS_ADJACENCIES: Tuple[Adjacency, ...] = (
    Adjacency.ABOVE_LEFT,
    Adjacency.ABOVE,
    Adjacency.ABOVE_RIGHT,
    Adjacency.LEFT,
    Adjacency.RIGHT,
    Adjacency.BELOW_LEFT,
    Adjacency.BELOW,
    Adjacency.BELOW_RIGHT,
)

LEFTWARD_ADJACENCIES: Tuple[Adjacency, ...] = (
    Adjacency.ABOVE_LEFT,
    Adjacency.LEFT,
    Adjacency.BELOW_LEFT,
)
RIGHTWARD_ADJACENCIES: Tuple[Adjacency, ...] = (
    Adjacency.ABOVE_RIGHT,
    Adjacency.RIGHT,
    Adjacency.BELOW_RIGHT,
)

# Cells sharing a lattice node, as offsets from the node: the node is the
# bottom-left corner of the first, top-left of the second, top-right of the
# third and bottom-right of the fourth.
NODE_CELL_OFFSETS: Tuple[Tuple[int, int], ...] = ((0, 0), (0, -1), (-1, -1), (-1, 0))

