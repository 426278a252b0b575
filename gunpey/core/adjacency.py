"""Shape-pair connection rules between neighboring line fragments.

Two fragments connect across a direction when the corner of the first that
faces the direction and the matching corner of the second are the same point
of the node lattice. The rules are spelled out below as a fixed table, keyed by
where the second fragment sits relative to the first::

    RIGHT       (A top-right = B top-left) or (A bottom-right = B bottom-left)
    ABOVE_RIGHT  A top-right = B bottom-left
    BELOW_LEFT   A bottom-left = B top-right
    ...
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, FrozenSet, Tuple

from .constants import Adjacency, FragmentKind

if TYPE_CHECKING:
    from .models import LineFragment


_C = FragmentKind.CARET
_I = FragmentKind.INVERTED_CARET
_L = FragmentKind.LEFT_SLASH
_R = FragmentKind.RIGHT_SLASH

KindPair = Tuple[FragmentKind, FragmentKind]

CONNECTION_TABLE: Dict[Adjacency, FrozenSet[KindPair]] = {
    Adjacency.RIGHT: frozenset({
        (_I, _I), (_I, _L), (_R, _I), (_R, _L),
        (_C, _C), (_C, _R), (_L, _C), (_L, _R),
    }),
    Adjacency.LEFT: frozenset({
        (_I, _I), (_I, _R), (_L, _I), (_L, _R),
        (_C, _C), (_C, _L), (_R, _C), (_R, _L),
    }),
    Adjacency.ABOVE: frozenset({
        (_I, _C), (_I, _L), (_I, _R),
        (_L, _C), (_L, _R),
        (_R, _C), (_R, _L),
    }),
    Adjacency.BELOW: frozenset({
        (_C, _I), (_C, _L), (_C, _R),
        (_L, _I), (_L, _R),
        (_R, _I), (_R, _L),
    }),
    Adjacency.ABOVE_RIGHT: frozenset({(_I, _C), (_I, _R), (_R, _C), (_R, _R)}),
    Adjacency.ABOVE_LEFT: frozenset({(_I, _C), (_I, _L), (_L, _C), (_L, _L)}),
    Adjacency.BELOW_RIGHT: frozenset({(_C, _I), (_C, _L), (_L, _I), (_L, _L)}),
    Adjacency.BELOW_LEFT: frozenset({(_C, _I), (_C, _R), (_R, _I), (_R, _R)}),
}


def kinds_connect(kind_a: FragmentKind, adjacency: Adjacency, kind_b: FragmentKind) -> bool:
    """Table lookup on bare kinds; ``SAME`` is always true, ``NOT_ADJACENT`` never."""

    if adjacency == Adjacency.SAME:
        return True
    if adjacency == Adjacency.NOT_ADJACENT:
        return False
    return (kind_a, kind_b) in CONNECTION_TABLE[adjacency]


def are_fragments_connecting(a: LineFragment, adjacency: Adjacency, b: LineFragment) -> bool:
    """Whether fragment ``b``, sitting at ``adjacency`` of fragment ``a``, touches it.

    ``SAME`` answers true by convention; it is an identity check, never a
    connection between two distinct cells.
    """

    return kinds_connect(a.kind, adjacency, b.kind)
