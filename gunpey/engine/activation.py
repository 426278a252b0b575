"""Left-to-right chain detection over the corner-node lattice.

Terminology:

- *node*: a corner of a cell, i.e. a point of the (width+1)x(height+1) lattice.
- *cell*: an edge between two nodes (its fragment's endpoints) or an empty slot.
- *live node*: a node still touched by at least two fragments whose other
  endpoints are live too. Nodes on the left and right borders always count the
  outside of the grid as a connection.

Recalculation runs in two phases. Phase A prunes dangling nodes until every
remaining node is live. Phase B floods "reaches the left edge" and "reaches the
right edge" facts through fragments whose two endpoints survived phase A. A
fragment is active when it holds both facts.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING, Deque, Dict, Iterator, List, Set

from ..core.constants import (
    COMPASS_ADJACENCIES,
    LEFTWARD_ADJACENCIES,
    NODE_CELL_OFFSETS,
    RIGHTWARD_ADJACENCIES,
)
from ..core.models import GridPos
from ..utils.logger import get_logger

if TYPE_CHECKING:
    from .grid import Grid


LOGGER = get_logger(__name__)


@dataclass
class CellStatus:
    """Per-cell bookkeeping for phase B."""

    is_part_of_a_chain: bool
    is_connected_to_left_edge: bool = False
    is_connected_to_right_edge: bool = False

    @property
    def is_spanning(self) -> bool:
        return self.is_connected_to_left_edge and self.is_connected_to_right_edge


# ----------------------------------------------------------------------
# Phase A: node pruning
# ----------------------------------------------------------------------
def lattice_nodes(grid: Grid) -> Iterator[GridPos]:
    for y in range(grid.height + 1):
        for x in range(grid.width + 1):
            yield GridPos(x, y)


def cells_around_node(node: GridPos) -> Iterator[GridPos]:
    for dx, dy in NODE_CELL_OFFSETS:
        yield GridPos(node.x + dx, node.y + dy)


def node_connects_across_cell(
    grid: Grid, cell_pos: GridPos, node: GridPos, live_nodes: Set[GridPos]
) -> bool:
    """Whether the cell at ``cell_pos`` carries a live line away from ``node``."""

    if not 0 <= cell_pos.x < grid.width:
        return True
    if not 0 <= cell_pos.y < grid.height:
        return False

    cell = grid.cell_at(cell_pos)
    if cell is None or not cell.has_corner_node(cell_pos, node):
        return False
    return any(other != node and other in live_nodes for other in cell.corner_nodes(cell_pos))


def node_connection_count(grid: Grid, node: GridPos, live_nodes: Set[GridPos]) -> int:
    return sum(
        1
        for cell_pos in cells_around_node(node)
        if node_connects_across_cell(grid, cell_pos, node, live_nodes)
    )


def prune_dangling_nodes(grid: Grid) -> Set[GridPos]:
    """Return the lattice nodes that survive pruning."""

    live_nodes: Set[GridPos] = set(lattice_nodes(grid))
    queue: Deque[GridPos] = deque(sorted(live_nodes))
    queued: Set[GridPos] = set(queue)

    while queue:
        node = queue.popleft()
        queued.discard(node)
        if node not in live_nodes:
            continue
        if node_connection_count(grid, node, live_nodes) >= 2:
            continue

        live_nodes.discard(node)
        # Fragments ending here lose this endpoint; their far ends may now dangle.
        for cell_pos in cells_around_node(node):
            cell = grid.cell_at(cell_pos)
            if cell is None or not cell.has_corner_node(cell_pos, node):
                continue
            for other in cell.corner_nodes(cell_pos):
                if other in live_nodes and other not in queued:
                    queue.append(other)
                    queued.add(other)

    return live_nodes


# ----------------------------------------------------------------------
# Phase B: edge reachability
# ----------------------------------------------------------------------
def build_cell_statuses(grid: Grid, live_nodes: Set[GridPos]) -> Dict[GridPos, CellStatus]:
    statuses: Dict[GridPos, CellStatus] = {}
    for index, cell in enumerate(grid.cells):
        cell_pos = grid.pos_from_index(index)
        nodes = cell.corner_nodes(cell_pos)
        eligible = bool(nodes) and all(node in live_nodes for node in nodes)
        statuses[cell_pos] = CellStatus(is_part_of_a_chain=eligible)
    return statuses


def connected_neighbors(grid: Grid, cell_pos: GridPos) -> List[GridPos]:
    """Neighbors whose fragments touch the fragment at ``cell_pos``.

    The left edge column never looks further left and the right edge column
    never looks further right: those sides are the boundary itself.
    """

    cell = grid.cell_at(cell_pos)
    if cell is None or cell.is_empty():
        return []

    excluded = set()
    if cell_pos.x == 0:
        excluded.update(LEFTWARD_ADJACENCIES)
    if cell_pos.x == grid.width - 1:
        excluded.update(RIGHTWARD_ADJACENCIES)

    result: List[GridPos] = []
    for adjacency in COMPASS_ADJACENCIES:
        if adjacency in excluded:
            continue
        neighbor_pos = grid.neighbor(cell_pos, adjacency)
        if neighbor_pos is None:
            continue
        neighbor = grid.cell_at(neighbor_pos)
        if neighbor is not None and cell.is_connected_to(neighbor, adjacency):
            result.append(neighbor_pos)
    return result


def _flood(
    grid: Grid,
    statuses: Dict[GridPos, CellStatus],
    seeds: List[GridPos],
    attribute: str,
) -> None:
    queue: Deque[GridPos] = deque()
    for cell_pos in seeds:
        status = statuses[cell_pos]
        if status.is_part_of_a_chain and not getattr(status, attribute):
            setattr(status, attribute, True)
            queue.append(cell_pos)

    while queue:
        cell_pos = queue.popleft()
        for neighbor_pos in connected_neighbors(grid, cell_pos):
            status = statuses[neighbor_pos]
            if status.is_part_of_a_chain and not getattr(status, attribute):
                setattr(status, attribute, True)
                queue.append(neighbor_pos)


def propagate_edge_reachability(grid: Grid, statuses: Dict[GridPos, CellStatus]) -> None:
    """Mark every chain cell reachable from the left and the right edge columns."""

    if grid.width < 2:
        # A single column is both edges at once; no chain can span it.
        return

    rows = range(len(grid.cells) // grid.width)
    _flood(grid, statuses, [GridPos(0, y) for y in rows], "is_connected_to_left_edge")
    _flood(grid, statuses, [GridPos(grid.width - 1, y) for y in rows], "is_connected_to_right_edge")


def recalculate_active_cells(grid: Grid) -> Dict[GridPos, CellStatus]:
    """Recompute every fragment's activation flag from scratch."""

    live_nodes = prune_dangling_nodes(grid)
    statuses = build_cell_statuses(grid, live_nodes)
    LOGGER.debug(
        "recalculating: %s/%s nodes live, %s chain cells",
        len(live_nodes),
        (grid.width + 1) * (grid.height + 1),
        sum(1 for status in statuses.values() if status.is_part_of_a_chain),
    )

    propagate_edge_reachability(grid, statuses)

    for cell_pos, status in statuses.items():
        cell = grid.cell_at(cell_pos)
        if cell is None:
            continue
        if status.is_spanning:
            cell.activate()
        else:
            cell.deactivate()
    return statuses
