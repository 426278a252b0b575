"""Pretty-print helpers for puzzle grids."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TYPE_CHECKING

from ..core.constants import EMPTY_CHAR

if TYPE_CHECKING:
    from ..engine.grid import Grid


def cell_symbol(cell) -> str:
    """Glyph for inactive fragments, uppercase fixture code for active ones."""
    if cell.is_empty():
        return EMPTY_CHAR
    if cell.is_active():
        return cell.to_str()
    return cell.to_char()


def format_grid(grid: Grid) -> str:
    width = grid.width
    header_cells = [f"{x:>2}" for x in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * width - 1))
    rows = grid.cell_rows_in_render_order()
    top = len(rows) - 1
    for offset, row in enumerate(rows):
        row_render = " ".join(f"{cell_symbol(cell):>2}" for cell in row)
        lines.append(f"{top - offset:>2} | {row_render}")
    return "\n".join(lines)


def pretty_print_grid(grid: Grid, *, label: str | None = None, stream=None) -> None:
    """Print the grid in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_grid(grid), file=stream)


def print_grid_stats(grid: Grid, *, stream=None) -> None:
    """Print grid + fill and activation counts."""

    stream = stream or sys.stdout
    print(format_grid(grid), file=stream)

    total_cells = len(grid.cells)
    filled = [cell for cell in grid.cells if not cell.is_empty()]
    active = [cell for cell in filled if cell.is_active()]
    kinds = Counter(cell.kind.label for cell in filled)

    print(file=stream)
    print("--- Grid ---", file=stream)
    print(f"  Size:          {grid.width} x {grid.height} ({total_cells} cells)", file=stream)
    if total_cells:
        print(f"  Filled:        {len(filled)} ({len(filled) / total_cells * 100:.0f}%)", file=stream)
    print(f"  Empty:         {total_cells - len(filled)}", file=stream)
    print(f"  Active:        {len(active)}", file=stream)
    if kinds:
        dist_parts = [f"{label}:{count}" for label, count in sorted(kinds.items())]
        print(f"  Shapes:        {' '.join(dist_parts)}", file=stream)
