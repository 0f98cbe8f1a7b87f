"""Plain-text rendering of grids and solve reports."""

from __future__ import annotations

from typing import Iterable, Sequence


def format_grid(grid: Iterable[Sequence[int]]) -> str:
    """Each row on its own line, digits run together, every row preceded by a newline."""
    return "".join("\n" + "".join(str(v) for v in row) for row in grid)


def format_report(solutions: Sequence[Iterable[Sequence[int]]]) -> str:
    parts = [f"Found {len(solutions)} solutions.\n"]
    for solution in solutions:
        parts.append(format_grid(solution) + "\n")
    return "".join(parts)
