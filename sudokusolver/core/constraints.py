"""Row, column and box uniqueness checks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple

from .model import (
    EMPTY,
    Position,
    is_position_in_grid,
    is_value_in_range,
    subgrid_origin,
    subgrid_size,
)


@dataclass(frozen=True)
class Conflict:
    """A digit repeated inside one unit (row, col or box)."""
    unit: str
    index: int
    digit: int


def is_value_possible(grid: Sequence[Sequence[int]], p: Position, value: int) -> bool:
    """Return True if ``value`` is not yet used in the row, column or box of ``p``."""
    size = len(grid)
    assert is_position_in_grid(p, size), "position must be in grid"
    assert is_value_in_range(value, size), f"value must be in range [1, {size}]"

    for row in range(size):
        if grid[row][p.col] == value:
            return False

    for col in range(size):
        if grid[p.row][col] == value:
            return False

    box = subgrid_size(size)
    origin = subgrid_origin(p, box)
    for row in range(origin.row, origin.row + box):
        for col in range(origin.col, origin.col + box):
            if grid[row][col] == value:
                return False

    return True


def iter_units(grid: Sequence[Sequence[int]]) -> Iterator[Tuple[str, int, List[int]]]:
    """Yield ``(unit, index, values)`` for every row, column and box."""
    size = len(grid)
    box = subgrid_size(size)
    for r in range(size):
        yield "row", r, list(grid[r])
    for c in range(size):
        yield "col", c, [grid[r][c] for r in range(size)]
    for b in range(size):
        r0 = box * (b // box)
        c0 = box * (b % box)
        yield "box", b, [grid[r0 + i][c0 + j] for i in range(box) for j in range(box)]


def find_conflicts(grid: Sequence[Sequence[int]]) -> List[Conflict]:
    conflicts = []
    for unit, index, values in iter_units(grid):
        seen = set()
        reported = set()
        for v in values:
            if v == EMPTY:
                continue
            if v in seen and v not in reported:
                conflicts.append(Conflict(unit, index, v))
                reported.add(v)
            seen.add(v)
    return conflicts


def is_complete(grid: Sequence[Sequence[int]]) -> bool:
    return all(v != EMPTY for row in grid for v in row)


def is_valid_solution(grid: Sequence[Sequence[int]]) -> bool:
    """A complete grid where every unit holds each digit exactly once."""
    if not is_complete(grid):
        return False
    digits = set(range(1, len(grid) + 1))
    return all(set(values) == digits and len(values) == len(digits)
               for _, _, values in iter_units(grid))
