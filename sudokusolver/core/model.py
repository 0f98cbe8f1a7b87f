from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple

GRID_SIZE = 9
SUBGRID_SIZE = 3
EMPTY = 0

Grid = List[List[int]]


@dataclass(frozen=True)
class Position:
    """A (row, col) address inside a grid, both 0-based."""
    row: int
    col: int


@dataclass(frozen=True)
class Solution:
    """Immutable snapshot of a completed grid."""
    rows: Tuple[Tuple[int, ...], ...]

    @classmethod
    def from_grid(cls, grid: Sequence[Sequence[int]]) -> "Solution":
        return cls(tuple(tuple(row) for row in grid))

    def as_grid(self) -> Grid:
        return [list(row) for row in self.rows]

    def cell(self, row: int, col: int) -> int:
        return self.rows[row][col]

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[Tuple[int, ...]]:
        return iter(self.rows)


def subgrid_size(size: int) -> int:
    """Side length of a box for a grid of the given side length."""
    box = math.isqrt(size) if size > 0 else 0
    if box == 0 or box * box != size:
        raise ValueError(f"grid size must be a positive perfect square, got {size}")
    return box


def subgrid_origin(p: Position, box: int = SUBGRID_SIZE) -> Position:
    return Position(p.row - p.row % box, p.col - p.col % box)


def is_position_in_grid(p: Position, size: int = GRID_SIZE) -> bool:
    return 0 <= p.row < size and 0 <= p.col < size


def is_value_in_range(value: int, size: int = GRID_SIZE) -> bool:
    return 1 <= value <= size


def copy_grid(grid: Sequence[Sequence[int]]) -> Grid:
    return [list(row) for row in grid]
