"""Exhaustive depth-first backtracking solver."""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence

from .constraints import is_value_possible
from .model import EMPTY, Grid, Position, Solution, copy_grid, subgrid_size

logger = logging.getLogger(__name__)

AttemptObserver = Callable[[Grid, Position, int], None]
SolutionObserver = Callable[[Solution], None]


def find_empty_cell(grid: Sequence[Sequence[int]]) -> Optional[Position]:
    """Return the first empty cell in row-major order, or None if the grid is full."""
    for row, values in enumerate(grid):
        for col, value in enumerate(values):
            if value == EMPTY:
                return Position(row, col)
    return None


def solve(
    grid: Sequence[Sequence[int]],
    on_attempt: Optional[AttemptObserver] = None,
    on_solution: Optional[SolutionObserver] = None,
) -> List[Solution]:
    """Enumerate every completion of ``grid``.

    Empty cells are filled in row-major order, trying digits in increasing
    order, so solutions come back in discovery order. The search keeps going
    after a solution is found. A grid that is already full is returned as the
    single solution without checking its givens against each other.

    ``on_attempt`` is called with the working grid, the cell and the digit
    right before each placement. ``on_solution`` is called with each
    solution as it is recorded.
    """
    _check_size(grid)
    work = copy_grid(grid)
    solutions: List[Solution] = []
    logger.debug("Solving grid with %d empty cells",
                 sum(v == EMPTY for row in work for v in row))
    _backtrack(work, solutions, on_attempt, on_solution)
    logger.debug("Found %d solutions", len(solutions))
    return solutions


def _check_size(grid: Sequence[Sequence[int]]) -> None:
    size = len(grid)
    subgrid_size(size)
    for r, row in enumerate(grid):
        if len(row) != size:
            raise ValueError(f"row {r} has {len(row)} cells, expected {size}")


def _backtrack(
    grid: Grid,
    solutions: List[Solution],
    on_attempt: Optional[AttemptObserver],
    on_solution: Optional[SolutionObserver],
) -> None:
    p = find_empty_cell(grid)
    if p is None:
        solution = Solution.from_grid(grid)
        solutions.append(solution)
        if on_solution is not None:
            on_solution(solution)
        return

    for value in range(1, len(grid) + 1):
        if not is_value_possible(grid, p, value):
            continue
        if on_attempt is not None:
            on_attempt(grid, p, value)
        grid[p.row][p.col] = value
        _backtrack(grid, solutions, on_attempt, on_solution)
        grid[p.row][p.col] = EMPTY
