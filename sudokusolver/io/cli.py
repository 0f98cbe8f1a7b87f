"""Command-line interface."""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from ..core.constraints import find_conflicts
from ..core.csp import solve
from ..core.model import Grid, Position, Solution
from . import parser
from .formatter import format_grid, format_report

logger = logging.getLogger(__name__)


def _attempt_logger(delay_ms: int):
    def on_attempt(grid: Grid, p: Position, value: int) -> None:
        logger.debug("Current state: %s", format_grid(grid))
        logger.debug("Trying %d at row %d, col %d", value, p.row, p.col)
        if delay_ms:
            time.sleep(delay_ms / 1000)
    return on_attempt


def _log_solution(solution: Solution) -> None:
    logger.debug("Solution: %s", format_grid(solution))


def _read_puzzle(source: str) -> parser.Puzzle:
    if source == "-":
        try:
            text = sys.stdin.read()
        except UnicodeDecodeError as exc:
            raise parser.PuzzleFormatError(f"stdin: not valid text ({exc.reason})") from exc
        return parser.Puzzle(grid=parser.read_grid(text))
    return parser.load_puzzle(Path(source))


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Find every solution of a 9x9 Sudoku puzzle")
    ap.add_argument("puzzle", nargs="?", default="-",
                    help="Puzzle file (.yaml or 81 whitespace-separated digits); '-' reads stdin")
    ap.add_argument("--delay", type=int, metavar="MS", default=None,
                    help="Pause MS milliseconds before each attempt and log the working grid")
    ap.add_argument("--check", action="store_true", help="Warn about repeated digits among the givens")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = ap.parse_args(argv)

    try:
        puz = _read_puzzle(args.puzzle)
    except parser.PuzzleFormatError as exc:
        raise SystemExit(f"Invalid puzzle: {exc}") from exc
    except OSError as exc:
        raise SystemExit(f"Cannot read puzzle: {exc}") from exc

    opts = puz.options
    if args.delay is not None:
        if args.delay < 0:
            ap.error("--delay must not be negative")
        opts.delay_ms = args.delay
        opts.show_attempts = True
    if args.check:
        opts.check = True

    logging.basicConfig(
        level=logging.DEBUG if (args.verbose or opts.show_attempts or opts.delay_ms) else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if opts.check:
        for c in find_conflicts(puz.grid):
            logger.warning("Digit %d repeated in %s %d", c.digit, c.unit, c.index)

    tracing = opts.show_attempts or bool(opts.delay_ms)
    solutions = solve(
        puz.grid,
        on_attempt=_attempt_logger(opts.delay_ms) if tracing else None,
        on_solution=_log_solution if tracing else None,
    )
    print(format_report(solutions), end="")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
