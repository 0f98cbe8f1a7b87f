from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List

import yaml

from ..core.model import GRID_SIZE, Grid


class PuzzleFormatError(ValueError):
    """Raised when puzzle input cannot be turned into a grid."""


@dataclass
class SolveOptions:
    delay_ms: int = 0
    show_attempts: bool = False
    check: bool = False

    @classmethod
    def from_mapping(cls, data: Dict[str, Any] | None) -> "SolveOptions":
        if data is not None and not isinstance(data, dict):
            raise PuzzleFormatError("'options' must be a mapping")
        data = dict(data or {})
        known = {f.name for f in fields(cls)}
        unknown = sorted(str(k) for k in data if not isinstance(k, str) or k not in known)
        if unknown:
            raise PuzzleFormatError(f"unknown option(s): {', '.join(unknown)}")
        opts = cls(**data)
        # bool is an int subclass; "delay_ms: true" is not a delay
        if isinstance(opts.delay_ms, bool) or not isinstance(opts.delay_ms, int) or opts.delay_ms < 0:
            raise PuzzleFormatError(f"delay_ms must be a non-negative integer, got {opts.delay_ms!r}")
        for name in ("show_attempts", "check"):
            value = getattr(opts, name)
            if not isinstance(value, bool):
                raise PuzzleFormatError(f"{name} must be true or false, got {value!r}")
        return opts


@dataclass
class Puzzle:
    grid: Grid
    options: SolveOptions = field(default_factory=SolveOptions)


def read_grid(text: str, size: int = GRID_SIZE) -> Grid:
    """Read ``size * size`` whitespace-separated digits in row-major order."""
    tokens = text.split()
    expected = size * size
    if len(tokens) != expected:
        raise PuzzleFormatError(f"expected {expected} values, got {len(tokens)}")

    values: List[int] = []
    for i, tok in enumerate(tokens):
        try:
            v = int(tok)
        except ValueError:
            raise PuzzleFormatError(f"value {i + 1} is not an integer: {tok!r}") from None
        if not 0 <= v <= size:
            raise PuzzleFormatError(f"value {i + 1} out of range [0, {size}]: {v}")
        values.append(v)
    return [values[r * size:(r + 1) * size] for r in range(size)]


def _row_tokens(row: Any) -> List[str]:
    if isinstance(row, list):
        return [str(v) for v in row]
    row = str(row)
    # "530070000" style rows
    return list(row) if row.isdigit() else row.split()


def _grid_from_yaml(raw: Any) -> Grid:
    if isinstance(raw, str):
        return read_grid(raw)
    if isinstance(raw, list):
        if len(raw) != GRID_SIZE:
            raise PuzzleFormatError(f"expected {GRID_SIZE} rows, got {len(raw)}")
        rows = [_row_tokens(row) for row in raw]
        for i, tokens in enumerate(rows):
            if len(tokens) != GRID_SIZE:
                raise PuzzleFormatError(f"row {i + 1} has {len(tokens)} values, expected {GRID_SIZE}")
        return read_grid(" ".join(" ".join(tokens) for tokens in rows))
    raise PuzzleFormatError("'grid' must be a list of rows or a string of digits")


def load_puzzle(path: str | Path) -> Puzzle:
    """Load a puzzle file.

    ``.yaml``/``.yml`` files hold a ``grid`` (list of rows or a string of
    digits) and an optional ``options`` mapping. Anything else is read as
    plain whitespace-separated digits. Rows written as bare digit strings
    should be quoted, otherwise YAML may read them as octal numbers.
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        try:
            text = f.read()
        except UnicodeDecodeError as exc:
            raise PuzzleFormatError(f"{path}: not UTF-8 text ({exc.reason})") from exc

    if path.suffix.lower() not in (".yaml", ".yml"):
        return Puzzle(grid=read_grid(text))

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise PuzzleFormatError(f"{path}: {exc}") from exc
    if not isinstance(data, dict) or "grid" not in data:
        raise PuzzleFormatError(f"{path}: missing 'grid'")
    return Puzzle(
        grid=_grid_from_yaml(data["grid"]),
        options=SolveOptions.from_mapping(data.get("options")),
    )
