"""Location of puzzle input files."""

from __future__ import annotations

import os
from pathlib import Path

INPUT_DIR_ENV = "AOC_INPUT_DIR"
INPUT_SUFFIX = ".txt"

FIRST_DAY = 1
LAST_DAY = 25


def default_input_dir() -> Path:
    override = os.environ.get(INPUT_DIR_ENV)
    if override:
        return Path(override)
    return Path.cwd() / "input"


def day_stem(day: int) -> str:
    if not FIRST_DAY <= day <= LAST_DAY:
        raise ValueError(f"Day must be between {FIRST_DAY} and {LAST_DAY}, got {day}")
    return f"day{day:02d}"


def input_stem(identifier: int | str) -> str:
    # bool is an int subclass; True is not day 1.
    if isinstance(identifier, bool):
        raise TypeError(f"Unsupported input identifier: {identifier!r}")
    if isinstance(identifier, int):
        return day_stem(identifier)
    if isinstance(identifier, str) and identifier:
        return identifier
    raise TypeError(f"Unsupported input identifier: {identifier!r}")


def input_path(identifier: int | str, input_dir: Path | None = None) -> Path:
    """Resolve ``identifier`` to ``<input_dir>/<stem>.txt``."""
    base = Path(input_dir) if input_dir is not None else default_input_dir()
    return base / f"{input_stem(identifier)}{INPUT_SUFFIX}"
