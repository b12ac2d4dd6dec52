"""Load and run a day's solution module."""

from __future__ import annotations

import importlib.util
import logging
import sys
from pathlib import Path
from types import ModuleType

from aocinput.config import day_stem

logger = logging.getLogger(__name__)


class SolutionNotFound(LookupError):
    pass


def solution_path(day: int, solutions_dir: Path) -> Path:
    return Path(solutions_dir) / f"{day_stem(day)}.py"


def load_solution(day: int, solutions_dir: Path) -> ModuleType:
    """Import ``<solutions_dir>/dayNN.py`` by path."""
    path = solution_path(day, solutions_dir)
    if not path.is_file():
        raise SolutionNotFound(f"No solution for day {day}: {path} does not exist")

    spec = importlib.util.spec_from_file_location(f"aocinput_solutions.{path.stem}", path)
    if spec is None or spec.loader is None:
        raise SolutionNotFound(f"Cannot load solution module {path}")
    module = importlib.util.module_from_spec(spec)
    # Dataclasses and pickling look the defining module up in sys.modules.
    sys.modules[spec.name] = module
    try:
        spec.loader.exec_module(module)
    except BaseException:
        sys.modules.pop(spec.name, None)
        raise
    logger.debug("loaded %s", path)
    return module


def run_day(day: int, solutions_dir: Path) -> None:
    """Run ``main()`` of the day's solution; input errors propagate to the caller."""
    module = load_solution(day, solutions_dir)
    main = getattr(module, "main", None)
    if not callable(main):
        raise SolutionNotFound(f"{solution_path(day, solutions_dir)} does not define main()")
    main()
