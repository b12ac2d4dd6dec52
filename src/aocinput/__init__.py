"""Puzzle input reading for Advent of Code solutions."""

from aocinput.reader import InputSource, collect

__version__ = "0.1.0"

__all__ = ["InputSource", "collect", "__version__"]
