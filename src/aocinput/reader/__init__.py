"""Reader package."""

from .base import (
    InputClosedError,
    InputError,
    InputExhaustedError,
    InputNotFoundError,
    InputReadError,
    Record,
    RecordParseError,
)
from .blocks import iter_blocks
from .records import collect
from .source import InputSource

__all__ = [
    "InputSource",
    "InputError",
    "InputNotFoundError",
    "InputReadError",
    "InputExhaustedError",
    "InputClosedError",
    "RecordParseError",
    "Record",
    "iter_blocks",
    "collect",
]
