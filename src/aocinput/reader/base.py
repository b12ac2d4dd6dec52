"""Error taxonomy and record type shared by the input reader."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


class InputError(Exception):
    """Base class for every failure raised while acquiring puzzle input."""


class InputNotFoundError(InputError, FileNotFoundError):
    pass


class InputReadError(InputError, OSError):
    pass


class InputExhaustedError(InputError, EOFError):
    pass


class InputClosedError(InputError):
    pass


class RecordParseError(InputError, ValueError):
    """A line or block did not match the expected record shape."""

    def __init__(self, text: str, lineno: int | None = None, reason: str = "") -> None:
        self.text = text
        self.lineno = lineno
        self.reason = reason
        where = f" on line {lineno}" if lineno is not None else ""
        message = f"invalid record{where}: {text!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


@dataclass(slots=True)
class Record(Generic[T]):
    """One parsed line or block, holding either a value or the parse failure."""

    text: str
    lineno: int
    value: T | None = None
    error: RecordParseError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]
