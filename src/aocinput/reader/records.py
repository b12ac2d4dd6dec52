"""Typed parsing of lines and blocks into records."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import TypeVar

from .base import Record, RecordParseError

T = TypeVar("T")

ParseFn = Callable[[str], T]


def parse_record(parse: ParseFn[T], text: str, lineno: int) -> Record[T]:
    """Apply ``parse`` to ``text`` and capture a ``ValueError`` as a record error."""
    try:
        value = parse(text)
    except ValueError as exc:
        error = RecordParseError(text, lineno, str(exc))
        error.__cause__ = exc
        return Record(text=text, lineno=lineno, error=error)
    return Record(text=text, lineno=lineno, value=value)


def parse_strict(parse: ParseFn[T], text: str, lineno: int | None = None) -> T:
    try:
        return parse(text)
    except ValueError as exc:
        raise RecordParseError(text, lineno, str(exc)) from exc


def iter_records(parse: ParseFn[T], items: Iterable[tuple[int, str]]) -> Iterator[Record[T]]:
    # A failed record does not stop the iteration.
    for lineno, text in items:
        yield parse_record(parse, text, lineno)


def iter_values(records: Iterable[Record[T]]) -> Iterator[T]:
    for record in records:
        yield record.unwrap()


def collect(records: Iterable[Record[T]]) -> list[T]:
    """Materialize records into a list of values, raising the first parse failure."""
    return list(iter_values(records))
