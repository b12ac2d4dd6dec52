"""Forward-only reader over one puzzle input file."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import TextIO, TypeVar

from aocinput.config import input_path

from .base import InputClosedError, InputExhaustedError, InputNotFoundError, InputReadError, Record
from .blocks import iter_blocks, join_block
from .records import ParseFn, iter_records, iter_values, parse_strict

logger = logging.getLogger(__name__)

T = TypeVar("T")


class InputSource:
    """Puzzle input exposed as lines, blocks and typed records.

    Every read moves a single forward-only cursor. The whole-stream methods
    (``lines``, ``blocks`` and their typed variants) return lazy, single-pass
    iterators that close the file once they finish; reading the same input
    again needs a fresh ``InputSource``. ``line`` and ``parse_line`` consume
    exactly one line and leave the rest of the stream for later reads.
    """

    def __init__(self, stream: TextIO, name: str = "<stream>") -> None:
        self._stream: TextIO | None = stream
        self.name = name
        self.lineno = 0

    @classmethod
    def open(cls, identifier: int | str, input_dir: Path | None = None) -> InputSource:
        """Open ``dayNN.txt`` for an int identifier, ``<identifier>.txt`` for a str."""
        path = input_path(identifier, input_dir)
        try:
            stream = path.open("r", encoding="utf-8")
        except FileNotFoundError as exc:
            raise InputNotFoundError(f"Puzzle input not found: {path}") from exc
        except OSError as exc:
            raise InputReadError(f"Cannot open puzzle input {path}: {exc}") from exc
        logger.debug("opened %s", path)
        return cls(stream, name=path.stem)

    @classmethod
    def day(cls, day: int, input_dir: Path | None = None) -> InputSource:
        return cls.open(day, input_dir)

    @property
    def closed(self) -> bool:
        return self._stream is None

    def close(self) -> None:
        if self._stream is not None:
            self._stream.close()
            self._stream = None
            logger.debug("closed %s after %d lines", self.name, self.lineno)

    def __enter__(self) -> InputSource:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self.closed else f"line {self.lineno}"
        return f"<InputSource {self.name!r} {state}>"

    # -- partial reads -------------------------------------------------

    def line(self) -> str:
        """Read one line, raising ``InputExhaustedError`` at end of input."""
        self._require_open()
        text = self._readline()
        if text is None:
            raise InputExhaustedError(f"Input exhausted: {self.name} has {self.lineno} lines")
        return text

    def parse_line(self, parse: ParseFn[T]) -> T:
        text = self.line()
        return parse_strict(parse, text, self.lineno)

    # -- whole-stream reads ----------------------------------------------

    def lines(self) -> Iterator[str]:
        self._require_open()
        return self._consume(text for _, text in self._numbered())

    def read_lines(self) -> list[str]:
        return list(self.lines())

    def blocks(self) -> Iterator[list[str]]:
        """Blocks of consecutive non-blank lines, each as a list of lines."""
        self._require_open()
        return self._consume(block for _, block in iter_blocks(self._numbered()))

    def text_blocks(self) -> Iterator[str]:
        """Blocks of consecutive non-blank lines, each joined with newlines."""
        self._require_open()
        return self._consume(join_block(block) for _, block in iter_blocks(self._numbered()))

    def records(self, parse: ParseFn[T]) -> Iterator[Record[T]]:
        """Parse each line; failures are kept in the record and iteration goes on."""
        self._require_open()
        return self._consume(iter_records(parse, self._numbered()))

    def parsed_lines(self, parse: ParseFn[T]) -> Iterator[T]:
        """Parse each line, raising ``RecordParseError`` at the first bad one."""
        return iter_values(self.records(parse))

    def block_records(self, parse: ParseFn[T]) -> Iterator[Record[T]]:
        """Parse each block's newline-joined text; ``lineno`` is the block's first line."""
        self._require_open()
        blocks = ((start, join_block(block)) for start, block in iter_blocks(self._numbered()))
        return self._consume(iter_records(parse, blocks))

    def parsed_blocks(self, parse: ParseFn[T]) -> Iterator[T]:
        return iter_values(self.block_records(parse))

    # -- internals ---------------------------------------------------------

    def _require_open(self) -> TextIO:
        if self._stream is None:
            raise InputClosedError(f"Input {self.name} is closed")
        return self._stream

    def _readline(self) -> str | None:
        stream = self._require_open()
        try:
            raw = stream.readline()
        except (OSError, UnicodeDecodeError) as exc:
            raise InputReadError(f"Cannot read {self.name} after line {self.lineno}: {exc}") from exc
        if not raw:
            return None
        self.lineno += 1
        if raw.endswith("\n"):
            raw = raw[:-1]
        if raw.endswith("\r"):
            raw = raw[:-1]
        return raw

    def _numbered(self) -> Iterator[tuple[int, str]]:
        while True:
            text = self._readline()
            if text is None:
                return
            yield self.lineno, text

    def _consume(self, items: Iterator[T]) -> Iterator[T]:
        try:
            yield from items
        finally:
            self.close()
