"""Blank-line segmentation of a line stream into blocks."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


def is_blank(line: str) -> bool:
    return not line.strip()


def iter_blocks(lines: Iterable[tuple[int, str]]) -> Iterator[tuple[int, list[str]]]:
    """Group numbered lines into blocks of consecutive non-blank lines.

    Yields ``(start_lineno, block_lines)`` in file order. Runs of blank lines
    are separators only, so a stream with no non-blank line yields nothing.
    The input is consumed once and never read past the blank line that ends
    the current block. Errors raised by ``lines`` propagate unchanged.
    """
    block: list[str] = []
    start = 0
    for lineno, line in lines:
        if is_blank(line):
            if block:
                yield start, block
                block = []
            continue
        if not block:
            start = lineno
        block.append(line)
    if block:
        yield start, block


def join_block(block: list[str]) -> str:
    return "\n".join(block)
