from __future__ import annotations

import pytest

from aocinput.reader import InputReadError, iter_blocks
from aocinput.reader.blocks import is_blank, join_block


def _numbered(*lines: str) -> list[tuple[int, str]]:
    return list(enumerate(lines, start=1))


def test_iter_blocks_reports_start_lines() -> None:
    blocks = list(iter_blocks(_numbered("a", "", "b", "c", "", "d", "e", "", "f")))

    assert blocks == [(1, ["a"]), (3, ["b", "c"]), (6, ["d", "e"]), (9, ["f"])]


def test_leading_and_trailing_blank_runs_yield_no_empty_block() -> None:
    blocks = list(iter_blocks(_numbered("", " ", "x", "", "", "\t", "")))

    assert blocks == [(3, ["x"])]


def test_empty_stream_has_no_blocks() -> None:
    assert list(iter_blocks([])) == []


def test_segmentation_does_not_read_past_current_block() -> None:
    consumed: list[int] = []

    def lines():
        for item in _numbered("a", "b", "", "c", "", "d"):
            consumed.append(item[0])
            yield item

    blocks = iter_blocks(lines())
    assert next(blocks) == (1, ["a", "b"])
    assert consumed == [1, 2, 3]


def test_read_error_mid_block_propagates() -> None:
    def lines():
        yield 1, "a"
        yield 2, "b"
        raise InputReadError("disk gone")

    blocks = iter_blocks(lines())
    with pytest.raises(InputReadError, match="disk gone"):
        next(blocks)


def test_is_blank() -> None:
    assert is_blank("")
    assert is_blank(" \t ")
    assert not is_blank(" . ")


def test_join_block() -> None:
    assert join_block(["ab", "cd"]) == "ab\ncd"
    assert join_block(["ab"]) == "ab"
