"""Arrange student marks into a max heap."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from typing import Any, TextIO

MAX_STUDENTS = 29


def _sift_down(heap: list[Any], m: int, n: int) -> None:
    """Sift the item at 1-based position ``m`` down within ``heap[1..n]``."""
    item = heap[m]
    j = 2 * m
    while j <= n:
        if j < n and heap[j + 1] > heap[j]:
            j += 1
        if item > heap[j]:
            break
        heap[j // 2] = heap[j]
        j *= 2
    heap[j // 2] = item


def build_max_heap(values: Iterable[Any]) -> list[Any]:
    """Return the values rearranged into max-heap order (parent >= children)."""
    heap: list[Any] = [None, *values]
    n = len(heap) - 1
    for k in range(n // 2, 0, -1):
        _sift_down(heap, k, n)
    return heap[1:]


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_int(tokens: Iterator[str], prompt: str) -> int:
    print(prompt, end="")
    try:
        return int(next(tokens))
    except StopIteration:
        raise EOFError("unexpected end of input") from None


def main(argv: list[str] | None = None) -> int:
    """Read marks from standard input and print them as a max heap."""
    argparse.ArgumentParser(
        prog="dsalab-heap", description="Build a max heap of student marks."
    ).parse_args(argv)
    tokens = _tokens(sys.stdin)
    count = _read_int(tokens, "\nEnter no. of students: ")
    if count > MAX_STUDENTS:
        print(f"\nAt most {MAX_STUDENTS} students are supported.", file=sys.stderr)
        return 1
    marks = [
        _read_int(tokens, f"\nEnter marks of student {i} : ")
        for i in range(1, count + 1)
    ]
    print("\nMarks of students: " + "".join(f"{mark} " for mark in marks), end="")
    heap = build_max_heap(marks)
    print("\nMax heap: " + "".join(f"{mark} " for mark in heap))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())