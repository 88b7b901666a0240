"""A book as a tree of chapters, sections and subsections."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TextIO

MAX_CHILDREN = 10


@dataclass(frozen=True)
class Book:
    """A book; ``chapters[c][s]`` is the number of subsections of section s of chapter c."""

    chapters: tuple[tuple[int, ...], ...]

    def __post_init__(self) -> None:
        if len(self.chapters) > MAX_CHILDREN:
            raise ValueError(f"a book holds at most {MAX_CHILDREN} chapters")
        for sections in self.chapters:
            if len(sections) > MAX_CHILDREN:
                raise ValueError(f"a chapter holds at most {MAX_CHILDREN} sections")
            for count in sections:
                if not 0 <= count <= MAX_CHILDREN:
                    raise ValueError(
                        f"a section holds between 0 and {MAX_CHILDREN} subsections"
                    )

    def index_lines(self) -> list[str]:
        """Return the lines of the book's index, nested by indentation."""
        lines: list[str] = []
        for c, sections in enumerate(self.chapters, 1):
            lines.append(f"Chapter {c}")
            for s, subsections in enumerate(sections, 1):
                lines.append(f"  Section {c}.{s}")
                lines.extend(
                    f"    Subsection {c}.{s}.{p}" for p in range(1, subsections + 1)
                )
        return lines


def build_book(structure: Iterable[Iterable[int]]) -> Book:
    """Build a book from per-chapter lists of subsection counts.

    Negative counts mean no subsections.
    """
    return Book(
        tuple(tuple(max(0, int(count)) for count in sections) for sections in structure)
    )


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_count(tokens: Iterator[str], prompt: str) -> int:
    print(prompt, end="")
    try:
        value = int(next(tokens))
    except StopIteration:
        raise EOFError("unexpected end of input") from None
    if value > MAX_CHILDREN:
        raise ValueError(f"at most {MAX_CHILDREN} entries are allowed")
    return max(0, value)


def main(argv: list[str] | None = None) -> int:
    """Ask for the shape of a book and print its index."""
    argparse.ArgumentParser(
        prog="dsalab-book", description="Build and print a book index."
    ).parse_args(argv)
    tokens = _tokens(sys.stdin)
    chapters = []
    chapter_count = _read_count(tokens, "\nEnter number of chapters in the book: ")
    for c in range(1, chapter_count + 1):
        section_count = _read_count(
            tokens, f"\nEnter number of sections in chapter {c}: "
        )
        chapters.append(
            [
                _read_count(tokens, f"\nEnter number of subsections in section {s}: ")
                for s in range(1, section_count + 1)
            ]
        )
    book = build_book(chapters)
    print("\nBook Index:")
    for line in book.index_lines():
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())