"""Connecting offices at minimum cost with Prim's algorithm."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TextIO

MAX_OFFICES = 50
MAX_NAME_LENGTH = 19
NO_EDGE = 100000


@dataclass(frozen=True)
class Connection:
    """A link chosen for the spanning tree."""

    source: str
    target: str
    weight: int


class OfficeNetwork:
    """Undirected weighted graph of offices."""

    def __init__(self) -> None:
        self._names: list[str] = []
        self._adjacency: list[list[tuple[int, int]]] = []

    @property
    def offices(self) -> tuple[str, ...]:
        return tuple(self._names)

    def add_office(self, name: str) -> None:
        """Register an office; at most 50 offices, names up to 19 characters."""
        if len(self._names) >= MAX_OFFICES:
            raise ValueError(f"at most {MAX_OFFICES} offices are supported")
        if len(name) > MAX_NAME_LENGTH:
            raise ValueError(f"office names are at most {MAX_NAME_LENGTH} characters")
        self._names.append(name)
        self._adjacency.append([])

    def index_of(self, name: str) -> int:
        """Return the position of the first office with this name."""
        try:
            return self._names.index(name)
        except ValueError:
            raise KeyError(name) from None

    def add_connection(self, name1: str, name2: str, weight: int) -> None:
        """Link two offices in both directions."""
        v1 = self.index_of(name1)
        v2 = self.index_of(name2)
        self._adjacency[v1].append((v2, weight))
        self._adjacency[v2].append((v1, weight))

    def minimum_spanning_tree(self, start: str) -> list[Connection]:
        """Grow a spanning tree from ``start``, cheapest reachable link first.

        Links are examined newest first, and links costing ``NO_EDGE`` or more are
        never chosen.
        """
        origin = self.index_of(start)
        visited = {origin}
        spanned = [origin]
        tree: list[Connection] = []
        for _ in range(len(self._names) - 1):
            best: tuple[int, int, int] | None = None
            limit = NO_EDGE
            for u in spanned:
                for to, weight in reversed(self._adjacency[u]):
                    if to not in visited and weight < limit:
                        best, limit = (u, to, weight), weight
            if best is None:
                break
            u, to, weight = best
            visited.add(to)
            spanned.append(to)
            tree.append(Connection(self._names[u], self._names[to], weight))
        return tree


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _next(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise EOFError("unexpected end of input") from None


def main(argv: list[str] | None = None) -> int:
    """Read offices and links, then print the cheapest way to connect them."""
    argparse.ArgumentParser(
        prog="dsalab-offices", description="Minimum cost office network."
    ).parse_args(argv)
    tokens = _tokens(sys.stdin)
    network = OfficeNetwork()
    try:
        print("Enter number of offices: ", end="")
        count = int(_next(tokens))
        print("Enter names of the offices:")
        for _ in range(count):
            network.add_office(_next(tokens))
        while True:
            print("\nEnter connection (Office1 Office2 Cost): ", end="")
            name1, name2 = _next(tokens), _next(tokens)
            weight = int(_next(tokens))
            try:
                network.add_connection(name1, name2, weight)
            except KeyError as error:
                print(f"\nUnknown office {error}", file=sys.stderr)
            print("Do you want to enter more connections? (y/n): ", end="")
            if not _next(tokens).startswith("y"):
                break
        print("\nEnter starting office: ", end="")
        tree = network.minimum_spanning_tree(_next(tokens))
    except (ValueError, KeyError) as error:
        print(error, file=sys.stderr)
        return 1
    print("\nMinimum Spanning Tree:")
    for link in tree:
        print(f"{link.source} -> {link.target} [Cost: {link.weight}]")
    total = sum(link.weight for link in tree)
    print(f"\nTotal Minimum Cost to Connect All Offices: {total}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())