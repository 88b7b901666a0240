"""A dictionary of keywords and meanings kept in an AVL tree."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TextIO


@dataclass
class _Node:
    keyword: str
    meaning: str
    left: _Node | None = None
    right: _Node | None = None
    height: int = 1


def _height(node: _Node | None) -> int:
    return node.height if node else 0


def _balance(node: _Node | None) -> int:
    return _height(node.left) - _height(node.right) if node else 0


def _refresh(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _rotate_right(y: _Node) -> _Node:
    x = y.left
    assert x is not None
    y.left, x.right = x.right, y
    _refresh(y)
    _refresh(x)
    return x


def _rotate_left(x: _Node) -> _Node:
    y = x.right
    assert y is not None
    x.right, y.left = y.left, x
    _refresh(x)
    _refresh(y)
    return y


def _insert(node: _Node | None, keyword: str, meaning: str) -> _Node:
    if node is None:
        return _Node(keyword, meaning)
    if keyword < node.keyword:
        node.left = _insert(node.left, keyword, meaning)
    else:
        node.right = _insert(node.right, keyword, meaning)

    _refresh(node)
    balance = _balance(node)
    if balance > 1 and node.left is not None:
        if keyword > node.left.keyword:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1 and node.right is not None:
        if keyword < node.right.keyword:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _delete(node: _Node | None, keyword: str) -> _Node | None:
    if node is None:
        return None
    if keyword < node.keyword:
        node.left = _delete(node.left, keyword)
    elif keyword > node.keyword:
        node.right = _delete(node.right, keyword)
    elif node.left is None or node.right is None:
        child = node.left or node.right
        if child is None:
            return None
        node = child
    else:
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.keyword, node.meaning = successor.keyword, successor.meaning
        node.right = _delete(node.right, successor.keyword)

    _refresh(node)
    balance = _balance(node)
    if balance > 1:
        if _balance(node.left) < 0:
            node.left = _rotate_left(node.left)  # type: ignore[arg-type]
        return _rotate_right(node)
    if balance < -1:
        if _balance(node.right) > 0:
            node.right = _rotate_right(node.right)  # type: ignore[arg-type]
        return _rotate_left(node)
    return node


def _inorder(node: _Node | None, reverse: bool) -> Iterator[tuple[str, str]]:
    if node is None:
        return
    first, second = (node.right, node.left) if reverse else (node.left, node.right)
    yield from _inorder(first, reverse)
    yield node.keyword, node.meaning
    yield from _inorder(second, reverse)


class AVLDictionary:
    """Keyword-to-meaning dictionary kept height balanced."""

    def __init__(self) -> None:
        self._root: _Node | None = None

    def _lookup(self, keyword: str) -> tuple[_Node | None, int]:
        node, comparisons = self._root, 0
        while node is not None:
            comparisons += 1
            if keyword == node.keyword:
                return node, comparisons
            node = node.left if keyword < node.keyword else node.right
        return None, comparisons

    def insert(self, keyword: str, meaning: str) -> None:
        """Add a new keyword; raises ValueError if it is already present."""
        if self._lookup(keyword)[0] is not None:
            raise ValueError("Keyword already exists. Use update instead.")
        self._root = _insert(self._root, keyword, meaning)

    def remove(self, keyword: str) -> bool:
        """Delete a keyword; returns False when it was not present."""
        if self._lookup(keyword)[0] is None:
            return False
        self._root = _delete(self._root, keyword)
        return True

    def update(self, keyword: str, meaning: str) -> bool:
        """Replace a keyword's meaning; returns False when it is not present."""
        node = self._lookup(keyword)[0]
        if node is None:
            return False
        node.meaning = meaning
        return True

    def ascending(self) -> list[tuple[str, str]]:
        """Return (keyword, meaning) pairs in ascending keyword order."""
        return list(_inorder(self._root, reverse=False))

    def descending(self) -> list[tuple[str, str]]:
        """Return (keyword, meaning) pairs in descending keyword order."""
        return list(_inorder(self._root, reverse=True))

    def find(self, keyword: str) -> tuple[str | None, int]:
        """Return the meaning (or None) and the number of nodes compared."""
        node, comparisons = self._lookup(keyword)
        return (node.meaning if node else None), comparisons

    def max_comparisons(self) -> int:
        """Return the most comparisons any search can take: the tree height."""
        return _height(self._root)

    def __len__(self) -> int:
        return sum(1 for _ in _inorder(self._root, reverse=False))

    def __contains__(self, keyword: object) -> bool:
        return isinstance(keyword, str) and self._lookup(keyword)[0] is not None


MENU = (
    "\n----- Dictionary Menu -----\n"
    "1. Insert\n2. Delete\n3. Update\n4. Display Ascending\n5. Display Descending\n"
    "6. Search\n7. Max Comparisons\n8. Exit\n"
    "Enter choice: "
)


def _read_line(lines: Iterator[str], prompt: str = "") -> str:
    print(prompt, end="")
    try:
        return next(lines).rstrip("\r\n")
    except StopIteration:
        raise EOFError("unexpected end of input") from None


def _show(pairs: list[tuple[str, str]]) -> None:
    for keyword, meaning in pairs:
        print(f"{keyword} : {meaning}")


def _session(lines: Iterator[str], book: AVLDictionary) -> None:
    while True:
        try:
            choice = int(_read_line(lines, MENU).strip())
        except ValueError:
            choice = 0
        if choice == 1:
            keyword = _read_line(lines, "Enter keyword: ")
            meaning = _read_line(lines, "Enter meaning: ")
            try:
                book.insert(keyword, meaning)
            except ValueError as error:
                print(error)
        elif choice == 2:
            book.remove(_read_line(lines, "Enter keyword to delete: "))
        elif choice == 3:
            keyword = _read_line(lines, "Enter keyword to update: ")
            meaning = _read_line(lines, "Enter new meaning: ")
            if book.update(keyword, meaning):
                print("Meaning updated.")
        elif choice == 4:
            print("\nDictionary in Ascending Order:")
            _show(book.ascending())
        elif choice == 5:
            print("\nDictionary in Descending Order:")
            _show(book.descending())
        elif choice == 6:
            keyword = _read_line(lines, "Enter keyword to search: ")
            meaning, comparisons = book.find(keyword)
            if meaning is None:
                print("Keyword not found.")
            else:
                print(f"Found: {keyword} = {meaning}")
            print(f"Comparisons made: {comparisons}")
        elif choice == 7:
            print(f"Maximum comparisons (height): {book.max_comparisons()}")
        elif choice == 8:
            print("Exiting.")
            return
        else:
            print("Invalid choice.")


def main(argv: list[str] | None = None) -> int:
    """Run the menu-driven dictionary session."""
    argparse.ArgumentParser(
        prog="dsalab-dictionary", description="AVL tree dictionary."
    ).parse_args(argv)
    stream: TextIO = sys.stdin
    try:
        _session(iter(stream), AVLDictionary())
    except EOFError:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())