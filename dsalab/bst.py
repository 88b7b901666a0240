"""A binary search tree of integers."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any


@dataclass
class _Node:
    data: Any
    left: _Node | None = None
    right: _Node | None = None


class BinarySearchTree:
    """Unbalanced binary search tree; equal values go to the right."""

    def __init__(self, values=()) -> None:
        self._root: _Node | None = None
        for value in values:
            self.insert(value)

    def insert(self, value) -> None:
        """Insert a value at its ordered position."""

        def put(node: _Node | None) -> _Node:
            if node is None:
                return _Node(value)
            if value < node.data:
                node.left = put(node.left)
            else:
                node.right = put(node.right)
            return node

        self._root = put(self._root)

    def longest_path(self) -> int:
        """Return the number of nodes on the longest root-to-leaf path."""

        def height(node: _Node | None) -> int:
            return 0 if node is None else 1 + max(height(node.left), height(node.right))

        return height(self._root)

    def find_min(self):
        """Return the leftmost value; raises ValueError when the tree is empty."""
        if self._root is None:
            raise ValueError("Tree is empty.")
        node = self._root
        while node.left is not None:
            node = node.left
        return node.data

    def mirror(self) -> None:
        """Swap the left and right children of every node."""

        def swap(node: _Node | None) -> None:
            if node is not None:
                node.left, node.right = node.right, node.left
                swap(node.left)
                swap(node.right)

        swap(self._root)

    def __contains__(self, key) -> bool:
        node = self._root
        while node is not None:
            if node.data == key:
                return True
            node = node.left if key < node.data else node.right
        return False

    def inorder(self) -> list:
        """Return the values in left-node-right order."""

        def walk(node: _Node | None):
            if node is not None:
                yield from walk(node.left)
                yield node.data
                yield from walk(node.right)

        return list(walk(self._root))


def _read_ints():
    for line in sys.stdin:
        for token in line.split():
            yield int(token)
    while True:
        raise EOFError("unexpected end of input")


def _line(values) -> str:
    return "".join(f"{value} " for value in values)


def main(argv: list[str] | None = None) -> int:
    """Run the interactive binary search tree session."""
    numbers = _read_ints()
    tree = BinarySearchTree()

    print("Enter the number of initial elements to insert in the BST: ", end="")
    count = next(numbers)
    print(f"Enter {count} elements:")
    for _ in range(count):
        tree.insert(next(numbers))
    print("Inorder Traversal of BST: " + _line(tree.inorder()))

    print("\nEnter a value to insert into the BST: ", end="")
    tree.insert(next(numbers))
    print("BST after insertion: " + _line(tree.inorder()))

    print(f"\nNumber of nodes in the longest path from root: {tree.longest_path()}")
    print(f"Minimum data value in the BST: {tree.find_min()}")

    tree.mirror()
    print("BST after mirroring (Inorder Traversal): " + _line(tree.inorder()))

    print("\nEnter a value to search in the BST: ", end="")
    print(f"Search result: {'Found' if next(numbers) in tree else 'Not Found'}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())