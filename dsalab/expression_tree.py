"""Expression trees built from prefix expressions."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass

OPERATORS = frozenset("+-*/")
STACK_LIMIT = 100


@dataclass
class ExprNode:
    """A node of an expression tree; operators have two children."""

    data: str
    left: ExprNode | None = None
    right: ExprNode | None = None


def is_operator(ch: str) -> bool:
    """Return True for one of the four arithmetic operator characters."""
    return ch in OPERATORS


def construct_tree(prefix: str) -> ExprNode:
    """Build an expression tree from a prefix expression of single-character operands."""
    stack: list[ExprNode] = []
    for ch in reversed(prefix):
        node = ExprNode(ch)
        if is_operator(ch):
            if len(stack) < 2:
                raise ValueError(f"operator {ch!r} is missing an operand")
            node.left = stack.pop()
            node.right = stack.pop()
        if len(stack) >= STACK_LIMIT:
            raise ValueError("expression too large")
        stack.append(node)
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]


def postorder(root: ExprNode | None) -> str:
    """Return the postorder traversal of the tree, computed without recursion."""
    if root is None:
        return ""
    pending = [root]
    visited: list[ExprNode] = []
    while pending:
        node = pending.pop()
        visited.append(node)
        pending.extend(child for child in (node.left, node.right) if child)
    return "".join(node.data for node in reversed(visited))


def main(argv: list[str] | None = None) -> int:
    """Read a prefix expression and print its postorder form."""
    argparse.ArgumentParser(
        prog="dsalab-expr", description="Convert a prefix expression to postfix."
    ).parse_args(argv)
    print("Enter prefix expression (e.g., +--a*bc/def): ", end="")
    words = sys.stdin.read().split()
    if not words:
        raise EOFError("unexpected end of input")
    try:
        root = construct_tree(words[0])
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    print(f"Postorder traversal: {postorder(root)}")
    print("Tree deleted successfully.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())