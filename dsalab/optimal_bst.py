"""Optimal binary search tree from key access probabilities."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass

MAX_KEYS = 98


@dataclass(frozen=True)
class OptimalBST:
    """Minimum cost and ``roots[i, j]``, the root chosen for keys i..j."""

    cost: float
    size: int
    roots: dict

    def structure(self) -> list[str]:
        """Describe the tree in preorder, one line per key."""

        def describe(i, j, parent, relation):
            if i > j:
                return
            r = self.roots[i, j]
            yield f"Root: k{r}" if parent is None else f"k{r} is {relation} child of k{parent}"
            yield from describe(i, r - 1, r, "left")
            yield from describe(r + 1, j, r, "right")

        return list(describe(1, self.size, None, ""))


def optimal_bst(probabilities) -> OptimalBST:
    """Compute the minimum expected search cost tree for keys k1..kn."""
    p = [0.0, *map(float, probabilities)]
    n = len(p) - 1
    if n > MAX_KEYS:
        raise ValueError(f"at most {MAX_KEYS} keys are supported")

    cost = {(i, i - 1): 0.0 for i in range(1, n + 2)}
    weight = dict(cost)
    roots = {}
    for length in range(1, n + 1):
        for i in range(1, n - length + 2):
            j = i + length - 1
            weight[i, j] = weight[i, j - 1] + p[j]
            cost[i, j] = math.inf
            for r in range(i, j + 1):
                candidate = cost[i, r - 1] + cost[r + 1, j] + weight[i, j]
                if candidate < cost[i, j]:
                    cost[i, j] = candidate
                    roots[i, j] = r
    return OptimalBST(cost=cost[1, n], size=n, roots=roots)


def _read_tokens():
    for line in sys.stdin:
        yield from line.split()
    raise EOFError("unexpected end of input")


def main(argv: list[str] | None = None) -> int:
    """Read key probabilities and print the optimal tree."""
    tokens = _read_tokens()
    print("Enter number of keys: ", end="")
    count = int(next(tokens))
    print("Enter access probabilities for keys (p1 to pn):")
    probabilities = []
    for i in range(1, count + 1):
        print(f"p[{i}] = ", end="")
        probabilities.append(float(next(tokens)))
    try:
        tree = optimal_bst(probabilities)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    print(f"\nMinimum cost of Optimal BST: {tree.cost:.3f}")
    print("\nStructure of Optimal BST:")
    print(*tree.structure(), sep="\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())