"""Campus landmarks graph with depth-first and breadth-first traversals."""

from __future__ import annotations

from collections import deque

LANDMARKS = (
    "College Main Gate",
    "Library",
    "Cafeteria",
    "Auditorium",
    "Hostel",
    "Sports Complex",
)

EDGES = ((0, 1), (0, 2), (1, 3), (2, 4), (4, 5), (3, 5))


class CampusGraph:
    """Undirected graph kept both as an adjacency matrix and adjacency lists."""

    def __init__(self, landmarks, edges=()) -> None:
        self.landmarks = tuple(landmarks)
        size = len(self.landmarks)
        self.matrix = [[0] * size for _ in range(size)]
        self.adjacency: list[list[int]] = [[] for _ in range(size)]
        for u, v in edges:
            self.matrix[u][v] = self.matrix[v][u] = 1
            self.adjacency[u].append(v)
            self.adjacency[v].append(u)

    def _check(self, node: int) -> None:
        if not 0 <= node < len(self.landmarks):
            raise ValueError(f"no landmark with index {node}")

    def dfs(self, start: int) -> list[str]:
        """Depth-first order using the adjacency matrix, lowest index first."""
        self._check(start)
        visited: list[int] = []

        def visit(node: int) -> None:
            visited.append(node)
            for neighbour, linked in enumerate(self.matrix[node]):
                if linked and neighbour not in visited:
                    visit(neighbour)

        visit(start)
        return [self.landmarks[node] for node in visited]

    def bfs(self, start: int) -> list[str]:
        """Breadth-first order using the adjacency lists in insertion order."""
        self._check(start)
        seen = [start]
        queue = deque(seen)
        while queue:
            for neighbour in self.adjacency[queue.popleft()]:
                if neighbour not in seen:
                    seen.append(neighbour)
                    queue.append(neighbour)
        return [self.landmarks[node] for node in seen]


def create_graph() -> CampusGraph:
    """Return the campus graph with its fixed landmarks and paths."""
    return CampusGraph(LANDMARKS, EDGES)


def main(argv: list[str] | None = None) -> int:
    """Print both traversals from the main gate."""
    graph = create_graph()
    print("DFS Traversal (using Adjacency Matrix) starting from College Main Gate:")
    print("".join(f"{name} -> " for name in graph.dfs(0)) + "END\n")
    print("BFS Traversal (using Adjacency List) starting from College Main Gate:")
    print("".join(f"{name} -> " for name in graph.bfs(0)) + "END")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())