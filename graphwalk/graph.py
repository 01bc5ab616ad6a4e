"""Undirected graphs with breadth-first levels and depth-first entry/exit times."""

from __future__ import annotations

import sys
from collections import defaultdict, deque
from collections.abc import Iterable, Iterator
from itertools import count


class Graph:
    """Undirected multigraph kept as adjacency lists in insertion order."""

    def __init__(self, edges: Iterable[tuple[int, int]] = ()) -> None:
        self._adjacency: defaultdict[int, list[int]] = defaultdict(list)
        for a, b in edges:
            self.add_edge(a, b)

    def add_edge(self, a: int, b: int) -> None:
        """Connect ``a`` and ``b`` in both directions."""
        self._adjacency[a].append(b)
        self._adjacency[b].append(a)

    def neighbours(self, node: int) -> list[int]:
        """Return the nodes adjacent to ``node`` in the order the edges were added."""
        return list(self._adjacency.get(node, ()))

    def describe(self, nodes: int) -> list[str]:
        """Return one adjacency line for each node from 1 to ``nodes``."""
        return [
            f"Nodes Connected With {node} Are : " + "".join(f"{n} " for n in self.neighbours(node))
            for node in range(1, nodes + 1)
        ]


def _read_tokens(argv: list[str] | None) -> Iterator[str]:
    """Return the words of the file named first in ``argv``, or of standard input."""
    if argv and argv[0] != "-":
        with open(argv[0], encoding="utf-8") as handle:
            return iter(handle.read().split())
    return iter(sys.stdin.read().split())


def _take(tokens: Iterator, what: str) -> int:
    try:
        return int(next(tokens))
    except StopIteration:
        raise ValueError(f"input ended before the {what}") from None


def read_graph(tokens: Iterable[int], edge_count: int) -> Graph:
    """Build a graph from ``edge_count`` pairs of node numbers taken from ``tokens``."""
    it = iter(tokens)
    graph = Graph()
    for _ in range(edge_count):
        graph.add_edge(_take(it, "edge list was complete"), _take(it, "edge list was complete"))
    return graph


def bfs_levels(graph: Graph, root: int) -> dict[int, int]:
    """Return the breadth-first level of every node reachable from ``root``."""
    levels = {root: 0}
    queue = deque([root])
    while queue:
        current = queue.popleft()
        for neighbour in graph.neighbours(current):
            if neighbour not in levels:
                levels[neighbour] = levels[current] + 1
                queue.append(neighbour)
    return levels


def dfs_times(graph: Graph, root: int) -> dict[int, tuple[int, int]]:
    """Return ``(in, out)`` depth-first timestamps of every node reachable from ``root``."""
    clock = count(1)
    entered = {root: next(clock)}
    times: dict[int, tuple[int, int]] = {}
    stack = [(root, iter(graph.neighbours(root)))]
    while stack:
        node, pending = stack[-1]
        child = next((c for c in pending if c not in entered), None)
        if child is None:
            stack.pop()
            times[node] = (entered[node], next(clock))
        else:
            entered[child] = next(clock)
            stack.append((child, iter(graph.neighbours(child))))
    return times


def _problem(argv: list[str] | None) -> tuple[int, Graph, int] | None:
    tokens = _read_tokens(argv)
    try:
        nodes = _take(tokens, "node count")
        graph = read_graph(tokens, _take(tokens, "edge count"))
        root = _take(tokens, "root")
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return None
    print("\n".join(graph.describe(nodes)))
    return nodes, graph, root


def levels_main(argv: list[str] | None = None) -> int:
    """Print the adjacency lists and the breadth-first level of each node."""
    problem = _problem(argv)
    if problem is None:
        return 1
    nodes, graph, root = problem
    print(f"\nThe Level Of Each Node (Root as {root}) is : \n")
    levels = bfs_levels(graph, root)
    for node in range(1, nodes + 1):
        print(f"{node} : {levels.get(node, 0)}")
    return 0


def times_main(argv: list[str] | None = None) -> int:
    """Print the adjacency lists and the depth-first in and out times of each node."""
    problem = _problem(argv)
    if problem is None:
        return 1
    nodes, graph, root = problem
    times = dfs_times(graph, root)
    print("\nNode : { In Time, Out Time }.\n")
    for node in range(1, nodes + 1):
        entry, leave = times.get(node, (0, 0))
        print(f"  {node} :  {{ {entry}, {leave} }}.\n")
    return 0