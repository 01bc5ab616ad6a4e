"""Tree queries: ancestry by Euler times, diameter and leaf counts."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from itertools import count

from graphwalk.graph import Graph, _read_tokens, _take, read_graph


def _walk(tree: Graph, root: int) -> Iterator[tuple[bool, int, int]]:
    """Yield ``(entering, node, parent)`` events of a depth-first walk that never steps back to the parent."""
    seen = {root}
    yield True, root, 0
    stack = [(root, 0, iter(tree.neighbours(root)))]
    while stack:
        node, up, pending = stack[-1]
        child = next((c for c in pending if c != up), None)
        if child is None:
            stack.pop()
            yield False, node, up
            continue
        if child in seen:
            raise ValueError("the edges do not form a tree")
        seen.add(child)
        yield True, child, node
        stack.append((child, node, iter(tree.neighbours(child))))


def euler_times(tree: Graph, root: int) -> dict[int, tuple[int, int]]:
    """Return ``(in, out)`` timestamps of every node of the tree rooted at ``root``."""
    clock = count(1)
    entered: dict[int, int] = {}
    times: dict[int, tuple[int, int]] = {}
    for entering, node, _ in _walk(tree, root):
        if entering:
            entered[node] = next(clock)
        else:
            times[node] = (entered[node], next(clock))
    return times


def is_ancestor(times: dict[int, tuple[int, int]], descendant: int, ancestor: int) -> bool:
    """Tell whether ``ancestor`` is a proper ancestor of ``descendant``."""
    if descendant not in times or ancestor not in times:
        return False
    (d_in, d_out), (a_in, a_out) = times[descendant], times[ancestor]
    return d_in > a_in and d_out < a_out


def _depths(tree: Graph, root: int) -> dict[int, int]:
    depth = {root: 0}
    for entering, node, parent in _walk(tree, root):
        if entering and node != root:
            depth[node] = depth[parent] + 1
    return depth


def tree_diameter(tree: Graph, nodes: int) -> int:
    """Two-sweep longest path over nodes 1..``nodes``; the first sweep starts at node 0."""
    first = _depths(tree, 0)
    start = max(range(1, nodes + 1), key=lambda n: first.get(n, 0), default=0)
    second = _depths(tree, start)
    return max((second.get(n, 0) for n in range(1, nodes + 1)), default=0)


def count_leaves(tree: Graph, root: int) -> int:
    """Count the nodes of degree one in the tree rooted at ``root``."""
    return sum(
        1 for entering, node, _ in _walk(tree, root) if entering and len(tree.neighbours(node)) == 1
    )


def _run(argv: list[str] | None, extra: int, query) -> int:
    """Read a tree and ``extra`` trailing numbers, print its adjacency, then the query's line."""
    tokens = _read_tokens(argv)
    try:
        nodes = _take(tokens, "node count")
        tree = read_graph(tokens, max(nodes - 1, 0))
        line = query(tree, nodes, *(_take(tokens, "last query value") for _ in range(extra)))
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    for node in range(1, nodes + 1):
        print(f"Nodes Connected With {node} : " + "".join(f"{n} " for n in tree.neighbours(node)))
    print()
    print(line)
    return 0


def _ancestry(tree: Graph, nodes: int, root: int, child_a: int, child_b: int) -> str:
    if is_ancestor(euler_times(tree, root), child_a, child_b):
        return f"Yes, {child_b} is the Ancestor of {child_a}."
    return f"No, {child_b} isn't the Ancestor of {child_a}."


def ancestry_main(argv: list[str] | None = None) -> int:
    """Read a tree, a root and two nodes; say whether the second is an ancestor of the first."""
    return _run(argv, 3, _ancestry)


def diameter_main(argv: list[str] | None = None) -> int:
    """Read a tree and print its diameter."""
    return _run(argv, 0, lambda tree, nodes: f"Diameter of this Tree is : {tree_diameter(tree, nodes)}")


def leaves_main(argv: list[str] | None = None) -> int:
    """Read a tree and a root and print the number of leaves."""
    return _run(
        argv, 1, lambda tree, nodes, root: f"Total Number of Leaves are : {count_leaves(tree, root)}"
    )