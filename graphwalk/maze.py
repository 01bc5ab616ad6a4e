"""Shortest king-move path through a grid maze."""

from __future__ import annotations

import sys
from collections import deque

from graphwalk.graph import _read_tokens, _take

TARGET = 3

_STEPS = ((0, -1), (1, 0), (-1, 0), (0, 1), (1, 1), (-1, 1), (-1, -1), (1, -1))


def solve_maze(grid: list[list[int]]) -> int | None:
    """Return the fewest king moves from the top-left cell to a cell holding 3 over non-zero cells, or None."""
    if not grid or not grid[0]:
        raise ValueError("maze must have at least one cell")
    rows, cols = len(grid), len(grid[0])
    if any(len(row) != cols for row in grid):
        raise ValueError("maze rows must all have the same length")
    seen = {(0, 0)}
    queue = deque([(0, 0, 0)])
    while queue:
        r, c, moves = queue.popleft()
        if grid[r][c] == TARGET:
            return moves
        for nr, nc in ((r + dr, c + dc) for dr, dc in _STEPS):
            if 0 <= nr < rows and 0 <= nc < cols and (nr, nc) not in seen and grid[nr][nc]:
                seen.add((nr, nc))
                queue.append((nr, nc, moves + 1))
    return None


def parse_maze(text: str) -> list[list[int]]:
    """Read a row count, a column count and then the cells row by row."""
    tokens = iter(text.split())
    rows, cols = _take(tokens, "row count"), _take(tokens, "column count")
    if rows < 0 or cols < 0:
        raise ValueError("maze dimensions must not be negative")
    return [[_take(tokens, "last cell") for _ in range(cols)] for _ in range(rows)]


def main(argv: list[str] | None = None) -> int:
    """Solve the maze read from a file or standard input and print the move count."""
    try:
        answer = solve_maze(parse_maze(" ".join(_read_tokens(argv))))
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(f"It would take {-1 if answer is None else answer} Moves to solve The Maze.")
    return 0