# graphwalk

Small graph utilities with no dependencies, built on breadth-first and
depth-first search.

- `graphwalk.graph`: the `Graph` class is an undirected multigraph.
  `bfs_levels` gives the breadth-first level of each node.
  `dfs_times` gives the depth-first entry and exit times of each node.
- `graphwalk.maze`: `solve_maze` finds the fewest moves through a grid.
  Moves go to any of the 8 neighbouring non-zero cells. The start is the
  top-left cell and the goal is any cell holding `3`.
  `parse_maze` reads a maze from text.
- `graphwalk.trees`:
  - `euler_times` and `is_ancestor` check ancestry.
  - `tree_diameter` gives the diameter.
  - `count_leaves` counts nodes of degree one.
  - The tree walks raise `ValueError` when the edges contain a cycle.
- `graphwalk.workspace`: `copy_template` and `reset_submission` reset a
  submission directory from its template files.

## Installation

```
pip install .
```

## Library use

```python
from graphwalk.graph import Graph, bfs_levels, dfs_times
from graphwalk.maze import parse_maze, solve_maze
from graphwalk.trees import count_leaves, euler_times, is_ancestor, tree_diameter

g = Graph([(1, 2), (2, 3)])
g.add_edge(3, 4)
g.neighbours(2)                 # [1, 3]
bfs_levels(g, 1)                # {1: 0, 2: 1, 3: 2, 4: 3}
dfs_times(g, 1)                 # {node: (in_time, out_time), ...}

times = euler_times(g, 1)
is_ancestor(times, 4, 2)        # True: 2 is a proper ancestor of 4
tree_diameter(g, 4)             # 3
count_leaves(g, 1)              # 2

solve_maze([[1, 1], [0, 3]])    # 1
solve_maze([[1, 0], [0, 3]])    # None: the goal cannot be reached
solve_maze(parse_maze("2 2\n1 1\n0 3\n"))
```

`bfs_levels` and `dfs_times` return entries only for nodes that can be
reached from the root. `is_ancestor` returns `False` for nodes that are
missing from the times it is given.

`tree_diameter(tree, nodes)` runs two sweeps over nodes `1..nodes`. The
first sweep starts at node 0. The second starts at the deepest node that
the first sweep found.

`solve_maze` raises `ValueError` for an empty grid or for rows of unequal
length.

## Command-line tools

The tools read whitespace-separated integers. They read from the file
named as the first argument, or from standard input when there is no
argument or it is `-`.

Each graph and tree tool first prints the adjacency list of nodes `1..n`,
then its result. When the input ends early, or a tree turns out to have a
cycle, a tool prints `error: ...` to standard error and exits with status 1.

| Command | Input | Output |
| --- | --- | --- |
| `graphwalk-levels` | `nodes edges`, then `edges` pairs `a b`, then `root` | level of each node; 0 if not reachable |
| `graphwalk-times` | `nodes edges`, then `edges` pairs `a b`, then `root` | `{ in, out }` of each node; `{ 0, 0 }` if not reachable |
| `graphwalk-maze` | `rows cols`, then the grid of cell values | number of moves, or `-1` if the goal cannot be reached |
| `graphwalk-ancestry` | `nodes`, then `nodes-1` edges, then `root`, then `a b` | whether `b` is an ancestor of `a` |
| `graphwalk-diameter` | `nodes`, then `nodes-1` edges | diameter of the tree |
| `graphwalk-leaves` | `nodes`, then `nodes-1` edges, then `root` | number of leaves |
| `graphwalk-reset` | optional directory argument; defaults to `.` | resets the workspace |

Example:

```
printf '3 2\n1 2\n2 3\n1\n' | graphwalk-levels
```

### Workspace reset

`graphwalk-reset` calls `reset_submission` on the directory, which does
the following:

- copies `templateC++.txt` to `sourcecode.cpp`;
- copies `templatePy.txt` to `sourcecode.py`;
- empties `input.in` and `output.out`, creating them if needed.

A template that cannot be read leaves its target empty.
`copy_template(source, destination)` returns `False` in that case.

## What it does not do

The tools only reset and analyse a workspace. They do not compile or run
the code in it, and they do not generate test inputs or compare outputs.

## Tests

```
pip install .[test]
pytest
```