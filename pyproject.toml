[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "graphwalk"
version = "0.1.0"
description = "Breadth- and depth-first walks over graphs, trees and grid mazes, with small command-line tools."
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "tree", "bfs", "dfs", "maze", "diameter", "euler tour"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
graphwalk-levels = "graphwalk.graph:levels_main"
graphwalk-times = "graphwalk.graph:times_main"
graphwalk-maze = "graphwalk.maze:main"
graphwalk-ancestry = "graphwalk.trees:ancestry_main"
graphwalk-diameter = "graphwalk.trees:diameter_main"
graphwalk-leaves = "graphwalk.trees:leaves_main"
graphwalk-reset = "graphwalk.workspace:main"

[tool.setuptools.packages.find]
include = ["graphwalk*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
