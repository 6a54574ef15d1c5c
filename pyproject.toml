[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphwalk"
version = "0.1.0"
description = "Classic graph traversal, shortest-path, searching and sorting algorithms on plain Python data"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "bfs",
    "dfs",
    "dijkstra",
    "bellman-ford",
    "floyd-warshall",
    "topological-sort",
    "sorting",
    "binary-search",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["graphwalk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
