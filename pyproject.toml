[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphtrees"
version = "0.1.0"
description = "Weighted undirected graphs with BFS, DFS, Dijkstra, Prim and Kruskal spanning trees"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "bfs", "dfs", "dijkstra", "prim", "kruskal", "spanning tree", "union-find", "min-heap"]
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
graphtrees = "graphtrees.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["graphtrees"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
