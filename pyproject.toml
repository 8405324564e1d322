[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "searchlab"
version = "0.1.0"
description = "Classic search, graph and puzzle algorithms with small interactive command-line drivers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "graph",
    "dfs",
    "bfs",
    "prim",
    "a-star",
    "8-puzzle",
    "n-queens",
    "selection-sort",
    "expert-system",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
searchlab-graph = "searchlab.graphs:main"
searchlab-prim = "searchlab.mst:main"
searchlab-puzzle = "searchlab.puzzle:main"
searchlab-gridpath = "searchlab.gridpath:main"
searchlab-queens = "searchlab.queens:main"
searchlab-sort = "searchlab.sorting:main"
searchlab-diagnose = "searchlab.expert:main"

[tool.hatch.build.targets.wheel]
packages = ["searchlab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
