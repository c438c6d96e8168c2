[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "comprolib"
version = "0.1.0"
description = "Algorithms and data structures for competitive programming: segment trees, Fenwick trees, union-find, Dijkstra, rolling hashes and more."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "competitive-programming",
    "algorithms",
    "data-structures",
    "segment-tree",
    "fenwick-tree",
    "union-find",
    "dijkstra",
    "rolling-hash",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["comprolib"]

[tool.pytest.ini_options]
addopts = "-ra"
