[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "edastructs"
version = "0.1.0"
description = "Classic data structures and algorithms: binary trees, AVL maps, heaps, graphs, disjoint sets and dynamic programming."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "algorithms",
    "binary tree",
    "avl",
    "priority queue",
    "heap",
    "graph",
    "union-find",
    "dynamic programming",
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
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
edastructs-balance = "edastructs.balance:main"
edastructs-cuts = "edastructs.cuts:main"

[tool.setuptools.packages.find]
include = ["edastructs*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
