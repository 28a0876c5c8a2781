[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ktree"
version = "0.1.0"
description = "K-ary trees with pre-, in-, post-order, BFS, DFS and heap traversals, plus a small complex-number type"
requires-python = ">=3.10"
dependencies = []
keywords = ["tree", "k-ary", "traversal", "iterator", "complex"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ktree-demo = "ktree.main:main"

[tool.hatch.build.targets.wheel]
packages = ["ktree"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
