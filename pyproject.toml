[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adventsolver"
version = "0.1.0"
description = "Solvers for a collection of daily programming puzzles, usable as a library or from the command line"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "solver", "grid", "pathfinding"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
adventsolver = "adventsolver.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["adventsolver"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
