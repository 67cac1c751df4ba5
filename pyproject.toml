[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "game_algorithms"
version = "0.1.0"
description = "Classic sorting, searching, tree and grid algorithms as used in simple games"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "sorting", "searching", "binary search tree", "maze", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
game-sorting = "game_algorithms.sorting:main"
game-searching = "game_algorithms.searching:main"
game-tree = "game_algorithms.tree:main"
game-triage = "game_algorithms.triage:main"
game-maze = "game_algorithms.maze:main"

[tool.hatch.build.targets.wheel]
packages = ["game_algorithms"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
