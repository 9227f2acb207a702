[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "warf"
version = "0.1.0"
description = "Tile-based dwarf colony simulation: world maps, rooms, pathfinding, rails and jobs."
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "colony", "dwarves", "tiles", "pathfinding", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["warf"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
