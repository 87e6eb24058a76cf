[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "roguelib"
version = "5.4.4"
description = "Save-game, score-file and item-naming machinery of the classic dungeon game"
requires-python = ">=3.10"
dependencies = []
keywords = ["rogue", "roguelike", "savegame", "scoreboard", "dungeon"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["roguelib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
