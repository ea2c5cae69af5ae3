[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "arenakit"
version = "0.1.0"
description = "Game-logic toolkit for tile-based 2D arena games: blocks, moving objects, damage, keybinds and tile maps"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "2d", "tilemap", "collision", "arena"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["arenakit*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
