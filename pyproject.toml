[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "checkers"
version = "0.1.0"
description = "A full-screen checkers board game prototype with a main menu, a settings screen and a game board"
requires-python = ">=3.10"
keywords = ["checkers", "draughts", "board game", "pygame"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
checkers = "checkers.app:main"

[tool.hatch.build.targets.wheel]
packages = ["checkers"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
