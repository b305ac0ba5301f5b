[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termsweeper"
version = "0.1.0"
description = "Terminal minesweeper core: board logic, character canvases, layout, curses rendering and persistence"
requires-python = ">=3.10"
dependencies = []
keywords = ["minesweeper", "terminal", "curses", "game", "puzzle"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console :: Curses",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
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

[tool.hatch.build.targets.wheel]
packages = ["termsweeper"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
