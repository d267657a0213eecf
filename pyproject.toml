[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "laberinto"
version = "0.1.0"
description = "Terminal maze game: generate a random maze, explore it by hand and watch a backtracking solver find the exit."
requires-python = ">=3.10"
dependencies = []
keywords = ["maze", "labyrinth", "game", "backtracking", "dfs", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Natural Language :: Spanish",
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
laberinto = "laberinto.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["laberinto"]

[tool.pytest.ini_options]
addopts = "-ra"
