[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "santaworkshop"
version = "0.1.0"
description = "A console workshop for Santa's elves: record children's letters, pick gifts within a budget and plan the delivery route."
requires-python = ">=3.10"
dependencies = []
keywords = ["santa", "simulation", "kruskal", "dijkstra", "console", "game"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
santaworkshop = "santaworkshop.ui:main"

[tool.hatch.build.targets.wheel]
packages = ["santaworkshop"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
