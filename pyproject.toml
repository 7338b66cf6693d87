[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cursed-diner"
version = "0.1.0"
description = "Command-driven simulation of a circular-table restaurant with a waiting queue and sorcerer/spirit guests"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "restaurant", "circular list", "queue", "shellsort"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
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
cursed-diner = "cursed_diner.simulate:main"

[tool.hatch.build.targets.wheel]
packages = ["cursed_diner"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
