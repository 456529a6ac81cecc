[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eulerkit"
version = "0.1.0"
description = "Answers to Project Euler problems 1 to 50, with the number-theory helpers they share"
requires-python = ">=3.10"
dependencies = []
keywords = ["project-euler", "number-theory", "primes", "puzzles", "mathematics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
eulerkit = "eulerkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["eulerkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
