[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "norcina"
version = "0.1.0"
description = "Rubik's cube modelling, scrambling and solving, with solve records and a speedcubing timer state machine."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "rubiks-cube",
    "speedcubing",
    "kociemba",
    "ida-star",
    "scramble",
    "timer",
    "puzzle",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
norcina = "norcina.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["norcina"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
