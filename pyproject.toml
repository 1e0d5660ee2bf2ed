[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "condorvote"
version = "0.1.0"
description = "Count ranked ballots by simple majority, a pairwise Ranked Pairs count and the Schulze method."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "election",
    "voting",
    "condorcet",
    "ranked pairs",
    "tideman",
    "schulze",
    "majority",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
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
condorvote = "condorvote.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["condorvote"]

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
strict = true
files = ["condorvote"]
