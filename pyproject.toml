[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tentsat"
version = "0.1.0"
description = "Encode Tents puzzles as SAT problems in DIMACS CNF and read solver results back"
requires-python = ">=3.10"
dependencies = []
keywords = ["tents", "puzzle", "sat", "cnf", "dimacs", "3-sat", "minisat"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tentsat = "tentsat.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tentsat"]

[tool.pytest.ini_options]
addopts = "-ra"
