[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "resolvent"
version = "2.0.0"
description = "Propositional CNF formulas: a resolution-based satisfiability checker, a random formula generator and a desktop formula manager"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "propositional logic",
    "cnf",
    "resolution",
    "satisfiability",
    "sat",
    "unit propagation",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
resolvent-solve = "resolvent.solver:main"
resolvent-generate = "resolvent.generator:main"

[project.gui-scripts]
resolvent-gui = "resolvent.gui:main"

[tool.hatch.build.targets.wheel]
packages = ["resolvent"]

[tool.hatch.build.targets.sdist]
include = ["resolvent", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
