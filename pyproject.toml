[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "modrecur"
version = "0.1.0"
description = "Modular arithmetic, matrix exponentiation and linear recurrences over integers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "modular arithmetic",
    "matrix exponentiation",
    "linear recurrence",
    "combinatorics",
    "sieve",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
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
modrecur = "modrecur.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["modrecur"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]
