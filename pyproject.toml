[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numlab"
version = "0.1.0"
description = "Small experiments with natural numbers: primes, sums of squares, Goldbach pairs, Hanoi counts, oscillators and a tiny DFT."
requires-python = ">=3.10"
dependencies = [
    "matplotlib",
]
keywords = [
    "number theory",
    "primes",
    "sieve",
    "goldbach",
    "sum of squares",
    "pythagorean triples",
    "dft",
    "repl",
]
classifiers = [
    "Development Status :: 3 - Alpha",
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
test = [
    "pytest",
]

[project.scripts]
numlab-sieve = "numlab.sieve:main"
numlab-factors = "numlab.factors:main"
numlab-squares = "numlab.squares:main"
numlab-goldbach = "numlab.goldbach:main"
numlab-naturally = "numlab.naturally:main"
numlab-lattice = "numlab.lattice:main"
numlab-oscillator = "numlab.oscillator:main"
numlab-dft = "numlab.dft:main"

[tool.hatch.build.targets.wheel]
packages = ["numlab"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
