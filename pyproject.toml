[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "evosim"
version = "3.0.1"
description = "Building blocks for an individual-based evolutionary simulation: genome systems, pathogens, species identification, reseed genomes and run options."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "evolution",
    "simulation",
    "artificial life",
    "genome",
    "speciation",
    "pathogens",
    "individual-based model",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Life",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
evosim = "evosim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["evosim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
