[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "femkit"
version = "0.1.0"
description = "Finite element building blocks: quadrature rules, elastic materials, cross-sections, zero-length springs, linear and eigenvalue solvers"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["finite element", "fem", "structural analysis", "quadrature", "eigenvalue", "solver"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["femkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
