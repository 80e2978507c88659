[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ammcr"
version = "1.0.0"
description = "Building blocks for Rode-method carrier transport calculations from first-principles band data"
requires-python = ">=3.10"
keywords = ["mobility", "semiconductor", "boltzmann transport", "rode", "band structure", "fermi level", "procar", "eigenval"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["ammcr"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
