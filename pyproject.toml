[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "surveycalc"
version = "0.1.0"
description = "Arithmetic, trigonometry and direct/inverse geodetic problems from the command line"
requires-python = ">=3.10"
dependencies = []
keywords = ["calculator", "trigonometry", "surveying", "geodesy", "bearing"]
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
surveycalc = "surveycalc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["surveycalc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
