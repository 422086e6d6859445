[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quadsolve"
version = "0.1.0"
description = "Interactive quadratic and linear equation solver with built-in self-tests"
requires-python = ">=3.10"
dependencies = []
keywords = ["quadratic", "equation", "solver", "roots", "math"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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
quadsolve = "quadsolve.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["quadsolve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
