[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "questgrid"
version = "0.1.0"
description = "Grid-based hero adventure simulation driven by CSV scenario files"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "simulation", "grid", "heroes", "rpg"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
questgrid = "questgrid.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["questgrid"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
