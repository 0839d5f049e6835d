[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fmgrid"
version = "0.1.0"
description = "Building blocks for path planning on 8-connected octile grids"
requires-python = ">=3.10"
dependencies = []
keywords = ["pathfinding", "grid", "octile", "dijkstra", "scenario", "path-validation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fmgrid"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
