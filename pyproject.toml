[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lazaretto"
version = "0.1.0"
description = "A grid-based raycasting engine that loads .cub maps and renders first-person frames"
requires-python = ">=3.10"
dependencies = ["pillow"]
keywords = ["raycasting", "raycaster", "dda", "cub", "first-person", "game"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: First Person Shooters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lazaretto"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
