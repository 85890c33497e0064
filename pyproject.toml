[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "asciicraft"
version = "0.1.0"
description = "A tiny block world rendered as ASCII art in the terminal by ray casting"
requires-python = ">=3.10"
dependencies = []
keywords = ["ascii", "raycasting", "terminal", "game", "voxel", "blocks"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
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
asciicraft = "asciicraft.game:main"

[tool.hatch.build.targets.wheel]
packages = ["asciicraft"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
