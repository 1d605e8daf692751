[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "micromouse"
version = "0.1.0"
description = "Micromouse maze-solving mice that drive a maze simulator over a line-based text protocol"
requires-python = ">=3.10"
dependencies = []
keywords = ["micromouse", "maze", "floodfill", "wall-follower", "simulator", "robotics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
micromouse-floodfill = "micromouse.floodfill:main"
micromouse-wall-follower = "micromouse.wall_follower:main"

[tool.hatch.build.targets.wheel]
packages = ["micromouse"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
