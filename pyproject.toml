[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "first2shed"
version = "0.1.0"
description = "A shedding card game engine driven by commands through a finite state machine"
requires-python = ">=3.10"
dependencies = []
keywords = ["card game", "shedding game", "state machine", "game engine"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
first2shed = "first2shed.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["first2shed"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
