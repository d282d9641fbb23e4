[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "monoopoly"
version = "0.1.0"
description = "A console Monopoly-style board game for two to six players"
requires-python = ">=3.10"
dependencies = []
keywords = ["monopoly", "board game", "console", "terminal", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
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
monoopoly = "monoopoly.game:main"

[tool.hatch.build.targets.wheel]
packages = ["monoopoly"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
