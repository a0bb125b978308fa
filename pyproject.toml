[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ceoclash"
version = "0.1.0"
description = "A small two-player side-view brawler with a toolkit of vector, rectangle, colour and text helpers"
requires-python = ">=3.10"
keywords = ["game", "fighting", "arcade", "pygame", "vector", "geometry"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ceoclash = "ceoclash.game:main"

[tool.hatch.build.targets.wheel]
packages = ["ceoclash"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
