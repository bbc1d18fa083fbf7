[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dokumenty"
version = "0.1.0"
description = "Dokumenty Please: a terminal border-checkpoint game where you inspect ID cards and passports"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "terminal", "simulation", "border", "documents"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
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
dokumenty = "dokumenty.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dokumenty"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
