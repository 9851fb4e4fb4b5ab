[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "storytree"
version = "0.1.0"
description = "A branching text adventure driven by a binary decision tree loaded from a story file"
requires-python = ">=3.10"
dependencies = []
keywords = ["text adventure", "decision tree", "interactive fiction", "game"]
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
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
storytree = "storytree.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["storytree"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
