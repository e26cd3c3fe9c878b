[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "levelinfo"
version = "0.1.0"
description = "Helpers for inspecting, filtering and describing Geometry Dash levels"
requires-python = ">=3.10"
dependencies = []
keywords = ["geometry-dash", "levels", "level-string", "search", "filtering"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["levelinfo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
