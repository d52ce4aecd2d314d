[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "asyncwebcli"
version = "1.0.9"
description = "A small line-oriented command interpreter with named, positional and flag arguments"
requires-python = ">=3.10"
dependencies = []
keywords = ["cli", "command", "parser", "arguments", "interpreter", "lock"]
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
    "Topic :: Software Development :: Libraries",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["asyncwebcli"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
