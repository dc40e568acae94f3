[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "argkit"
version = "2.0.2"
description = "Command line argument parsing with positional, named, long/short and subcommand support."
requires-python = ">=3.10"
dependencies = []
keywords = ["command line", "arguments", "parser", "subcommands", "cli"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["argkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
