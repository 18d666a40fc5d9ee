[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sksh"
version = "0.1.0"
description = "Core of a small shell: builtins, an environment store and && / || command lines with grouping"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "builtins", "environment", "command line", "parser"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sksh"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
