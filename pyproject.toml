[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "behavioral_patterns"
version = "0.1.0"
description = "Game-character models built around the command, observer, strategy, state and visitor patterns"
requires-python = ">=3.10"
dependencies = []
keywords = ["design patterns", "command", "observer", "strategy", "state machine", "visitor", "game"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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

[tool.setuptools.packages.find]
include = ["behavioral_patterns*"]

[tool.pytest.ini_options]
addopts = "-ra"
