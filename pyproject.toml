[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "moebot"
version = "0.6.1"
description = "Command parsing, message formatting and game logic for a community chat bot"
requires-python = ">=3.10"
dependencies = []
keywords = ["chat", "bot", "polls", "raffle", "roles", "commands"]
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
    "Topic :: Communications :: Chat",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["moebot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
