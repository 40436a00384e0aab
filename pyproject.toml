[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "emergence_sim"
version = "0.1.0"
description = "Hex-grid world simulation core: map geometry, terrain manifests, signals, light and in-game time"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "hex grid", "pathfinding", "signals", "colony", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["emergence_sim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
