[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spacefighter"
version = "0.1.0"
description = "Game rules for a vertical space shooter: vectors, collision masks, particles, ships, weapons and levels"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "shooter", "arcade", "collision", "particles", "vector"]
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
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["spacefighter"]

[tool.pytest.ini_options]
addopts = "-ra"
