[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dodengine"
version = "0.1.0"
description = "A small 2D game platform layer: input handling, logging, file helpers and a pygame window loop."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "engine", "2d", "input", "logging", "pygame"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
dodengine = "dodengine.app:main"

[tool.hatch.build.targets.wheel]
packages = ["dodengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
