[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pachinko"
version = "0.1.0"
description = "Building blocks for a pachinko arcade game: ball physics, pins, a prize slot, a three-reel lottery, reward lights, buttons and a title menu."
requires-python = ">=3.10"
keywords = ["pachinko", "arcade", "game", "pygame", "lottery"]
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
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["pachinko"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
