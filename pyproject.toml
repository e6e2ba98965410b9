[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "twentygames"
version = "0.0.1"
description = "A small fixed-timestep 2D game engine on pygame, with a playable Pong."
requires-python = ">=3.10"
keywords = ["game", "engine", "pong", "pygame", "2d", "fixed-timestep"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
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

[project.scripts]
twentygames-pong = "twentygames.pong_game:main"

[tool.hatch.build.targets.wheel]
packages = ["twentygames"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
