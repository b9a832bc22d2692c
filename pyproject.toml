[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "consolegames"
version = "0.1.0"
description = "Small terminal games and toys: 2048, Game of Life, Color Linez, snake, an anti-aliased clock and ASCII images"
requires-python = ">=3.10"
keywords = ["games", "2048", "snake", "game-of-life", "color-lines", "ascii-art", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
consolegames-2048 = "consolegames.game2048:main"

[tool.hatch.build.targets.wheel]
packages = ["consolegames"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
