[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pelletmaze"
version = "0.1.0"
description = "A small tile-based maze arcade game with walls, pellets, a player and ghosts, drawn with pygame."
requires-python = ">=3.10"
keywords = ["game", "arcade", "maze", "pellets", "pygame", "tile-map"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
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

[project.scripts]
pelletmaze = "pelletmaze.app:main"

[tool.hatch.build.targets.wheel]
packages = ["pelletmaze"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
