[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "overworld"
version = "0.1.0"
description = "A small top-down tile-map game with animated sprites, a following camera, tile collisions and an inventory panel."
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["game", "rpg", "tilemap", "pygame", "inventory", "sprite-animation"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
overworld = "overworld.game:main"

[tool.hatch.build.targets.wheel]
packages = ["overworld"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
