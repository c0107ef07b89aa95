[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minigames"
version = "0.1.0"
description = "Small terminal games and practice exercises: a text RPG, a snail game, falling balls and a ball-pushing puzzle."
requires-python = ">=3.10"
dependencies = []
keywords = ["games", "terminal", "console", "rpg", "snake", "puzzle", "exercises"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Natural Language :: Korean",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Games/Entertainment :: Arcade",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minigames-exercises = "minigames.exercises:main"
minigames-rpg = "minigames.rpg_game:main"
minigames-snail = "minigames.snail_game:main"
minigames-falling-ball = "minigames.falling_ball:main"
minigames-push = "minigames.push_game:main"

[tool.hatch.build.targets.wheel]
packages = ["minigames"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
