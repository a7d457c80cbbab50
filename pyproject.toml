[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cineprog"
version = "0.1.0"
description = "Load, sort, save and print film, cinema and actor catalogues and a cinema screening schedule kept in line-per-field text files"
requires-python = ">=3.10"
dependencies = []
keywords = ["cinema", "films", "movies", "actors", "schedule", "showtimes", "catalogue"]
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
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cineprog = "cineprog.cli:main"
cineprog-films = "cineprog.cli:films_main"
cineprog-cinemas = "cineprog.cli:cinemas_main"

[tool.hatch.build.targets.wheel]
packages = ["cineprog"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
