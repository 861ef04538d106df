[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "striker"
version = "3.0.0"
description = "Blackjack simulator that plays many hands under fetched table rules and player strategy charts"
requires-python = ">=3.10"
dependencies = []
keywords = ["blackjack", "simulation", "card-counting", "basic-strategy", "monte-carlo"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
striker = "striker.app:main"

[tool.hatch.build.targets.wheel]
packages = ["striker"]

[tool.pytest.ini_options]
addopts = "-ra"
