[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "floodforge"
version = "1.5.5"
description = "Rain World map editing helpers: creature catalogs, den rules, region acronyms, a markdown subset, popups and a body-chunk physics simulation."
requires-python = ">=3.10"
dependencies = []
keywords = ["rain world", "map editor", "creature dens", "region", "physics"]
classifiers = [
    "Development Status :: 3 - Alpha",
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

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["floodforge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
