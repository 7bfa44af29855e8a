[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "energialeitura"
version = "0.1.0"
description = "Record and measure household electricity consumption across the districts, streets and houses of a city"
requires-python = ">=3.10"
dependencies = []
keywords = ["energy", "consumption", "metering", "utilities", "city"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
energialeitura = "energialeitura.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["energialeitura"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
