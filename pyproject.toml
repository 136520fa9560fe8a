[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "holical"
version = "2.0.0"
description = "Holiday definitions and calculations for European countries and regions"
requires-python = ">=3.10"
dependencies = []
keywords = ["holidays", "calendar", "easter", "public holidays", "bank holidays"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["holical"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
