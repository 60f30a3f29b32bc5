[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lintre"
version = "0.1.6"
description = "A small untyped lambda-calculus interpreter with definitions and sequences"
requires-python = ">=3.10"
dependencies = []
keywords = ["lambda-calculus", "interpreter", "beta-reduction", "functional"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lintre = "lintre.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["lintre"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
