[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aleph3"
version = "0.1.0"
description = "A small symbolic expression language: parser, printer, arithmetic simplification rules and built-in functions"
requires-python = ">=3.10"
dependencies = []
keywords = ["symbolic", "computer algebra", "expressions", "parser", "simplification"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["aleph3"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
