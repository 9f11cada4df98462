[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "parkingsim"
version = "0.1.0"
description = "Discrete-event (DEVS) atomic models of a parking lot with sensors, controller and barriers"
requires-python = ">=3.10"
dependencies = []
keywords = ["devs", "discrete-event", "simulation", "parking", "queueing", "mersenne-twister"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["parkingsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
