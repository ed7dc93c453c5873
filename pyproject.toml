[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "orbitsim"
version = "0.1.0"
description = "Interactive two-dimensional gravitational planet simulator with a file-backed universe editor"
requires-python = ">=3.10"
keywords = ["gravity", "n-body", "simulation", "planets", "physics", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
orbitsim = "orbitsim.app:main"

[tool.hatch.build.targets.wheel]
packages = ["orbitsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
