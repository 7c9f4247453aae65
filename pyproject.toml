[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "simworld"
version = "0.1.0"
description = "Simulation world helpers: object pose resolution, transform broadcasting, primitive spawning, physics settings and world plugin loading"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "robotics", "sdf", "tf", "physics", "objects"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["simworld"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
