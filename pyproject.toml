[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cyclesearch"
version = "0.1.0"
description = "Simulation of a distributed cycle-detection protocol over random directed graphs"
requires-python = ">=3.10"
dependencies = []
keywords = ["distributed", "cycle detection", "graph", "simulation", "diffie-hellman", "message passing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Distributed Computing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cyclesearch = "cyclesearch.simulation:main"

[tool.hatch.build.targets.wheel]
packages = ["cyclesearch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
