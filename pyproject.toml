[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sandbox"
version = "0.1.0"
description = "A falling-sand simulation with simple UI widgets and a selection sort visualizer"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["falling sand", "simulation", "cellular automaton", "pygame", "sorting", "visualization"]
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
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sandbox = "sandbox.program:main"
sandbox-sortviz = "sandbox.sortviz:main"

[tool.hatch.build.targets.wheel]
packages = ["sandbox"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
