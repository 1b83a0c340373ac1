[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cfgdraw"
version = "0.1.0"
description = "Layout and drawing helpers for control-flow graphs of bytecode: text art, GML export and PNG drawing"
requires-python = ">=3.10"
keywords = ["control-flow graph", "bytecode", "graph layout", "gml", "ascii art", "disassembly"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Disassemblers",
    "Topic :: Scientific/Engineering :: Visualization",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["cfgdraw"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
