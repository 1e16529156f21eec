[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hornetkit"
version = "0.1.0"
description = "Host-side utilities for graph processing: integer math helpers, statistics, flag sets, bit matrices, printing, timers and edge batch generation"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "statistics", "bitmatrix", "timer", "batch", "prefix-sum", "utilities"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hornetkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
