[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jsonnetcore"
version = "0.1.0"
description = "Building blocks for a Jsonnet interpreter: syntax tree nodes, source locations, fodder handling, command-line helpers and standard built-in functions on plain Python values"
requires-python = ">=3.10"
dependencies = []
keywords = ["jsonnet", "json", "configuration", "interpreter", "ast"]
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
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["jsonnetcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
