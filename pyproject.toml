[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jsonvalue"
version = "2.14.0"
description = "A mutable JSON value model with typed strings, numbers, objects and arrays, UTF-8 checks and loop-safe copying"
requires-python = ">=3.10"
dependencies = []
keywords = ["json", "values", "utf-8", "hash", "deep-copy"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
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
packages = ["jsonvalue"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
