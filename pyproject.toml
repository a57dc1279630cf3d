[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinystl"
version = "0.1.0"
description = "Position-based sequence, reverse and tree iterators with container-style semantics, and a small unit test runner"
requires-python = ">=3.10"
dependencies = []
keywords = ["iterator", "iterator categories", "binary search tree", "unit testing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
    "Topic :: Software Development :: Testing :: Unit",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tinystl"]

[tool.pytest.ini_options]
addopts = "-ra"
