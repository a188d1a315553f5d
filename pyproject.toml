[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "yoru"
version = "0.1.0"
description = "Small general-purpose toolkit: a linked list, a string-keyed hash map, a string builder, simple futures, arena-style buffers and file helpers."
requires-python = ">=3.10"
dependencies = []
keywords = ["collections", "hashmap", "linked-list", "string-builder", "futures", "arena", "djb2"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["yoru"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
