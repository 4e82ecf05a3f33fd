[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ccds"
version = "1.0.0"
description = "Doubly linked lists, object and node pools, list sorting, and list-backed queues and stacks"
requires-python = ">=3.10"
dependencies = []
keywords = ["linked list", "object pool", "queue", "stack", "sorting", "data structures"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ccds"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
