[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dckit"
version = "0.1.0"
description = "Small foundation toolkit: Option and Result types, strict formatting, UTF-8 helpers, file access, call stacks and threaded logging."
requires-python = ">=3.10"
dependencies = []
keywords = ["option", "result", "logging", "formatting", "utf-8", "fnv1a", "utilities"]
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
packages = ["dckit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
