[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lbtools"
version = "1.17.0"
description = "Small toolbox for multi-threaded Python programs: scoped locks, thread-local storage, visitor results and text helpers."
requires-python = ">=3.10"
dependencies = []
keywords = ["threading", "locks", "thread-local", "toolbox", "utilities"]
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
packages = ["lbtools"]

[tool.pytest.ini_options]
addopts = "-ra"
