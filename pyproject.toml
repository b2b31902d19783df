[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tasklist"
version = "0.1.0"
description = "A small to-do list: tasks with a label, a priority and a completed flag, kept in a compact binary file."
requires-python = ">=3.10"
dependencies = []
keywords = ["todo", "tasks", "to-do list", "priorities", "command line"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tasklist = "tasklist.app:main"

[tool.hatch.build.targets.wheel]
packages = ["tasklist"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
