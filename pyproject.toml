[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "structlab"
version = "0.1.0"
description = "Classic data structures and algorithms: lists, stacks, queues, B-trees, hashing, string matching and expression evaluation."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "algorithms",
    "linked-list",
    "stack",
    "queue",
    "b-tree",
    "hash-table",
    "kmp",
    "josephus",
    "polynomial",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
structlab-stack = "structlab.stacks:main"
structlab-josephus = "structlab.josephus:main"

[tool.hatch.build.targets.wheel]
packages = ["structlab"]

[tool.hatch.build.targets.sdist]
include = ["structlab", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
