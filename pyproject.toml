[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adtkit"
version = "0.1.0"
description = "Classic abstract data types: a fixed-capacity set, a doubling stack, a chained hash dictionary, a max-heap and a BST validity checker, with a few small container programs."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "abstract data types",
    "set",
    "stack",
    "heap",
    "hash table",
    "binary search tree",
    "queue simulation",
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
adtkit-stack-demo = "adtkit.array_stack:main"
adtkit-bank-sim = "adtkit.bank_simulation:main"
adtkit-containers = "adtkit.containers:main"
adtkit-heap-demo = "adtkit.max_heap:main"
adtkit-famous = "adtkit.hashed_dictionary:main"

[tool.hatch.build.targets.wheel]
packages = ["adtkit"]

[tool.hatch.build.targets.sdist]
include = ["adtkit", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
