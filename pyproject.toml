[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algclab"
version = "0.1.0"
description = "Algorithms and data structures lab: dates, times, sorted lists, search trees, schedules and operation-counting exercises"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "binary-search-tree",
    "sorted-list",
    "scheduling",
    "complexity",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algclab-basics = "algclab.basics:main"
algclab-complexity = "algclab.complexity:main"
algclab-recurrences = "algclab.recurrences:main"

[tool.hatch.build.targets.wheel]
packages = ["algclab"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
