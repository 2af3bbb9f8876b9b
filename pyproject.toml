[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algonotes"
version = "0.1.0"
description = "Classic algorithms in plain Python: sorting, searching, array problems, primes, dynamic programming, a crossword solver and minimum spanning trees."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "sorting",
    "searching",
    "dynamic programming",
    "backtracking",
    "minimum spanning tree",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
algonotes-crossword = "algonotes.crossword:main"

[tool.hatch.build.targets.wheel]
packages = ["algonotes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
