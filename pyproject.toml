[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "csvtools"
version = "0.1.0"
description = "Library for slicing, reshaping, summarising and converting CSV/TSV data"
requires-python = ">=3.10"
dependencies = [
    "wcwidth",
]
keywords = ["csv", "tsv", "table", "filter", "json", "markdown", "restructuredtext"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Filters",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["csvtools"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
