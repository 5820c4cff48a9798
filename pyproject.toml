[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "csvslice"
version = "0.1.0"
description = "Extract rows or columns from CSV files without loading the entire file"
requires-python = ">=3.10"
dependencies = []
keywords = ["csv", "data", "slice", "extract"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
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
test = ["pytest"]

[project.scripts]
csv-slice = "csvslice.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["csvslice"]

[tool.pytest.ini_options]
addopts = "-ra"
