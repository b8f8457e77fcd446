[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xlsxparts"
version = "1.3.0"
description = "Read and write individual SpreadsheetML parts: colors, content types, conditional formatting and charts"
requires-python = ">=3.10"
dependencies = []
keywords = ["xlsx", "spreadsheetml", "ooxml", "excel", "chart", "conditional-formatting"]
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
    "Topic :: Office/Business :: Financial :: Spreadsheet",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["xlsxparts"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
