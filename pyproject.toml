[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "msqlite"
version = "1.99.8"
description = "Composable builders for SQLite SQL text: columns, statements, conditions and table constraints"
requires-python = ">=3.10"
dependencies = []
keywords = ["sqlite", "sql", "query-builder", "database"]
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
    "Topic :: Database",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["msqlite"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
