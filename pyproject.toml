[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dbstats"
version = "0.1.0"
description = "Render database server metrics as JSON or aligned text"
requires-python = ">=3.10"
dependencies = []
keywords = ["database", "metrics", "statistics", "monitoring", "json"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Front-Ends",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dbstats"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
