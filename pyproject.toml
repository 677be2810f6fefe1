[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aipnames"
version = "0.1.0"
description = "Parse, match, format and validate AIP-style resource names, and collect field violations."
requires-python = ">=3.10"
dependencies = []
keywords = ["aip", "resource-name", "validation", "api-design", "field-violation"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["aipnames"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
