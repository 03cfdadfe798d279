[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rawxml"
version = "0.1.0"
description = "A small flat-table XML reader that indexes tags, attributes and text by slash-separated paths"
requires-python = ">=3.10"
dependencies = []
keywords = ["xml", "parser", "markup", "path", "hash table"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Markup :: XML",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rawxml = "rawxml.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rawxml"]

[tool.pytest.ini_options]
addopts = "-ra"
