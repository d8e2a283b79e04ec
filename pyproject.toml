[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tweetsearch"
version = "0.1.0"
description = "Word index over a CSV corpus of short texts, with AND/OR/NOT queries"
requires-python = ">=3.10"
dependencies = []
keywords = ["search", "index", "inverted-index", "avl", "tweets", "boolean-query"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Indexing",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
tweetsearch = "tweetsearch.search:main"

[tool.hatch.build.targets.wheel]
packages = ["tweetsearch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
