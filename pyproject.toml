[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "textdsa"
version = "0.1.0"
description = "Small data-structure toolkit: an E++ expression compiler, word-count dictionaries, substring search, a Porter stemmer, a trie and a min-heap"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "avl-tree",
    "symbol-table",
    "compiler",
    "word-count",
    "substring-search",
    "porter-stemmer",
    "trie",
    "heap",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Software Development :: Compilers",
    "Topic :: Text Processing :: Indexing",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
epp = "textdsa.compiler:main"

[tool.hatch.build.targets.wheel]
packages = ["textdsa"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
