[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "c3lsp"
version = "0.1.0"
description = "Building blocks for a C3 language server: keywords, symbol trie, completion helpers, compiler diagnostics parsing and type sizes."
requires-python = ">=3.10"
dependencies = []
keywords = ["c3", "lsp", "language-server", "completion", "diagnostics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["c3lsp"]

[tool.pytest.ini_options]
addopts = "-ra"
