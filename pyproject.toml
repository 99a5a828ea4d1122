[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "smarteditor"
version = "1.0.0"
description = "A small line-oriented console text editor with search, replace and syntax tokenizing"
requires-python = ">=3.10"
dependencies = []
keywords = ["editor", "text", "console", "tokenizer", "search-replace"]
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
    "Topic :: Text Editors",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
smart-editor = "smarteditor.editor:main"

[tool.hatch.build.targets.wheel]
packages = ["smarteditor"]

[tool.pytest.ini_options]
addopts = "-ra"
