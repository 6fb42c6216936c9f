[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pebbleshell"
version = "0.1.0"
description = "Building blocks of a small interactive shell: tokenizing, word expansion, environment handling, builtins, redirections and running programs."
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "tokenizer", "builtins", "environment", "redirection", "heredoc", "wildcards"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pebbleshell"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
