[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pathtool"
version = "0.3.0"
description = "Edit, filter, analyze and print Unix PATH-like strings"
requires-python = ">=3.10"
dependencies = []
keywords = ["path", "environment", "shell", "PATH", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
path-tool = "pathtool.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pathtool"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
