[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wtf"
version = "1.2.0"
description = "Command-line helper with project context detection, caches, alias setup and interactive tar/find/ffmpeg command wizards"
requires-python = ">=3.10"
dependencies = []
keywords = ["cli", "shell", "commands", "wizard", "alias", "terminal", "cache"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
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
wtf = "wtf.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["wtf"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
