[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "elfa"
version = "0.1.2"
description = "Command-line tool that displays information about ELF files"
requires-python = ">=3.10"
dependencies = []
keywords = ["cli", "elf", "analyzer", "binary", "executable"]
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
    "Topic :: Software Development :: Disassemblers",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
elfa = "elfa.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["elfa"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
