[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "novalang"
version = "0.1.0"
description = "A small compiler for the Nova toy language that emits x86-64 assembly"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "toy-language", "lexer", "parser", "assembly", "x86-64"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
nova = "novalang.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["novalang"]

[tool.pytest.ini_options]
addopts = "-ra"
