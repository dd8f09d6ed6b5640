[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "renfa"
version = "0.1.0"
description = "Compile patterns of literal characters into NFA-based state machines"
requires-python = ">=3.10"
dependencies = []
keywords = ["regex", "nfa", "automata", "state-machine", "compiler"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
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
renfa = "renfa.compiler:main"

[tool.setuptools.packages.find]
include = ["renfa", "renfa.*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
