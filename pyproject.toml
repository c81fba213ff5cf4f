[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scopetab"
version = "0.1.0"
description = "A nested-scope symbol table driven by a small command language"
requires-python = ">=3.10"
dependencies = []
keywords = ["symbol table", "scope", "hash table", "compiler"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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
scopetab = "scopetab.compiler:main"

[tool.hatch.build.targets.wheel]
packages = ["scopetab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
