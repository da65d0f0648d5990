[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "compilerlab"
version = "0.1.0"
description = "Small compiler-construction tools: symbol table, bounded stack, lexer, FIRST sets and recursive-descent recognisers"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "parser", "lexer", "first-set", "symbol-table", "recursive-descent"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Compilers",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
compilerlab-symtab = "compilerlab.symtab:main"
compilerlab-stack = "compilerlab.stack:main"
compilerlab-expr = "compilerlab.exprparser:main"
compilerlab-lex = "compilerlab.lexer:main"
compilerlab-first = "compilerlab.first:main"
compilerlab-list = "compilerlab.listparser:main"

[tool.hatch.build.targets.wheel]
packages = ["compilerlab"]

[tool.pytest.ini_options]
addopts = "-ra"
