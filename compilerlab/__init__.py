"""Compiler-construction tools: symbol table, bounded stack, lexer, FIRST sets and recursive-descent recognisers."""

__version__ = "0.1.0"
__all__ = ["symtab", "stack", "exprparser", "lexer", "first", "listparser"]