# compilerlab

Small compiler-construction tools, each usable as a library and as an
interactive command reading standard input.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Commands

| Command              | What it does |
|----------------------|--------------|
| `compilerlab-symtab` | Menu-driven symbol table of up to 20 integer variables: display, create, insert, modify, search |
| `compilerlab-stack`  | Menu-driven stack of up to 20 integers: push, pop, display |
| `compilerlab-expr`   | Reads one line and reports whether it is accepted by `E -> T E'`, `E' -> + T E' \| ε`, `T -> F T'`, `T' -> * F T' \| ε`, `F -> operand \| ( E )`, where an operand is one ASCII letter or digit and spaces and tabs are skipped |
| `compilerlab-lex`    | Reads a C-like program from standard input and reports keywords, identifiers, numbers and the line count |
| `compilerlab-first`  | Reads a number of productions such as `E=TA` (`$` for ε), then answers FIRST queries for symbols |
| `compilerlab-list`   | Reads one word and checks it against `S -> a \| ( L )`, `L -> S { , S }` |

`compilerlab-lex` writes its input to `test.txt`, the special characters it
found to `specialcharacters.txt`, and an empty `identifiers.txt`, all in the
current directory.

## Library use

```python
from compilerlab.symtab import SymbolTable
from compilerlab.stack import BoundedStack
from compilerlab.exprparser import is_accepted, parse_expression
from compilerlab.lexer import scan, classify_word
from compilerlab.first import parse_production, first_set
from compilerlab.listparser import parse_list

table = SymbolTable(capacity=20)
table.insert("x", 5)
table.modify("x", 7)
print(table.search("x"))          # 7
print(table.format_table())

stack = BoundedStack(capacity=20)
stack.push(1)
stack.push(2)
print(stack.pop())                # 2
print(list(stack))                # [1]  (top to bottom)

print(is_accepted("a+a*(b)"))     # True
print(parse_expression("a+b)"))   # 3  (characters used)

result = scan("int x = 10;\n")
print(result.words)               # (('int', WordKind.KEYWORD), ('x', WordKind.IDENTIFIER))
print(result.numbers)             # (10,)
print(result.special_characters)  # =;
print(result.line_count)          # 1

grammar = [parse_production(p) for p in ["E=TA", "A=+TA", "A=$", "T=i"]]
print(first_set(grammar, "A"))    # ['+', '$']

parse_list("(a,(a,a))")           # raises ListSyntaxError on bad input
```

## Errors

- `compilerlab.symtab`: `SymbolTableError` and its subclasses
  `TableFullError`, `DuplicateNameError`, `InvalidNameError` (a name that is
  empty or starts with a digit 1 to 9) and `UnknownNameError`.
  `SymbolTable.create` leaves the table unchanged when it fails.
- `compilerlab.stack`: `StackOverflowError` and `StackUnderflowError`.
- `compilerlab.exprparser`: `ExpressionSyntaxError`, with the failing
  `position`.
- `compilerlab.listparser`: `ListSyntaxError`, with the failing `position`.
- `compilerlab.first`: `ValueError` for a malformed production, and from
  `first_set` for a grammar that is left-recursive in the queried symbol.

## Limits

The symbol table and the stack live in memory only; nothing is saved between
runs. The expression and list recognisers only accept or reject their input:
they build no syntax tree and evaluate nothing. The lexer recognises only
decimal integers, words, and single special characters; it does not handle
comments, strings or multi-character operators.