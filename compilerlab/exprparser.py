"""Recursive-descent recogniser for sums and products of operands.

Grammar::

    E  -> T E'
    E' -> + T E' | empty
    T  -> F T'
    T' -> * F T' | empty
    F  -> operand | ( E )

An operand is a single ASCII letter or digit; spaces and tabs are skipped.
"""

from __future__ import annotations

import sys


class ExpressionSyntaxError(ValueError):
    """Raised when the expression cannot be parsed."""

    def __init__(self, position: int) -> None:
        super().__init__(f"Syntax error at position {position}")
        self.position = position


class _Parser:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def peek(self) -> str:
        return self.text[self.pos : self.pos + 1]

    def skip_whitespace(self) -> None:
        while self.peek() in (" ", "\t"):
            self.pos += 1

    def expression(self) -> None:
        self.term()
        self.skip_whitespace()
        while self.peek() == "+":
            self.pos += 1
            self.term()
            self.skip_whitespace()

    def term(self) -> None:
        self.factor()
        self.skip_whitespace()
        while self.peek() == "*":
            self.pos += 1
            self.factor()
            self.skip_whitespace()

    def factor(self) -> None:
        self.skip_whitespace()
        ch = self.peek()
        if ch.isascii() and ch.isalnum():
            self.pos += 1
        elif ch == "(":
            self.pos += 1
            self.expression()
            self.skip_whitespace()
            if self.peek() != ")":
                raise ExpressionSyntaxError(self.pos)
            self.pos += 1
        else:
            raise ExpressionSyntaxError(self.pos)


def parse_expression(text: str) -> int:
    """Parse an expression at the start of ``text`` and return how many characters it used.

    Raises ExpressionSyntaxError where no valid expression can continue.
    """
    parser = _Parser(text)
    parser.expression()
    return parser.pos


def is_accepted(text: str) -> bool:
    """Return True if the whole of ``text`` is one valid expression."""
    try:
        return parse_expression(text) == len(text)
    except ExpressionSyntaxError:
        return False


def main(argv: list[str] | None = None) -> int:
    """Read one expression line from standard input and report whether it is accepted."""
    print("Enter an arithmetic expression (e.g., a+a*a): ", end="", flush=True)
    line = sys.stdin.readline().split("\n", 1)[0]
    try:
        used = parse_expression(line)
    except ExpressionSyntaxError as err:
        print(err)
        return 1
    print("\nAccepted..!!!" if used == len(line) else "\nRejected..!!!")
    return 0


if __name__ == "__main__":
    sys.exit(main())