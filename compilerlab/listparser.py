"""Recursive-descent recogniser for nested lists: S -> a | ( L ), L -> S { , S }."""

from __future__ import annotations

import sys


class ListSyntaxError(ValueError):
    """Raised when the input is not a valid list."""

    def __init__(self, position: int) -> None:
        super().__init__(f"Error at position {position}")
        self.position = position


def parse_list(text: str) -> None:
    """Check that the whole of ``text`` is one S; raise ListSyntaxError if not."""
    pos = 0

    def match(expected: str) -> None:
        nonlocal pos
        if text[pos : pos + 1] != expected:
            raise ListSyntaxError(pos)
        pos += 1

    def element() -> None:
        if text[pos : pos + 1] == "(":
            match("(")
            element()
            while text[pos : pos + 1] == ",":
                match(",")
                element()
            match(")")
        else:
            match("a")

    element()
    if pos < len(text):
        raise ListSyntaxError(pos)


def main(argv: list[str] | None = None) -> int:
    """Read one word from standard input and report whether it parses."""
    print("Enter an input string : ", end="", flush=True)
    words = sys.stdin.read().split()
    try:
        parse_list(words[0] if words else "")
    except ListSyntaxError as err:
        print(err)
        return 1
    print("String is successfully parsed.")
    return 0


if __name__ == "__main__":
    sys.exit(main())