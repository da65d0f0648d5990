"""FIRST sets of grammar symbols.

Productions are written ``A=body``: a single upper-case letter on the left,
any symbols on the right, and ``$`` for the empty string.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

EPSILON = "$"


@dataclass(frozen=True)
class Production:
    """One grammar rule ``head -> body``."""

    head: str
    body: str

    def __str__(self) -> str:
        return f"{self.head}={self.body}"


def parse_production(text: str) -> Production:
    """Parse a rule written as ``A=body``."""
    if len(text) < 2 or text[1] != "=":
        raise ValueError(f"malformed production: {text!r}")
    return Production(text[0], text[2:])


def first_set(productions: Sequence[Production], symbol: str) -> list[str]:
    """Return FIRST(``symbol``) in the order its members were found.

    Raises ValueError when the grammar is left-recursive for ``symbol``.
    """
    result: list[str] = []
    active: set[str] = set()

    def add(item: str) -> None:
        if item not in result:
            result.append(item)

    def visit(current: str) -> None:
        if not "A" <= current <= "Z":
            add(current)
            return
        if current in active:
            raise ValueError(f"grammar is left-recursive in {current}")
        active.add(current)
        for body in (p.body for p in productions if p.head == current):
            if body.startswith(EPSILON):
                add(EPSILON)
                continue
            for index, sym in enumerate(body):
                before = len(result)
                visit(sym)
                if EPSILON not in result or len(result) == before or result[-1] != EPSILON:
                    break
                result.pop()
                if index + 1 == len(body) and EPSILON not in result:
                    result.append(EPSILON)
        active.discard(current)

    visit(symbol)
    return result


def _word(tokens: Iterator[str], prompt: str = "") -> str:
    print(prompt, end="", flush=True)
    token = next(tokens, None)
    if token is None:
        raise EOFError
    return token


def _number(tokens: Iterator[str], prompt: str) -> int | None:
    try:
        return int(_word(tokens, prompt))
    except ValueError:
        return None


def main(argv: list[str] | None = None) -> int:
    """Read productions from standard input and answer FIRST queries."""
    tokens = (token for line in sys.stdin for token in line.split())
    try:
        count = _number(tokens, "How many productions? : ") or 0
        print(f"Enter {count} productions (e.g. E=E+T, use $ for epsilon):")
        try:
            productions = [parse_production(_word(tokens)) for _ in range(count)]
        except ValueError as err:
            print(err)
            return 1
        while True:
            symbol = _word(tokens, "\nEnter non-terminal to find FIRST: ")[0]
            try:
                members = first_set(productions, symbol)
                print(f"FIRST({symbol}) = {{ " + "".join(f"{m} " for m in members) + "}")
            except ValueError as err:
                print(f"FIRST({symbol}) cannot be computed: {err}")
            if _number(tokens, "Press 1 to continue, any other key to exit: ") != 1:
                break
    except EOFError:
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())