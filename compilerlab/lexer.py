"""A small lexical scanner for C-like source text."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

KEYWORDS = frozenset(
    {"for", "while", "do", "int", "float", "char", "double", "static", "switch", "case"}
)

_SPACE = " \t\n\v\f\r"

_LEXEME_PATTERN = re.compile(
    r"(?P<number>[0-9]+)|(?P<word>[A-Za-z_][A-Za-z0-9_]*)|(?P<other>.)",
    re.DOTALL,
)


class WordKind(Enum):
    """What a scanned word is."""

    KEYWORD = "keyword"
    IDENTIFIER = "identifier"

    def describe(self, word: str) -> str:
        article = "a" if self is WordKind.KEYWORD else "an"
        return f"{word} is {article} {self.value}"


@dataclass(frozen=True)
class ScanResult:
    """Everything a scan found, in order of appearance."""

    words: tuple[tuple[str, WordKind], ...]
    numbers: tuple[int, ...]
    special_characters: str
    line_count: int


def classify_word(word: str) -> WordKind:
    """Tell whether ``word`` is a keyword or an identifier."""
    return WordKind.KEYWORD if word in KEYWORDS else WordKind.IDENTIFIER


def scan(text: str) -> ScanResult:
    """Split ``text`` into words, decimal numbers and special characters, and count lines."""
    words: list[tuple[str, WordKind]] = []
    numbers: list[int] = []
    specials: list[str] = []
    lines = 0
    for match in _LEXEME_PATTERN.finditer(text):
        lexeme = match.group()
        if match.lastgroup == "other":
            if lexeme not in _SPACE:
                specials.append(lexeme)
            following = lexeme
        else:
            if match.lastgroup == "number":
                numbers.append(int(lexeme))
            else:
                words.append((lexeme, classify_word(lexeme)))
            # The character that ends a number or word is looked at as well,
            # so a newline right after one is counted here and again on its own.
            following = text[match.end() : match.end() + 1]
        if following == "\n":
            lines += 1
    return ScanResult(tuple(words), tuple(numbers), "".join(specials), lines)


def main(argv: list[str] | None = None) -> int:
    """Read a program from standard input, store it, scan it and report what was found.

    The input is saved to ``test.txt`` and the special characters to
    ``specialcharacters.txt`` in the current directory; ``identifiers.txt`` is
    created empty.
    """
    print("Enter a C program (Ctrl+D to end input):")
    source = Path("test.txt")
    try:
        source.write_text(sys.stdin.read(), newline="")
        text = source.read_text()
    except OSError:
        print("Error opening the file")
        return 1

    result = scan(text)
    try:
        Path("identifiers.txt").write_text("")
        Path("specialcharacters.txt").write_text(result.special_characters, newline="")
    except OSError:
        print("Error opening the files")
        return 1

    for word, kind in result.words:
        print(kind.describe(word))
    print("The numbers in the program are: " + "".join(f"{n} " for n in result.numbers))
    print(f"The program has {result.line_count} lines")
    return 0


if __name__ == "__main__":
    sys.exit(main())