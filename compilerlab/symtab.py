"""A fixed-capacity symbol table of named integer variables."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator

DEFAULT_CAPACITY = 20
_EXISTS = "Variable name already exists. Please enter a different variable name: "


class SymbolTableError(Exception):
    """Base class for symbol table errors."""


class TableFullError(SymbolTableError):
    """The table has no room for another variable."""


class DuplicateNameError(SymbolTableError):
    """The variable name is already in the table."""


class InvalidNameError(SymbolTableError):
    """The variable name is empty or starts with a digit from 1 to 9."""


class UnknownNameError(SymbolTableError):
    """The variable name is not in the table."""


def validate_name(name: str) -> str:
    """Return ``name`` if it is a usable variable name, else raise InvalidNameError."""
    if not name or name[0] in "123456789":
        raise InvalidNameError(f"invalid variable name: {name!r}")
    return name


class SymbolTable:
    """Variables and their integer values, kept in insertion order."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = capacity
        self._values: dict[str, int] = {}

    def create(self, entries: Iterable[tuple[str, int]]) -> None:
        """Replace the whole table with ``entries``; on error the table is unchanged."""
        old, self._values = self._values, {}
        try:
            for name, value in entries:
                self.insert(name, value)
        except SymbolTableError:
            self._values = old
            raise

    def insert(self, name: str, value: int) -> None:
        if len(self._values) >= self.capacity:
            raise TableFullError("table is full")
        if validate_name(name) in self._values:
            raise DuplicateNameError(f"variable {name!r} already exists")
        self._values[name] = value

    def modify(self, name: str, value: int) -> None:
        self.search(name)
        self._values[name] = value

    def search(self, name: str) -> int:
        try:
            return self._values[name]
        except KeyError:
            raise UnknownNameError(f"variable {name!r} not found") from None

    def format_table(self) -> str:
        rows = "".join(f"{name}\t\t{value}\n" for name, value in self._values.items())
        return "\nVariable\tValue\n---------\t-----\n" + rows + "\n"

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[tuple[str, int]]:
        return iter(list(self._values.items()))


def _word(tokens: Iterator[str], prompt: str) -> str:
    print(prompt, end="", flush=True)
    token = next(tokens, None)
    if token is None:
        raise EOFError
    return token


def _number(tokens: Iterator[str], prompt: str) -> int:
    while True:
        try:
            return int(_word(tokens, prompt))
        except ValueError:
            pass


def _entry(tokens: Iterator[str]) -> tuple[str, int]:
    name = _word(tokens, "Enter variable name: ")
    value = _number(tokens, "Enter variable value: ")
    while True:
        try:
            return validate_name(name), value
        except InvalidNameError:
            name = _word(tokens, "Invalid variable name. Please enter a valid variable name: ")


def _run(table: SymbolTable, choice: int, tokens: Iterator[str]) -> None:
    if choice == 1:
        print(table.format_table(), end="")
    elif choice == 2:
        count = _number(tokens, "Enter the number of variables : ")
        if count > table.capacity:
            print("Table is full. Cannot insert more variables.")
            return
        entries: dict[str, int] = {}
        while len(entries) < count:
            name, value = _entry(tokens)
            if name in entries:
                print(_EXISTS)
            else:
                entries[name] = value
        table.create(entries.items())
        print("\nVariables created successfully.")
        print(table.format_table(), end="")
    elif choice == 3:
        if len(table) >= table.capacity:
            print("Table is full. Cannot insert more variables.")
            return
        try:
            table.insert(*_entry(tokens))
        except DuplicateNameError:
            print(_EXISTS)
            return
        print("Variable inserted successfully.")
        print(table.format_table(), end="")
    elif choice in (4, 5):
        action = "modify" if choice == 4 else "search"
        name = _word(tokens, f"Enter variable name to {action}: ")
        try:
            value = table.search(name)
        except UnknownNameError:
            print("Variable not found.")
            return
        if choice == 5:
            print(f"Variable {name} found with value {value}.")
            return
        table.modify(name, _number(tokens, f"Enter new value for {name}: "))
        print("Variable modified successfully.")
        print(table.format_table(), end="")
    else:
        print("Invalid choice. Please try again.")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive symbol table menu on standard input and output."""
    table = SymbolTable()
    tokens = (token for line in sys.stdin for token in line.split())
    try:
        while True:
            print("\n1. Display\n2. Create\n3. Insert\n4. Modify\n5. Search\n6. Exit")
            word = _word(tokens, "Enter your choice: ")
            choice = int(word) if word.lstrip("+-").isdigit() else 0
            if choice == 6:
                print("Exiting...")
                break
            _run(table, choice, tokens)
    except EOFError:
        print()
    print("Exiting the program.")
    return 0


if __name__ == "__main__":
    sys.exit(main())