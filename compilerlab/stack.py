"""A bounded integer stack with an interactive menu."""

from __future__ import annotations

import sys
from collections.abc import Iterator

DEFAULT_CAPACITY = 20


class StackOverflowError(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(Exception):
    """Raised when popping from an empty stack."""


class BoundedStack:
    """A last-in, first-out stack holding at most ``capacity`` values."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = capacity
        self._items: list[int] = []

    def push(self, value: int) -> None:
        if len(self._items) >= self.capacity:
            raise StackOverflowError("stack overflow")
        self._items.append(value)

    def pop(self) -> int:
        if not self._items:
            raise StackUnderflowError("stack underflow")
        return self._items.pop()

    def format(self) -> str:
        """Render the stack from top to bottom."""
        if not self._items:
            return "\nStack is empty.\n\n"
        return "\nStack elements are:\n" + "".join(f"{value} " for value in self) + "\n"

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        """Iterate from the top of the stack to the bottom."""
        return reversed(list(self._items))


def _number(tokens: Iterator[str], prompt: str) -> int | None:
    print(prompt, end="", flush=True)
    token = next(tokens, None)
    if token is None:
        raise EOFError
    try:
        return int(token)
    except ValueError:
        return None


def main(argv: list[str] | None = None) -> int:
    """Run the interactive stack menu on standard input and output."""
    stack = BoundedStack()
    tokens = (token for line in sys.stdin for token in line.split())
    menu = "\n------- Stack Menu -------\n\n1. Push\n2. Pop\n3. Display\n4. Exit\nEnter your choice: "
    try:
        while (choice := _number(tokens, menu)) != 4:
            if choice == 1:
                if len(stack) >= stack.capacity:
                    print("\nStack overflow! Cannot push more elements.")
                    continue
                value = None
                while value is None:
                    value = _number(tokens, "\nEnter the value to push: ")
                stack.push(value)
                print(f"\n{value} pushed onto stack.")
            elif choice == 2:
                try:
                    print(f"\n{stack.pop()} popped from stack.")
                except StackUnderflowError:
                    print("\nStack underflow! Cannot pop from an empty stack.")
            elif choice == 3:
                print(stack.format(), end="")
            else:
                print("\nInvalid choice! Please try again.")
        print("\nExiting...")
    except EOFError:
        print()
    print("\nProgram terminated.")
    return 0


if __name__ == "__main__":
    sys.exit(main())