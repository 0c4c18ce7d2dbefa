"""Errors raised by the binding registry.

All of these are setup-time faults. The registry raises them and never
catches them itself.
"""

from typing import Sequence


class BindingError(Exception):
    """Base class for every registry error."""


class InvalidPosition(BindingError, ValueError):
    def __init__(self, row: int, column: int) -> None:
        super().__init__(f"Row and column must be non-negative, got ({row}, {column})")
        self.row = row
        self.column = column


class UnknownControl(BindingError, KeyError):
    """Raised for a control name that is not part of the seeded layout."""

    def __init__(self, name: str, valid_names: Sequence[str]) -> None:
        self.name = name
        self.valid_names = tuple(valid_names)
        self.message = f"Invalid button name: {name}\nValid buttons are: {', '.join(self.valid_names)}"
        super().__init__(self.message)

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.message


class AlreadyBound(BindingError, RuntimeError):
    def __init__(self, name: str, existing_usage: str) -> None:
        super().__init__(f"Button '{name}' has already been bound. Existing usage: {existing_usage}")
        self.name = name
        self.existing_usage = existing_usage


class InvalidUsage(BindingError, ValueError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Button '{name}' needs a non-empty usage description")
        self.name = name
