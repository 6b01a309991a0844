"""Argument errors raised by the core string and path utilities."""

from __future__ import annotations


class ArgumentError(Exception):
    """Base class for invalid arguments passed to core utilities."""


class NullInputError(ArgumentError, TypeError):
    """A required string argument was None."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"{name} must not be None")


class InvalidArgumentError(ArgumentError, ValueError):
    """An argument violates a precondition (negative length, empty needle)."""


def require(value: object, name: str) -> None:
    """Raise NullInputError if value is None.

    Args:
        value: Argument value to check.
        name: Parameter name used in the error message.

    Raises:
        NullInputError: If value is None.
    """
    if value is None:
        raise NullInputError(name)
