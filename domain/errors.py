"""
Domain: validation errors.

Two kinds only:
- NullArgumentError: a required argument was None (programmer error).
- InvalidArgumentError: a value was supplied but is not acceptable.

NullArgumentError is an InvalidArgumentError, so callers guarding a Place
constructor with a single `except InvalidArgumentError` see both.
"""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Raised when an argument value is outside what the domain accepts."""
    pass


class NullArgumentError(InvalidArgumentError):
    """Raised when a required argument is None."""

    def __init__(self, name: str) -> None:
        super().__init__(f"{name} must not be None")
        self.name = name


def require_not_none(name: str, value: object) -> None:
    if value is None:
        raise NullArgumentError(name)
