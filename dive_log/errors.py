"""Errors surfaced through the form's error slot."""
from __future__ import annotations


class FormError(Exception):
    """Base class for recoverable form errors shown to the user."""


class PageValidationError(FormError):
    """Raised when leaving a page that still has empty fields."""

    MESSAGE = "Please fill out all fields on this page before proceeding."

    def __init__(self, page: int, empty_keys: tuple[str, ...] = ()) -> None:
        super().__init__(self.MESSAGE)
        self.page = page
        self.empty_keys = empty_keys


class GasParseError(FormError, ValueError):
    """A gas reading that is not a base-10 integer."""

    def __init__(self, value: str) -> None:
        super().__init__(f"invalid gas value {value!r}: expected a whole number")
        self.value = value
