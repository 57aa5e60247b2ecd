"""Error types raised by the menu collection."""

from __future__ import annotations


class MenuError(Exception):
    """Base error carrying the text shown to the user."""

    def __init__(self, reason: str, title: str, message: str) -> None:
        super().__init__(message)
        self.reason = reason
        self.title = title
        self.message = message


class ValidationError(MenuError, ValueError):
    """A blank required field, an unparsable price or an unknown course."""


class NotFoundError(MenuError, LookupError):
    """No menu item matched the requested name."""
