"""Configuration error taxonomy for select declarations."""

from __future__ import annotations


SELECT_KEY_MISSING = "SELECT_KEY_MISSING"
SELECT_OPTIONS_INVALID = "SELECT_OPTIONS_INVALID"
SELECT_DECLARATION_UNKNOWN_KEY = "SELECT_DECLARATION_UNKNOWN_KEY"
SELECT_DECLARATION_INVALID = "SELECT_DECLARATION_INVALID"


class SelectConfigurationError(ValueError):
    """Raised synchronously when a select declaration cannot be resolved.

    Carries a stable `code` so the HTTP layer can map it to a problem body.
    """

    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


__all__ = [
    "SELECT_KEY_MISSING",
    "SELECT_OPTIONS_INVALID",
    "SELECT_DECLARATION_UNKNOWN_KEY",
    "SELECT_DECLARATION_INVALID",
    "SelectConfigurationError",
]
