"""Central error mapping for select declaration errors.

Single source of truth for mapping configuration error codes to
problem+json titles and HTTP statuses. Route and handler modules must import
from here instead of hardcoding strings or numbers.
"""

from __future__ import annotations

from formbind.logic.errors import (
    SELECT_DECLARATION_INVALID,
    SELECT_DECLARATION_UNKNOWN_KEY,
    SELECT_KEY_MISSING,
    SELECT_OPTIONS_INVALID,
)

CONFIGURATION_ERROR_MAP = {
    SELECT_KEY_MISSING: {"title": "Invalid Select Declaration", "status": 422},
    SELECT_OPTIONS_INVALID: {"title": "Invalid Select Declaration", "status": 422},
    SELECT_DECLARATION_UNKNOWN_KEY: {"title": "Invalid Select Declaration", "status": 422},
    SELECT_DECLARATION_INVALID: {"title": "Invalid Select Declaration", "status": 422},
}

# Fallback for codes raised without an explicit mapping
DEFAULT_CONFIGURATION_ERROR = {"title": "Invalid Select Declaration", "status": 422}

__all__ = ["CONFIGURATION_ERROR_MAP", "DEFAULT_CONFIGURATION_ERROR"]
