"""Centralised construction of problem+json payloads for configuration errors.

Provides helpers that return dicts with SELECT_* codes to avoid embedding
string literals in route modules.
"""

from __future__ import annotations

from typing import Dict
import logging

from formbind.http.error_mapping import CONFIGURATION_ERROR_MAP, DEFAULT_CONFIGURATION_ERROR
from formbind.logic.errors import SelectConfigurationError


logger = logging.getLogger(__name__)


def problem_select_configuration(exc: SelectConfigurationError) -> Dict[str, object]:
    """Return a problem body describing a rejected select declaration."""
    mapping = CONFIGURATION_ERROR_MAP.get(exc.code, DEFAULT_CONFIGURATION_ERROR)
    problem = {
        "title": mapping["title"],
        "status": mapping["status"],
        "detail": exc.message,
        "message": exc.message,
        "code": exc.code,
    }
    logger.info("error_handler.handle", extra={"code": problem.get("code")})
    return problem


def problem_internal_error() -> Dict[str, object]:
    """Return a 500 problem for unexpected failures."""
    return {"title": "Internal Server Error", "status": 500}


__all__ = ["problem_select_configuration", "problem_internal_error"]
