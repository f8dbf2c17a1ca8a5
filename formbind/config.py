"""Configuration utilities for formbind.

This module loads application configuration with the following rules:
- Primary source: `formbind_config.json` at the project root.
- Overrides: environment variables, then optional text files under `config/`.
- Validation: Pydantic models enforce required fields and value constraints.
"""

from __future__ import annotations

import json
import logging
import os
import re
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError as PydanticValidationError, field_validator

from formbind.logic.binding_keys import DEFAULT_CHANGE_HANDLER, DEFAULT_MODEL_STORE
from formbind.logic.error_binding import DEFAULT_ERROR_CLASS, DEFAULT_ERRORS_REF


CONFIG_DIR = Path("config")
ROOT_CONFIG = Path("formbind_config.json")
logger = logging.getLogger(__name__)

_JS_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")
_CSS_CLASS = re.compile(r"^-?[_a-zA-Z]+[_a-zA-Z0-9-]*$")


def _read_config_file(rel_path: str) -> Optional[str]:
    path = CONFIG_DIR / rel_path
    try:
        if path.exists():
            return path.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError) as e:
        # Recoverable: log and ignore unreadable override
        logger.warning("Failed to read override %s: %s", path, e)
        return None
    return None


def _env(key: str, default: Optional[str] = None) -> Optional[str]:
    return os.environ.get(key, default)


def _require_identifier(v: str, name: str) -> str:
    if not isinstance(v, str) or not _JS_IDENTIFIER.match(v):
        raise ValueError(f"{name} must be a client-side identifier, got {v!r}")
    return v


class ErrorDisplayConfig(BaseModel):
    input_class: str = Field(default=DEFAULT_ERROR_CLASS)
    errors_ref: str = Field(default=DEFAULT_ERRORS_REF)

    @field_validator("input_class")
    @classmethod
    def input_class_must_be_css_class(cls, v: str) -> str:
        if not isinstance(v, str) or not _CSS_CLASS.match(v):
            raise ValueError("errors.input_class must be a single CSS class name")
        return v

    @field_validator("errors_ref")
    @classmethod
    def errors_ref_must_be_identifier(cls, v: str) -> str:
        return _require_identifier(v, "errors.errors_ref")


class BindingConfig(BaseModel):
    change_handler: str = Field(default=DEFAULT_CHANGE_HANDLER)
    model_store: str = Field(default=DEFAULT_MODEL_STORE)

    @field_validator("change_handler", "model_store")
    @classmethod
    def must_be_identifier(cls, v: str) -> str:
        return _require_identifier(v, "binding handler/store")


class AppConfig(BaseModel):
    errors: ErrorDisplayConfig = Field(default_factory=ErrorDisplayConfig)
    binding: BindingConfig = Field(default_factory=BindingConfig)


def _read_json_file(path: Path) -> dict:
    try:
        if path.exists():
            return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.error("Failed to read JSON config %s: %s", path, e)
    return {}


def load_config() -> AppConfig:
    """Load configuration with validation.

    Precedence (highest first):
    1) Environment variables
    2) Text files in `config/` (optional)
    3) formbind_config.json at project root (primary base)
    4) Defaults matching the client runtime's conventions
    """

    base = _read_json_file(ROOT_CONFIG)

    def _base(path: str, default: Optional[str] = None) -> Optional[str]:
        cur: object = base
        for key in path.split("."):
            if not isinstance(cur, dict) or key not in cur:
                return default
            cur = cur[key]
        return str(cur) if cur is not None else default

    # Error display
    input_class = _env("FORMBIND_ERROR_CLASS") or _read_config_file("errors.input_class") or _base("errors.input_class", DEFAULT_ERROR_CLASS)
    errors_ref = _env("FORMBIND_ERRORS_REF") or _read_config_file("errors.errors_ref") or _base("errors.errors_ref", DEFAULT_ERRORS_REF)

    # Client binding names
    change_handler = _env("FORMBIND_CHANGE_HANDLER") or _read_config_file("binding.change_handler") or _base("binding.change_handler", DEFAULT_CHANGE_HANDLER)
    model_store = _env("FORMBIND_MODEL_STORE") or _read_config_file("binding.model_store") or _base("binding.model_store", DEFAULT_MODEL_STORE)

    try:
        cfg = AppConfig(
            errors=ErrorDisplayConfig(input_class=str(input_class).strip(), errors_ref=str(errors_ref).strip()),
            binding=BindingConfig(change_handler=str(change_handler).strip(), model_store=str(model_store).strip()),
        )
        return cfg
    except PydanticValidationError as e:
        logger.error("Invalid application configuration: %s", e)
        raise


__all__ = [
    "AppConfig",
    "ErrorDisplayConfig",
    "BindingConfig",
    "load_config",
]
