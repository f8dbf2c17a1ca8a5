"""Select declaration assembly.

Validates a raw select declaration against the declared required/optional
keys and folds aliases into a single immutable SelectConfig. HTML attributes
are filtered to the passthrough whitelist; anything else is dropped.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping
import logging

from formbind.logic.errors import (
    SELECT_DECLARATION_INVALID,
    SELECT_DECLARATION_UNKNOWN_KEY,
    SELECT_KEY_MISSING,
    SELECT_OPTIONS_INVALID,
    SelectConfigurationError,
)
from formbind.logic.option_normalizer import normalize_options
from formbind.models.select_config import (
    HTML_GLOBAL_ATTRIBUTES,
    HTML_PASSTHROUGH_ATTRIBUTES,
    SelectConfig,
)

logger = logging.getLogger(__name__)

REQUIRED_KEYS = ("key",)
OPTIONAL_KEYS = (
    "multiple",
    "init",
    "placeholder",
    "disabled_values",
    "for",
    "label",
    "options",
    "attributes",
    "html_attributes",
)
# Declared name -> internal name
KEY_ALIASES = {
    "for": "input_for",
    "label": "input_label",
    "options": "select_options",
}


def _canonical_keys(declaration: Mapping[str, Any]) -> Dict[str, Any]:
    """Fold both declared and internal alias spellings into declared names."""
    reverse = {v: k for k, v in KEY_ALIASES.items()}
    allowed = set(REQUIRED_KEYS) | set(OPTIONAL_KEYS)
    out: Dict[str, Any] = {}
    unknown = []
    for raw_key, value in declaration.items():
        name = reverse.get(str(raw_key), str(raw_key))
        if name not in allowed:
            unknown.append(str(raw_key))
            continue
        out[name] = value
    if unknown:
        raise SelectConfigurationError(
            SELECT_DECLARATION_UNKNOWN_KEY,
            f"unknown select declaration keys: {sorted(unknown)}",
        )
    return out


def filter_html_attributes(html_attributes: Mapping[str, Any] | None) -> Dict[str, Any]:
    if not html_attributes:
        return {}
    allowed = set(HTML_PASSTHROUGH_ATTRIBUTES) | set(HTML_GLOBAL_ATTRIBUTES)
    kept = {str(k): v for k, v in html_attributes.items() if str(k) in allowed}
    dropped = sorted(str(k) for k in html_attributes if str(k) not in allowed)
    if dropped:
        logger.info("select_html_attributes_dropped keys=%s", dropped)
    return kept


def build_select_config(declaration: Mapping[str, Any]) -> SelectConfig:
    """Build an immutable SelectConfig from a raw declaration mapping.

    Raises SelectConfigurationError for a missing key, absent or non-list
    options and unknown declaration keys. An empty option list is accepted.
    """
    if not isinstance(declaration, Mapping):
        raise SelectConfigurationError(SELECT_DECLARATION_INVALID, "select declaration must be a mapping")
    decl = _canonical_keys(declaration)

    key = decl.get("key")
    if not isinstance(key, str) or not key.strip():
        raise SelectConfigurationError(SELECT_KEY_MISSING, "select declaration requires a non-empty 'key'")

    raw_options = decl.get("options")
    if raw_options is None:
        raise SelectConfigurationError(SELECT_OPTIONS_INVALID, f"select '{key}' requires an 'options' list")
    if not isinstance(raw_options, (list, tuple)):
        raise SelectConfigurationError(
            SELECT_OPTIONS_INVALID,
            f"select '{key}' options must be a list, got {type(raw_options).__name__}",
        )

    attributes = decl.get("attributes") or {}
    if not isinstance(attributes, Mapping):
        raise SelectConfigurationError(SELECT_DECLARATION_INVALID, f"select '{key}' attributes must be a mapping")
    html_attributes = decl.get("html_attributes") or {}
    if not isinstance(html_attributes, Mapping):
        raise SelectConfigurationError(SELECT_DECLARATION_INVALID, f"select '{key}' html_attributes must be a mapping")

    return SelectConfig(
        attr_key=key,
        options=tuple(normalize_options(raw_options)),
        multiple=bool(decl.get("multiple") or False),
        disabled_values=decl.get("disabled_values"),
        init_value=decl.get("init"),
        placeholder=decl.get("placeholder"),
        input_for=decl.get("for"),
        input_label=decl.get("label"),
        attributes=attributes,
        html_attributes=filter_html_attributes(html_attributes),
    )


__all__ = [
    "REQUIRED_KEYS",
    "OPTIONAL_KEYS",
    "KEY_ALIASES",
    "filter_html_attributes",
    "build_select_config",
]
