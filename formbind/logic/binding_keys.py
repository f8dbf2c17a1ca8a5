"""Stable identifiers for select bindings.

All helpers are pure functions of their arguments so repeated renders of the
same control produce identical keys and listener attachment stays idempotent.
"""

from __future__ import annotations

from typing import Any, Optional

DEFAULT_CHANGE_HANDLER = "inputChanged"
DEFAULT_MODEL_STORE = "data"


def reference_name(attr_key: str, multiple: bool = False) -> str:
    """Return the handle name the render engine uses for the control instance."""
    return "select" + (".multiple" if multiple else "") + "." + attr_key


def change_event_key(attr_key: str, handler: str = DEFAULT_CHANGE_HANDLER) -> str:
    return f"{handler}({attr_key})"


def model_target(attr_key: str, store: str = DEFAULT_MODEL_STORE) -> str:
    """Return the reactive data expression the model directive binds to."""
    return f"{store}['{attr_key}']"


def option_dom_id(attr_key: str, value: Any, base_dom_id: Optional[str] = None) -> str:
    return f"{base_dom_id or attr_key}_{value}"


def option_internal_name(attr_key: str, value: Any) -> str:
    return f"{attr_key}_{value}"


__all__ = [
    "DEFAULT_CHANGE_HANDLER",
    "DEFAULT_MODEL_STORE",
    "reference_name",
    "change_event_key",
    "model_target",
    "option_dom_id",
    "option_internal_name",
]
