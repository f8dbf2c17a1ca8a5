"""Declared configuration for a select control.

Provides simple constants containers instead of Enums to keep the values
JSON-friendly in rendered binding descriptors.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple

from formbind.logic.errors import SELECT_OPTIONS_INVALID, SelectConfigurationError
from formbind.models.options import Option


class ValueType:
    INTEGER = "Integer"


class ModelModeKind:
    # SINGLE_NUMERIC is the multi-qualified-numeric directive kind: one value bound through v-model.number
    SINGLE = "single"
    SINGLE_NUMERIC = "single-numeric"
    MULTI = "multi"


class ModelDirective:
    PLAIN = "v-model"
    NUMBER = "v-model.number"


# HTML attributes the rendering engine may pass straight through to <select>
HTML_PASSTHROUGH_ATTRIBUTES = (
    "autofocus",
    "disabled",
    "form",
    "multiple",
    "name",
    "required",
    "size",
)

# Global attributes accepted alongside the passthrough set
HTML_GLOBAL_ATTRIBUTES = ("id", "class")


def as_value_tuple(value: Any) -> Tuple[Any, ...]:
    """Return value as a tuple; a scalar (including a string) becomes one element."""
    if value is None:
        return ()
    if isinstance(value, (list, tuple, set, frozenset)):
        return tuple(value)
    return (value,)


@dataclass(frozen=True)
class SelectConfig:
    """Immutable configuration for one binding resolution.

    `options` holds normalized option variants; `attributes` are raw binding
    overrides applied on top of computed bindings.
    """

    attr_key: str
    options: Tuple[Option, ...] = ()
    multiple: bool = False
    disabled_values: Tuple[Any, ...] = ()
    init_value: Any = None
    placeholder: Optional[str] = None
    input_for: Optional[str] = None
    input_label: Optional[str] = None
    attributes: Mapping[str, Any] = field(default_factory=dict)
    html_attributes: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.options, (list, tuple)):
            raise SelectConfigurationError(
                SELECT_OPTIONS_INVALID,
                f"select '{self.attr_key}' options must be a list, got {type(self.options).__name__}",
            )
        object.__setattr__(self, "options", tuple(self.options))
        object.__setattr__(self, "disabled_values", as_value_tuple(self.disabled_values))
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes or {})))
        object.__setattr__(self, "html_attributes", MappingProxyType(dict(self.html_attributes or {})))

    @property
    def dom_id(self) -> Optional[str]:
        value = self.html_attributes.get("id")
        return str(value) if value else None


__all__ = [
    "ValueType",
    "ModelModeKind",
    "ModelDirective",
    "HTML_PASSTHROUGH_ATTRIBUTES",
    "HTML_GLOBAL_ATTRIBUTES",
    "as_value_tuple",
    "SelectConfig",
]
