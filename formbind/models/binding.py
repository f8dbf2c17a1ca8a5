"""Result types produced by the select binding resolver."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional

if TYPE_CHECKING:  # pragma: no cover - typing only
    from formbind.logic.error_binding import ErrorLookup


@dataclass(frozen=True)
class ModelMode:
    coerce_numeric: bool
    mode: str
    directive: str


@dataclass(frozen=True)
class OptionBinding:
    label: Any
    value: Any
    dom_id: str
    name: str
    disabled: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "label": self.label,
            "value": self.value,
            "id": self.dom_id,
            "name": self.name,
            "disabled": self.disabled,
        }


@dataclass(frozen=True)
class ErrorClassBinding:
    """Conditional class template bound to a live error flag.

    Holds the class name and the client-side reference to the error flag,
    never the flag's value. `evaluate` re-reads the lookup each time it is
    called, mirroring how the client runtime re-evaluates the template.
    """

    attr_key: str
    class_name: str
    flag_reference: str

    def render(self) -> str:
        return "{ '%s': %s }" % (self.class_name, self.flag_reference)

    def evaluate(self, lookup: "ErrorLookup") -> Dict[str, bool]:
        return {self.class_name: bool(lookup.has_error(self.attr_key))}


@dataclass(frozen=True)
class SelectBinding:
    attributes: Mapping[str, Any]
    options: List[OptionBinding]
    model_mode: ModelMode
    error_binding: ErrorClassBinding
    placeholder: Optional[str] = None
    label: Optional[str] = None
    label_for: Optional[str] = None
    html_attributes: Mapping[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "attributes": dict(self.attributes),
            "options": [o.to_dict() for o in self.options],
            "model_mode": {
                "mode": self.model_mode.mode,
                "directive": self.model_mode.directive,
                "coerce_numeric": self.model_mode.coerce_numeric,
            },
            "placeholder": self.placeholder,
            "label": self.label,
            "label_for": self.label_for,
            "html_attributes": dict(self.html_attributes),
        }


__all__ = ["ModelMode", "OptionBinding", "ErrorClassBinding", "SelectBinding"]
