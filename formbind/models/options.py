"""Option variants for selectable-list controls.

An option is declared either as a bare value or as a (label, value) pair.
Declarations are normalized once at the boundary into one of the two variants
below so downstream code never re-inspects shape.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class PlainOption:
    value: Any

    @property
    def label(self) -> Any:
        return self.value

    @property
    def raw_form(self) -> str:
        return "scalar"


@dataclass(frozen=True)
class LabeledOption:
    label: Any
    value: Any

    @property
    def raw_form(self) -> str:
        return "pair"


Option = Union[PlainOption, LabeledOption]


__all__ = ["PlainOption", "LabeledOption", "Option"]
