"""Option normalization for select controls.

Turns each declared option into an explicit variant exactly once. A
two-element list or tuple is read as (label, value); anything else is a bare
value serving as both label and value.
"""

from __future__ import annotations

from typing import Any, Iterable, List

from formbind.models.options import LabeledOption, Option, PlainOption


def normalize_option(raw: Any) -> Option:
    """Return the option variant for a single declared entry."""
    if isinstance(raw, (PlainOption, LabeledOption)):
        return raw
    if isinstance(raw, (list, tuple)) and len(raw) == 2:
        return LabeledOption(label=raw[0], value=raw[1])
    return PlainOption(value=raw)


def normalize_options(raw_options: Iterable[Any] | None) -> List[Option]:
    """Normalize a declared option list; None yields an empty list."""
    if raw_options is None:
        return []
    return [normalize_option(item) for item in raw_options]


def option_value(option: Option) -> Any:
    return option.value


def option_label(option: Option) -> Any:
    return option.label


def same_value(left: Any, right: Any) -> bool:
    # True == 1 in Python; a bool only matches another bool
    return isinstance(left, bool) == isinstance(right, bool) and left == right


def is_option_disabled(option: Option, disabled_values: Iterable[Any] | None) -> bool:
    """Return True when the option's value is listed in disabled_values.

    An empty or absent collection never matches.
    """
    if not disabled_values:
        return False
    return any(same_value(option.value, v) for v in disabled_values)


def unmatched_disabled_values(options: Iterable[Option], disabled_values: Iterable[Any] | None) -> List[Any]:
    """Return disabled values that match no option value."""
    if not disabled_values:
        return []
    values = [o.value for o in options]
    return [v for v in disabled_values if not any(same_value(v, value) for value in values)]


__all__ = [
    "normalize_option",
    "normalize_options",
    "option_value",
    "option_label",
    "same_value",
    "is_option_disabled",
    "unmatched_disabled_values",
]
