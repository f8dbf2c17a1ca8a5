"""Value-type inference and model binding mode selection.

Only the first option's value is sampled. Numeric coercion is requested for
integral values on single selects; multi selects always bind an array of raw
tokens because the client's multi-value directive cannot coerce.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence
import logging

from formbind.models.binding import ModelMode
from formbind.models.options import Option
from formbind.models.select_config import ModelDirective, ModelModeKind, ValueType

logger = logging.getLogger(__name__)


def _is_integral(value: Any) -> bool:
    # bool subclasses int but is never a numeric option value
    return isinstance(value, int) and not isinstance(value, bool)


def infer_value_type(options: Sequence[Option]) -> Optional[str]:
    """Return the value-type tag of the first option, or None for no preference."""
    if not options:
        logger.info("select_value_type_degraded reason=empty_options")
        return None
    first = options[0].value
    if _is_integral(first):
        mixed = [o.value for o in options[1:] if not _is_integral(o.value)]
        if mixed:
            logger.warning("select_value_type_heterogeneous sampled=%r mixed_count=%s", first, len(mixed))
        return ValueType.INTEGER
    return None


def mode_for_value_type(value_type: Optional[str], multiple: bool) -> ModelMode:
    """Return the model mode for an already inferred value-type tag."""
    if multiple:
        return ModelMode(coerce_numeric=False, mode=ModelModeKind.MULTI, directive=ModelDirective.PLAIN)
    if value_type == ValueType.INTEGER:
        return ModelMode(coerce_numeric=True, mode=ModelModeKind.SINGLE_NUMERIC, directive=ModelDirective.NUMBER)
    return ModelMode(coerce_numeric=False, mode=ModelModeKind.SINGLE, directive=ModelDirective.PLAIN)


def select_model_mode(options: Sequence[Option], multiple: bool) -> ModelMode:
    if multiple:
        return mode_for_value_type(None, True)
    return mode_for_value_type(infer_value_type(options), False)


__all__ = ["infer_value_type", "mode_for_value_type", "select_model_mode"]
