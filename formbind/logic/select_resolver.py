"""Select binding resolver.

Composes option normalization, model-mode selection, key building and error
binding into one binding descriptor for a select control. Pure: no I/O and no
state kept between calls; the error lookup is only asked for its class name
and the live flag reference, never for the current flag value.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional
import logging

from formbind.config import BindingConfig
from formbind.logic.binding_keys import (
    change_event_key,
    model_target,
    option_dom_id,
    option_internal_name,
    reference_name,
)
from formbind.logic.error_binding import ErrorLookup, error_binding
from formbind.logic.errors import SELECT_KEY_MISSING, SelectConfigurationError
from formbind.logic.model_mode import infer_value_type, mode_for_value_type
from formbind.logic.option_normalizer import (
    is_option_disabled,
    normalize_options,
    unmatched_disabled_values,
)
from formbind.models.binding import OptionBinding, SelectBinding
from formbind.models.options import Option
from formbind.models.select_config import SelectConfig

logger = logging.getLogger(__name__)

ATTR_CHANGE = "@change"
ATTR_REF = "ref"
ATTR_INIT_VALUE = "init-value"
ATTR_ERROR_CLASS = "v-bind:class"
ATTR_VALUE_TYPE = "value-type"


def normalize_init_value(init_value: Any) -> List[Any]:
    """Return the initial value as a list; None becomes an empty list."""
    if init_value is None:
        return []
    if isinstance(init_value, (list, tuple)):
        return list(init_value)
    return [init_value]


def build_option_bindings(config: SelectConfig, options: List[Option]) -> List[OptionBinding]:
    return [
        OptionBinding(
            label=option.label,
            value=option.value,
            dom_id=option_dom_id(config.attr_key, option.value, config.dom_id),
            name=option_internal_name(config.attr_key, option.value),
            disabled=is_option_disabled(option, config.disabled_values),
        )
        for option in options
    ]


def resolve_select_binding(
    config: SelectConfig,
    error_lookup: ErrorLookup,
    binding_config: Optional[BindingConfig] = None,
) -> SelectBinding:
    """Resolve the binding descriptor for one select control.

    Computed bindings form the base; caller `attributes` overrides are applied
    on top and win on key collision. Raises SelectConfigurationError for a
    missing attribute key and TypeError when no error lookup is supplied.
    """
    if not isinstance(config.attr_key, str) or not config.attr_key.strip():
        raise SelectConfigurationError(SELECT_KEY_MISSING, "select binding requires a non-empty attribute key")
    if error_lookup is None:
        raise TypeError("error_lookup is required to resolve a select binding")
    binding_config = binding_config or BindingConfig()
    attr_key = config.attr_key

    options = normalize_options(config.options)
    value_type = infer_value_type(options)
    model_mode = mode_for_value_type(value_type, config.multiple)
    error_class = error_binding(attr_key, error_lookup)

    computed: Dict[str, Any] = {
        ATTR_CHANGE: change_event_key(attr_key, binding_config.change_handler),
        ATTR_REF: reference_name(attr_key, config.multiple),
        ATTR_INIT_VALUE: normalize_init_value(config.init_value),
        ATTR_ERROR_CLASS: error_class.render(),
        ATTR_VALUE_TYPE: value_type,
        model_mode.directive: model_target(attr_key, binding_config.model_store),
    }
    overridden = sorted(k for k in config.attributes if k in computed)
    if overridden:
        logger.info("select_binding_overrides key=%s overridden=%s", attr_key, overridden)
    attributes = {**computed, **dict(config.attributes)}

    unmatched = unmatched_disabled_values(options, config.disabled_values)
    if unmatched:
        logger.info("select_disabled_values_unmatched key=%s values=%s", attr_key, unmatched)

    binding = SelectBinding(
        attributes=attributes,
        options=build_option_bindings(config, options),
        model_mode=model_mode,
        error_binding=error_class,
        placeholder=config.placeholder,
        label=config.input_label,
        label_for=config.input_for,
        html_attributes=dict(config.html_attributes),
    )
    logger.info(
        "select_binding_resolved key=%s mode=%s value_type=%s options=%s",
        attr_key,
        model_mode.mode,
        value_type,
        len(options),
    )
    return binding


__all__ = [
    "ATTR_CHANGE",
    "ATTR_REF",
    "ATTR_INIT_VALUE",
    "ATTR_ERROR_CLASS",
    "ATTR_VALUE_TYPE",
    "normalize_init_value",
    "build_option_bindings",
    "resolve_select_binding",
]
