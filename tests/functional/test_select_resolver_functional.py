"""Functional tests for the select binding resolver.

Exercises the composed descriptor end to end: reference and change keys,
model directive, value type, option bindings, error template and the
override merge direction.
"""

from __future__ import annotations

import pytest

from formbind.config import BindingConfig
from formbind.logic.attribute_declaration import build_select_config
from formbind.logic.error_binding import FormErrorLookup
from formbind.logic.errors import SELECT_KEY_MISSING, SELECT_OPTIONS_INVALID, SelectConfigurationError
from formbind.logic.select_resolver import normalize_init_value, resolve_select_binding
from formbind.models.options import LabeledOption
from formbind.models.select_config import SelectConfig

LEVEL_OPTIONS = [("Red", 1), ("Green", 2)]


def _resolve(declaration: dict, lookup: FormErrorLookup | None = None):
    return resolve_select_binding(build_select_config(declaration), lookup or FormErrorLookup())


def test_string_options_single_select() -> None:
    binding = _resolve({"key": "color", "options": ["red", "green", "blue"]})
    attrs = binding.attributes
    assert binding.model_mode.mode == "single"
    assert binding.model_mode.coerce_numeric is False
    assert attrs["ref"] == "select.color"
    assert attrs["@change"] == "inputChanged(color)"
    assert attrs["v-model"] == "data['color']"
    assert "v-model.number" not in attrs
    assert attrs["value-type"] is None
    assert [o.label for o in binding.options] == ["red", "green", "blue"]
    assert [o.value for o in binding.options] == ["red", "green", "blue"]


def test_integer_pairs_request_numeric_coercion() -> None:
    binding = _resolve({"key": "level", "options": LEVEL_OPTIONS})
    attrs = binding.attributes
    assert binding.model_mode.coerce_numeric is True
    assert attrs["v-model.number"] == "data['level']"
    assert "v-model" not in attrs
    assert attrs["value-type"] == "Integer"
    assert attrs["ref"] == "select.level"


def test_integer_pairs_multiple_bind_raw_tokens() -> None:
    binding = _resolve({"key": "level", "options": LEVEL_OPTIONS, "multiple": True})
    attrs = binding.attributes
    assert attrs["ref"] == "select.multiple.level"
    assert binding.model_mode.coerce_numeric is False
    assert binding.model_mode.mode == "multi"
    assert attrs["v-model"] == "data['level']"
    assert "v-model.number" not in attrs


def test_disabled_values_mark_matching_options() -> None:
    binding = _resolve({"key": "level", "options": LEVEL_OPTIONS, "disabled_values": [2]})
    by_value = {o.value: o for o in binding.options}
    assert by_value[2].disabled is True
    assert by_value[1].disabled is False


def test_option_bindings_carry_ids_and_names() -> None:
    binding = _resolve({"key": "level", "options": LEVEL_OPTIONS})
    first = binding.options[0]
    assert first.label == "Red"
    assert first.dom_id == "level_1"
    assert first.name == "level_1"


def test_option_dom_ids_use_html_id_when_present() -> None:
    binding = _resolve({"key": "level", "options": LEVEL_OPTIONS, "html_attributes": {"id": "lvl"}})
    assert [o.dom_id for o in binding.options] == ["lvl_1", "lvl_2"]
    assert [o.name for o in binding.options] == ["level_1", "level_2"]


@pytest.mark.parametrize(
    "init, expected",
    [(None, []), (2, [2]), ("red", ["red"]), ([1, 2], [1, 2]), ((1,), [1])],
)
def test_init_value_is_normalized_to_list(init, expected) -> None:
    assert normalize_init_value(init) == expected
    binding = _resolve({"key": "level", "options": LEVEL_OPTIONS, "init": init})
    assert binding.attributes["init-value"] == expected


def test_caller_overrides_win_over_computed_bindings() -> None:
    binding = _resolve(
        {
            "key": "color",
            "options": ["red"],
            "attributes": {"ref": "custom.ref", "data-test": "color-select"},
        }
    )
    assert binding.attributes["ref"] == "custom.ref"
    assert binding.attributes["data-test"] == "color-select"
    assert binding.attributes["@change"] == "inputChanged(color)"


def test_error_template_references_live_flag_across_lookup_changes() -> None:
    lookup = FormErrorLookup()
    binding = _resolve({"key": "level", "options": LEVEL_OPTIONS}, lookup)
    template = binding.attributes["v-bind:class"]
    assert template == "{ 'error': parentFormErrors['level'] }"
    assert binding.error_binding.evaluate(lookup) == {"error": False}

    lookup.add_error("level", "is required")
    assert binding.error_binding.evaluate(lookup) == {"error": True}
    assert binding.attributes["v-bind:class"] == template


def test_resolution_is_deterministic() -> None:
    declaration = {"key": "level", "options": LEVEL_OPTIONS, "disabled_values": [1]}
    first = _resolve(declaration).to_dict()
    second = _resolve(declaration).to_dict()
    assert first == second


def test_empty_options_degrade_without_raising() -> None:
    binding = _resolve({"key": "color", "options": []})
    assert binding.options == []
    assert binding.attributes["value-type"] is None
    assert binding.attributes["v-model"] == "data['color']"


def test_label_placeholder_and_html_passthrough() -> None:
    binding = _resolve(
        {
            "key": "color",
            "options": ["red"],
            "placeholder": "Pick one",
            "label": "Color",
            "for": "color-select",
            "html_attributes": {"required": True, "onclick": "alert(1)"},
        }
    )
    assert binding.placeholder == "Pick one"
    assert binding.label == "Color"
    assert binding.label_for == "color-select"
    assert binding.html_attributes == {"required": True}
    assert "required" not in binding.attributes


def test_binding_config_renames_handler_and_store() -> None:
    config = build_select_config({"key": "color", "options": ["red"]})
    binding = resolve_select_binding(
        config,
        FormErrorLookup(),
        BindingConfig(change_handler="fieldChanged", model_store="formData"),
    )
    assert binding.attributes["@change"] == "fieldChanged(color)"
    assert binding.attributes["v-model"] == "formData['color']"


def test_resolver_accepts_prebuilt_config_with_raw_options() -> None:
    config = SelectConfig(attr_key="level", options=(("Low", 1), LabeledOption("High", 2)))
    binding = resolve_select_binding(config, FormErrorLookup())
    assert [o.label for o in binding.options] == ["Low", "High"]
    assert binding.model_mode.coerce_numeric is True


def test_missing_attr_key_fails_fast() -> None:
    with pytest.raises(SelectConfigurationError) as excinfo:
        resolve_select_binding(SelectConfig(attr_key=""), FormErrorLookup())
    assert excinfo.value.code == SELECT_KEY_MISSING


@pytest.mark.parametrize("options", ["red", None, {"red": 1}, 3])
def test_non_list_options_fail_fast(options) -> None:
    with pytest.raises(SelectConfigurationError) as excinfo:
        resolve_select_binding(SelectConfig(attr_key="color", options=options), FormErrorLookup())
    assert excinfo.value.code == SELECT_OPTIONS_INVALID


def test_prebuilt_config_wraps_scalar_disabled_values() -> None:
    by_string = resolve_select_binding(
        SelectConfig(attr_key="c", options=["a", "ab"], disabled_values="ab"), FormErrorLookup()
    )
    assert [o.disabled for o in by_string.options] == [False, True]

    by_int = resolve_select_binding(SelectConfig(attr_key="level", options=[1, 2], disabled_values=2), FormErrorLookup())
    assert [o.disabled for o in by_int.options] == [False, True]


def test_boolean_disabled_values_do_not_match_integers() -> None:
    binding = _resolve({"key": "flag", "options": [("No", 0), ("Yes", 1)], "disabled_values": [True]})
    assert [o.disabled for o in binding.options] == [False, False]


def test_missing_error_lookup_fails_fast() -> None:
    config = build_select_config({"key": "color", "options": ["red"]})
    with pytest.raises(TypeError):
        resolve_select_binding(config, None)  # type: ignore[arg-type]


def test_to_dict_is_json_ready() -> None:
    payload = _resolve({"key": "level", "options": LEVEL_OPTIONS, "disabled_values": [2]}).to_dict()
    assert payload["model_mode"] == {"mode": "single-numeric", "directive": "v-model.number", "coerce_numeric": True}
    assert payload["options"][1] == {"label": "Green", "value": 2, "id": "level_2", "name": "level_2", "disabled": True}
