"""Form control binding endpoints.

Handlers assemble the declaration into an immutable config and delegate
binding derivation to the select resolver. The response carries the error
class as a conditional template only; error state is never resolved here.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request

from formbind.config import AppConfig
from formbind.http.problem import PROBLEM_MEDIA_TYPE
from formbind.logic.attribute_declaration import build_select_config
from formbind.logic.error_binding import FormErrorLookup
from formbind.logic.select_resolver import resolve_select_binding
from formbind.models.select_types import SelectBindingRequest, SelectBindingView


logger = logging.getLogger(__name__)


router = APIRouter()

SCHEMA_SELECT_REQUEST = "schemas/SelectBindingRequest.schema.json"
SCHEMA_SELECT_BINDING = "schemas/SelectBinding.schema.json"


def _app_config(request: Request) -> AppConfig:
    cfg = getattr(request.app.state, "config", None)
    return cfg if isinstance(cfg, AppConfig) else AppConfig()


@router.post(
    "/controls/select/bindings",
    summary="Resolve select control bindings",
    description=f"accepts {SCHEMA_SELECT_REQUEST}; returns {SCHEMA_SELECT_BINDING}",
    response_model=SelectBindingView,
    responses={422: {"content": {PROBLEM_MEDIA_TYPE: {}}}},
)
def post_select_bindings(body: SelectBindingRequest, request: Request) -> SelectBindingView:
    """POST /controls/select/bindings.

    Builds the select config from the posted declaration and returns the
    resolved binding descriptor, per-option bindings and label metadata.
    """
    declaration = body.model_dump(by_alias=True, exclude_unset=True)
    logger.info("select_bindings:start keys=%s", sorted(declaration.keys()))
    config = build_select_config(declaration)
    app_cfg = _app_config(request)
    lookup = FormErrorLookup(
        error_class_name=app_cfg.errors.input_class,
        errors_ref=app_cfg.errors.errors_ref,
    )
    binding = resolve_select_binding(config, lookup, app_cfg.binding)
    return SelectBindingView.model_validate(binding.to_dict())


__all__ = ["router", "post_select_bindings"]
