"""Pydantic models for select binding request and response bodies."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class SelectBindingRequest(BaseModel):
    """Raw select declaration as posted by the rendering engine.

    Fields stay permissive so declaration rules (required key, option list
    shape, unknown keys) are enforced in one place by the attribute
    declaration logic and reported with stable codes.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    key: Optional[str] = None
    multiple: Optional[bool] = None
    init: Any = None
    placeholder: Optional[str] = None
    disabled_values: Optional[List[Any]] = None
    input_for: Optional[str] = Field(default=None, alias="for")
    label: Optional[str] = None
    options: Any = None
    attributes: Optional[Dict[str, Any]] = None
    html_attributes: Optional[Dict[str, Any]] = None


class OptionView(BaseModel):
    label: Any
    value: Any
    id: str
    name: str
    disabled: bool


class ModelModeView(BaseModel):
    mode: str
    directive: str
    coerce_numeric: bool


class SelectBindingView(BaseModel):
    attributes: Dict[str, Any]
    options: List[OptionView]
    model_mode: ModelModeView
    placeholder: Optional[str] = None
    label: Optional[str] = None
    label_for: Optional[str] = None
    html_attributes: Dict[str, Any] = Field(default_factory=dict)


__all__ = [
    "SelectBindingRequest",
    "OptionView",
    "ModelModeView",
    "SelectBindingView",
]
