"""APIRouter registration for the form binding service."""

from __future__ import annotations

from fastapi import APIRouter

from formbind.routes.controls import router as controls_router

api_router = APIRouter()
api_router.include_router(controls_router, tags=["Controls", "Bindings"])

__all__ = ["api_router"]
