"""FastAPI application package init for formbind, the form binding service.

This package derives client-side reactive bindings for server-described form
controls. Binding logic lives in `formbind/logic/` and route handlers in
`formbind/routes/`.
"""

from __future__ import annotations

from formbind.main import create_app

__all__ = ["create_app"]
