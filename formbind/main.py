from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError

from formbind.config import AppConfig, load_config
from formbind.http.problem import (
    handle_http_exception,
    handle_request_validation_error,
    handle_select_configuration_error,
    handle_unexpected_error,
)
from formbind.logging_setup import configure_logging
from formbind.logic.errors import SelectConfigurationError
from formbind.routes import api_router

logger = logging.getLogger(__name__)


def create_app(config: Optional[AppConfig] = None) -> FastAPI:
    """Build the FastAPI application.

    Loads configuration unless one is supplied, registers problem+json
    handlers and mounts the API routers under /api/v1.
    """
    configure_logging()
    cfg = config or load_config()
    app = FastAPI(title="formbind", version="0.1.0")
    app.state.config = cfg
    logger.info(
        "app_config error_class=%s errors_ref=%s change_handler=%s model_store=%s",
        cfg.errors.input_class,
        cfg.errors.errors_ref,
        cfg.binding.change_handler,
        cfg.binding.model_store,
    )

    app.add_exception_handler(HTTPException, handle_http_exception)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(SelectConfigurationError, handle_select_configuration_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    app.include_router(api_router, prefix="/api/v1")

    @app.get("/health")
    def health():  # pragma: no cover - trivial
        return {"status": "ok"}

    return app


# Intentionally do not instantiate the app at import time to prevent side effects.
