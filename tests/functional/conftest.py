from __future__ import annotations

"""Functional test bootstrap for formbind.

Clears FORMBIND_* environment overrides so configuration tests start from
defaults, and provides an in-memory error lookup plus a TestClient bound to
an application built with default configuration.
"""

import os

import pytest

from formbind.config import AppConfig
from formbind.logic.error_binding import FormErrorLookup


@pytest.fixture(autouse=True)
def _clear_formbind_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in list(os.environ):
        if name.startswith("FORMBIND_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def error_lookup() -> FormErrorLookup:
    return FormErrorLookup()


@pytest.fixture
def client():
    from fastapi.testclient import TestClient
    from formbind.main import create_app

    with TestClient(create_app(AppConfig())) as c:
        yield c
