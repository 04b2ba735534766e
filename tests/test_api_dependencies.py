"""Unit tests for API dependency helpers."""
# pylint: disable=missing-function-docstring

import asyncio
from types import SimpleNamespace

import pytest
from fastapi import HTTPException

from quote_central.apps.api import dependencies
from quote_central.core.config import config as app_config
from quote_central.skill import build_skill


def test_require_healthcheck_token_disabled(monkeypatch):
    monkeypatch.setattr(app_config, "ENABLE_HEALTHCHECK_AUTH", False, raising=True)
    asyncio.run(dependencies.require_healthcheck_token())


def test_require_healthcheck_token_valid(monkeypatch):
    monkeypatch.setattr(app_config, "ENABLE_HEALTHCHECK_AUTH", True, raising=True)
    monkeypatch.setattr(app_config, "HEALTHCHECK_API_TOKEN", "health", raising=True)
    asyncio.run(
        dependencies.require_healthcheck_token(
            x_admin_token="health",
        )
    )


def test_require_healthcheck_token_invalid(monkeypatch):
    monkeypatch.setattr(app_config, "ENABLE_HEALTHCHECK_AUTH", True, raising=True)
    monkeypatch.setattr(app_config, "HEALTHCHECK_API_TOKEN", "health", raising=True)
    with pytest.raises(HTTPException) as excinfo:
        asyncio.run(dependencies.require_healthcheck_token(authorization="Bearer nope"))
    assert excinfo.value.detail == "Invalid credentials"


def test_require_healthcheck_token_unconfigured(monkeypatch):
    monkeypatch.setattr(app_config, "ENABLE_HEALTHCHECK_AUTH", True, raising=True)
    monkeypatch.setattr(app_config, "HEALTHCHECK_API_TOKEN", None, raising=True)
    with pytest.raises(HTTPException) as excinfo:
        asyncio.run(dependencies.require_healthcheck_token(authorization="Bearer x"))
    assert excinfo.value.detail == "Token not configured"


def test_require_healthcheck_token_missing(monkeypatch):
    monkeypatch.setattr(app_config, "ENABLE_HEALTHCHECK_AUTH", True, raising=True)
    monkeypatch.setattr(app_config, "HEALTHCHECK_API_TOKEN", "health", raising=True)
    with pytest.raises(HTTPException) as excinfo:
        asyncio.run(dependencies.require_healthcheck_token())
    assert excinfo.value.detail == "Missing credentials"


def _request_with_state(**state):
    return SimpleNamespace(app=SimpleNamespace(state=SimpleNamespace(**state)))


def test_get_skill_returns_bound_skill():
    skill = build_skill()
    request = _request_with_state(skill=skill)
    assert dependencies.get_skill(request) is skill  # type: ignore[arg-type]


def test_get_skill_missing_raises():
    with pytest.raises(HTTPException) as excinfo:
        dependencies.get_skill(_request_with_state())  # type: ignore[arg-type]
    assert excinfo.value.status_code == 500
