"""Pytest configuration: ensure env vars and import path are set early.

This runs before any tests, so modules can import without local path hacks.
Also load .env before setting defaults so real values are used when present.
"""
from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path
from typing import Any, Callable, Optional

import pytest
from dotenv import load_dotenv

# Ensure repository root is on sys.path for local package imports
sys.path.append(str(Path(__file__).resolve().parents[1]))

load_dotenv(override=False)

TEST_SKILL_ID = "amzn1.ask.skill.test-0000"

os.environ.setdefault("SKILL_ID", TEST_SKILL_ID)
os.environ.setdefault("QUOTE_CENTRAL_LOG_DIR", tempfile.mkdtemp(prefix="quote-central-logs-"))
os.environ.setdefault("HEALTHCHECK_API_TOKEN", "health")

EnvelopeFactory = Callable[..., dict[str, Any]]


def build_envelope(
    request_type: str,
    intent: Optional[str] = None,
    *,
    skill_id: Optional[str] = None,
    request_id: str = "amzn1.echo-api.request.test",
    reason: Optional[str] = None,
) -> dict[str, Any]:
    """Return a minimal but realistic request envelope payload."""
    application = {"applicationId": skill_id or os.environ["SKILL_ID"]}
    request: dict[str, Any] = {
        "type": request_type,
        "requestId": request_id,
        "timestamp": "2024-01-01T00:00:00Z",
        "locale": "en-US",
    }
    if intent is not None:
        request["intent"] = {"name": intent, "confirmationStatus": "NONE", "slots": {}}
    if reason is not None:
        request["reason"] = reason
    return {
        "version": "1.0",
        "session": {
            "new": request_type == "LaunchRequest",
            "sessionId": "amzn1.echo-api.session.test",
            "application": application,
            "user": {"userId": "amzn1.ask.account.test"},
        },
        "context": {
            "System": {
                "application": application,
                "user": {"userId": "amzn1.ask.account.test"},
                "device": {"deviceId": "device", "supportedInterfaces": {}},
            }
        },
        "request": request,
    }


@pytest.fixture
def envelope_factory() -> EnvelopeFactory:
    """Factory for raw request envelope payloads."""
    return build_envelope
