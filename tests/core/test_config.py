"""Tests for environment-driven settings."""

from __future__ import annotations

from pathlib import Path

from quote_central.core.config import DEFAULT_QUOTE_AUDIO_URL, DEFAULT_SKILL_ID, Settings


def test_defaults(monkeypatch) -> None:
    """Unset variables fall back to the registered skill's values."""
    for name in ("SKILL_ID", "VERIFY_SKILL_ID", "CARD_TITLE", "QUOTE_AUDIO_URL"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)  # type: ignore[call-arg]

    assert settings.SKILL_ID == DEFAULT_SKILL_ID
    assert settings.VERIFY_SKILL_ID is True
    assert settings.CARD_TITLE == "QuoteCentral"
    assert settings.QUOTE_AUDIO_URL == DEFAULT_QUOTE_AUDIO_URL


def test_environment_overrides(monkeypatch, tmp_path: Path) -> None:
    """Environment variables are parsed into typed fields."""
    monkeypatch.setenv("SKILL_ID", "amzn1.ask.skill.custom")
    monkeypatch.setenv("VERIFY_SKILL_ID", "false")
    monkeypatch.setenv("QUOTE_CENTRAL_LOG_DIR", str(tmp_path))

    settings = Settings(_env_file=None)  # type: ignore[call-arg]

    assert settings.SKILL_ID == "amzn1.ask.skill.custom"
    assert settings.VERIFY_SKILL_ID is False
    assert settings.QUOTE_CENTRAL_LOG_DIR == tmp_path


def test_healthcheck_auth_toggle(monkeypatch) -> None:
    """The health check auth switch is read from its own variable."""
    monkeypatch.setenv("ENABLE_HEALTHCHECK_AUTH", "false")

    settings = Settings(_env_file=None)  # type: ignore[call-arg]

    assert settings.ENABLE_HEALTHCHECK_AUTH is False
    assert "ENABLE_ADMIN_AUTH" not in Settings.model_fields
    assert "DATA_DIR" not in Settings.model_fields
