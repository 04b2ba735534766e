"""Tests for FastAPI app factory."""
# pylint: disable=missing-function-docstring

import asyncio

from fastapi.testclient import TestClient

from quote_central.apps.api.app import create_app, lifespan
from quote_central.skill import Skill, build_skill


def test_create_app_serves_routes(envelope_factory):
    app = create_app()
    client = TestClient(app)

    assert client.get("/").status_code == 200
    assert client.get("/alive").status_code != 404
    assert client.post("/alexa", json=envelope_factory("LaunchRequest")).status_code == 200
    assert isinstance(app.state.skill, Skill)


def test_create_app_uses_given_skill():
    skill = build_skill(verify_skill_id=False)
    app = create_app(skill)
    assert app.state.skill is skill


def test_lifespan_runs_cleanly():
    app = create_app()

    async def _exercise() -> None:
        async with lifespan(app):
            assert app.state.skill.router.handlers()

    asyncio.run(_exercise())
