"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from quote_central import QUOTE_CENTRAL_VERSION
from quote_central.core.logging import get_logger
from quote_central.skill import Skill, build_skill

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log startup and shutdown of the skill endpoint."""
    skill = getattr(app.state, "skill", None)
    logger.info(
        "quote central skill ready",
        extra={
            "version": QUOTE_CENTRAL_VERSION,
            "handlers": [handler.name for handler in skill.router.handlers()] if skill else [],
        },
    )
    try:
        yield
    finally:
        logger.info("quote central skill shutting down")


def create_app(skill: Skill | None = None) -> FastAPI:
    """Build the FastAPI application with configured routers."""
    app = FastAPI(title="Quote Central", version=QUOTE_CENTRAL_VERSION, lifespan=lifespan)
    app.state.skill = skill if skill is not None else build_skill()

    # Import lazily to avoid potential circular imports when routers grow.
    from .routes import health, skill as skill_routes  # pylint: disable=import-outside-toplevel

    app.include_router(health.router)
    app.include_router(skill_routes.router)
    return app


__all__ = ["create_app", "lifespan"]
