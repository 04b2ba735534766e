"""Shared FastAPI dependencies for the health token guard and skill access."""

import hmac
from typing import Annotated, Optional

from fastapi import Header, HTTPException, Request, status

from quote_central.core.config import config
from quote_central.skill import Skill


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def require_healthcheck_token(
    authorization: Annotated[Optional[str], Header(alias="Authorization")] = None,
    x_admin_token: Annotated[Optional[str], Header(alias="X-Admin-Token")] = None,
) -> None:
    """Guard the health check with ``HEALTHCHECK_API_TOKEN`` unless auth is disabled."""
    if not config.ENABLE_HEALTHCHECK_AUTH:
        return
    expected = config.HEALTHCHECK_API_TOKEN
    if not expected:
        raise _unauthorized("Token not configured")

    scheme, _, bearer = (authorization or "").partition(" ")
    provided = bearer.strip() if scheme.lower() == "bearer" else (x_admin_token or "").strip()
    if not provided:
        raise _unauthorized("Missing credentials")
    if not hmac.compare_digest(provided, expected):
        raise _unauthorized("Invalid credentials")


def get_skill(request: Request) -> Skill:
    """Resolve the skill bound to the running application."""
    skill = getattr(request.app.state, "skill", None)
    if not isinstance(skill, Skill):
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Skill not configured",
        )
    return skill


__all__ = ["get_skill", "require_healthcheck_token"]
