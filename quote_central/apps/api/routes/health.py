"""Health and readiness routes."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from quote_central import QUOTE_CENTRAL_VERSION

from ..dependencies import require_healthcheck_token

router = APIRouter()


@router.get("/")
def read_root() -> dict[str, str]:
    """Health/info endpoint with a short usage message."""
    return {"message": "Quote Central skill endpoint. POST request envelopes to /alexa."}


@router.get("/alive")
async def alive_check(_: None = Depends(require_healthcheck_token)) -> JSONResponse:
    """Authenticated health check endpoint for infrastructure monitors."""
    return JSONResponse(
        {
            "status": "ok",
            "message": "Quote Central is alive and healthy.",
            "version": QUOTE_CENTRAL_VERSION,
        }
    )


__all__ = ["router"]
