"""Skill request route: voice-platform envelope in, response envelope out."""

from __future__ import annotations

import json
import uuid
from typing import Annotated, Any, Optional

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status
from fastapi.responses import JSONResponse

from quote_central.core.exceptions import InvalidRequestEnvelopeError, SkillIdMismatchError
from quote_central.core.intents import RequestType
from quote_central.core.logging import correlation_id_context, get_logger
from quote_central.core.models import RequestEnvelope, SkillResponse
from quote_central.services.handlers import FALLBACK_TEXT, simple_response
from quote_central.services.intent_router import IntentHandlerNotFoundError
from quote_central.skill import Skill

from ..dependencies import get_skill

router = APIRouter()
logger = get_logger(__name__)

CORRELATION_HEADERS = ("X-Request-ID", "X-Correlation-ID")


async def _read_envelope(request: Request) -> RequestEnvelope:
    try:
        payload: Any = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Request body is not valid JSON"
        ) from exc
    try:
        return RequestEnvelope.from_payload(payload)
    except InvalidRequestEnvelopeError as exc:
        logger.warning("rejecting malformed request envelope", extra={"error": str(exc)})
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


def _unhandled_response(envelope: RequestEnvelope) -> SkillResponse:
    """Fallback speech for unknown intents; silent acknowledgement for other kinds."""
    if envelope.request_type == RequestType.INTENT.value:
        return simple_response(FALLBACK_TEXT, reprompt=FALLBACK_TEXT)
    return SkillResponse()


@router.post("/alexa")
async def handle_skill_request(
    request: Request,
    skill: Annotated[Skill, Depends(get_skill)],
    x_request_id: Annotated[Optional[str], Header(alias="X-Request-ID")] = None,
    x_correlation_id: Annotated[Optional[str], Header(alias="X-Correlation-ID")] = None,
) -> JSONResponse:
    """Dispatch a request envelope to the skill and return the response envelope.

    The correlation id comes from the caller's headers when present, otherwise
    from the platform ``requestId`` so HTTP and dispatch logs share one id.
    """
    envelope = await _read_envelope(request)
    correlation_id = (
        x_request_id or x_correlation_id or envelope.request.request_id or uuid.uuid4().hex
    )
    with correlation_id_context(correlation_id):
        logger.info(
            "skill request received",
            extra={
                "request_type": envelope.request_type,
                "intent": envelope.intent_name,
                "user_agent": request.headers.get("user-agent"),
            },
        )
        try:
            response = skill.handle(envelope)
        except SkillIdMismatchError as exc:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=str(exc),
                headers=dict.fromkeys(CORRELATION_HEADERS, correlation_id),
            ) from exc
        except IntentHandlerNotFoundError as exc:
            logger.warning("no handler matched request", extra={"error": str(exc)})
            response = _unhandled_response(envelope)
    return JSONResponse(
        response.to_envelope(), headers=dict.fromkeys(CORRELATION_HEADERS, correlation_id)
    )


__all__ = ["router"]
