"""Core data transfer objects shared across layers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from quote_central.core.exceptions import InvalidRequestEnvelopeError

RESPONSE_VERSION = "1.0"

_SSML_TAG = re.compile(r"<[^>]+>")
_WHITESPACE = re.compile(r"\s+")


class _EnvelopeModel(BaseModel):
    """Base for platform envelope models: camelCase aliases, unknown fields ignored."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)


class Application(_EnvelopeModel):
    """Identifies the skill a request was addressed to."""

    application_id: Optional[str] = Field(default=None, alias="applicationId")


class SystemState(_EnvelopeModel):
    """Subset of ``context.System`` the skill reads."""

    application: Optional[Application] = None


class RequestEnvelopeContext(_EnvelopeModel):
    """Device and system context carried with every request."""

    system: Optional[SystemState] = Field(default=None, alias="System")


class Session(_EnvelopeModel):
    """Platform-managed session metadata; never persisted by the skill."""

    session_id: Optional[str] = Field(default=None, alias="sessionId")
    new: bool = False
    application: Optional[Application] = None


class Slot(_EnvelopeModel):
    """Intent slot value."""

    name: str
    value: Optional[str] = None


class Intent(_EnvelopeModel):
    """Intent recognized by the platform's language-understanding layer."""

    name: str
    slots: dict[str, Slot] = Field(default_factory=dict)


class SkillRequest(_EnvelopeModel):
    """The ``request`` member of an envelope: kind plus intent details."""

    type: str
    request_id: Optional[str] = Field(default=None, alias="requestId")
    timestamp: Optional[str] = None
    locale: Optional[str] = None
    intent: Optional[Intent] = None
    reason: Optional[str] = None


class RequestEnvelope(_EnvelopeModel):
    """Full inbound request envelope as delivered by the voice platform."""

    version: str = "1.0"
    session: Optional[Session] = None
    context: Optional[RequestEnvelopeContext] = None
    request: SkillRequest

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "RequestEnvelope":
        """Validate a raw JSON payload, raising ``InvalidRequestEnvelopeError`` on failure."""
        if not isinstance(payload, Mapping):
            raise InvalidRequestEnvelopeError("request envelope must be a JSON object")
        try:
            return cls.model_validate(payload)
        except ValidationError as exc:
            raise InvalidRequestEnvelopeError(f"malformed request envelope: {exc}") from exc

    @property
    def request_type(self) -> str:
        """Kind of the wrapped request (e.g. ``LaunchRequest``)."""
        return self.request.type

    @property
    def intent_name(self) -> Optional[str]:
        """Intent name for intent requests, otherwise ``None``."""
        if self.request.intent is None:
            return None
        return self.request.intent.name

    @property
    def application_id(self) -> Optional[str]:
        """Application id from ``context.System`` falling back to the session."""
        system = self.context.system if self.context else None
        if system and system.application and system.application.application_id:
            return system.application.application_id
        if self.session and self.session.application:
            return self.session.application.application_id
        return None

    @property
    def session_id(self) -> Optional[str]:
        """Platform session id, when the request belongs to a session."""
        return self.session.session_id if self.session else None


def plain_text(ssml: str) -> str:
    """Strip speech markup tags and collapse whitespace for on-screen display."""
    return _WHITESPACE.sub(" ", _SSML_TAG.sub("", ssml)).strip()


@dataclass(frozen=True, slots=True)
class Card:
    """Simple visual card: a title/body pair for screen-enabled devices."""

    title: str
    content: str


@dataclass(frozen=True, slots=True)
class SkillResponse:
    """Outbound response built fresh for every request."""

    speech: str = ""
    card: Optional[Card] = None
    reprompt: Optional[str] = None

    @property
    def should_end_session(self) -> bool:
        """Sessions stay open only while a reprompt is pending."""
        return self.reprompt is None

    @property
    def is_empty(self) -> bool:
        """True for acknowledgement-only responses with nothing to say or show."""
        return not self.speech and self.card is None and self.reprompt is None

    def to_envelope(self) -> dict[str, Any]:
        """Serialize into the platform's JSON response envelope."""
        if self.is_empty:
            return {"version": RESPONSE_VERSION, "response": {}}

        body: dict[str, Any] = {}
        if self.speech:
            body["outputSpeech"] = _ssml_output(self.speech)
        if self.card is not None:
            body["card"] = {
                "type": "Simple",
                "title": self.card.title,
                "content": plain_text(self.card.content),
            }
        if self.reprompt is not None:
            body["reprompt"] = {"outputSpeech": _ssml_output(self.reprompt)}
        body["shouldEndSession"] = self.should_end_session
        return {"version": RESPONSE_VERSION, "response": body}


def _ssml_output(text: str) -> dict[str, str]:
    return {"type": "SSML", "ssml": f"<speak>{text}</speak>"}


__all__ = [
    "Application",
    "Session",
    "Slot",
    "Intent",
    "SkillRequest",
    "RequestEnvelope",
    "Card",
    "SkillResponse",
    "plain_text",
    "RESPONSE_VERSION",
]
