"""Intent handlers: launch, help, cancel/stop, quote, session-ended, and fallback."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Callable, Optional, Sequence

from quote_central.core.config import config
from quote_central.core.intents import IntentName, RequestType
from quote_central.core.logging import get_logger
from quote_central.core.models import Card, RequestEnvelope, SkillResponse
from quote_central.services.quotes import QUOTE_TABLE, select_quote

logger = get_logger(__name__)

Predicate = Callable[[RequestEnvelope], bool]

WELCOME_TEXT = (
    "Welcome to the Quote Central Skill! You can say, quote teller, tell me a quote, "
    "or give me quote."
)
HELP_TEXT = "You can say quote teller, tell me a quote or, quote teller, get me a quote!"
GOODBYE_TEXT = "Thank you for trying the quote central skill, GoodBye."
FALLBACK_TEXT = "Sorry, I don't know that. You can say try saying help!"
QUOTE_PREFIX = "Here's your quote."


def is_request_type(kind: RequestType | str) -> Predicate:
    """Predicate matching requests of the given kind."""
    expected = kind.value if isinstance(kind, RequestType) else kind

    def _matches(request: RequestEnvelope) -> bool:
        return request.request_type == expected

    return _matches


def is_intent_name(name: IntentName | str) -> Predicate:
    """Predicate matching intent requests carrying ``name``."""
    expected = name.value if isinstance(name, IntentName) else name

    def _matches(request: RequestEnvelope) -> bool:
        return (
            request.request_type == RequestType.INTENT.value
            and request.intent_name == expected
        )

    return _matches


def any_of(*predicates: Predicate) -> Predicate:
    """Logical OR over predicates."""

    def _matches(request: RequestEnvelope) -> bool:
        return any(predicate(request) for predicate in predicates)

    return _matches


def simple_response(
    speech: str, *, reprompt: Optional[str] = None, title: Optional[str] = None
) -> SkillResponse:
    """Speech with a matching card titled after the skill."""
    return SkillResponse(
        speech=speech,
        card=Card(title=title or config.CARD_TITLE, content=speech),
        reprompt=reprompt,
    )


class IntentHandler(ABC):
    """A predicate deciding when the handler applies plus a response builder."""

    predicate: Predicate

    @property
    def name(self) -> str:
        """Handler name used in logs."""
        return type(self).__name__

    def matches(self, request: RequestEnvelope) -> bool:
        """Whether this handler applies to ``request``."""
        return self.predicate(request)

    @abstractmethod
    def respond(self, request: RequestEnvelope) -> SkillResponse:
        """Build the response for a matching ``request``."""


class LaunchRequestHandler(IntentHandler):
    """Fires when the skill is opened without a specific intent."""

    predicate = staticmethod(is_request_type(RequestType.LAUNCH))

    def respond(self, request: RequestEnvelope) -> SkillResponse:
        return simple_response(WELCOME_TEXT, reprompt=WELCOME_TEXT)


class HelpIntentHandler(IntentHandler):
    """Explains how to ask for a quote and keeps the session open."""

    predicate = staticmethod(is_intent_name(IntentName.HELP))

    def respond(self, request: RequestEnvelope) -> SkillResponse:
        return simple_response(HELP_TEXT, reprompt=HELP_TEXT)


class CancelAndStopIntentHandler(IntentHandler):
    """Says goodbye on either the stop or the cancel intent."""

    predicate = staticmethod(
        any_of(is_intent_name(IntentName.STOP), is_intent_name(IntentName.CANCEL))
    )

    def respond(self, request: RequestEnvelope) -> SkillResponse:
        return simple_response(GOODBYE_TEXT)


class QuoteCentralIntentHandler(IntentHandler):
    """Answers with one randomly chosen quote."""

    predicate = staticmethod(is_intent_name(IntentName.QUOTE_CENTRAL))

    def __init__(
        self, table: Sequence[str] = QUOTE_TABLE, rng: Optional[random.Random] = None
    ) -> None:
        self._table = table
        self._rng = rng

    def respond(self, request: RequestEnvelope) -> SkillResponse:
        quote = select_quote(self._table, rng=self._rng)
        logger.debug("selected quote", extra={"quote_index": self._table.index(quote)})
        return simple_response(f"{QUOTE_PREFIX}{quote}")


class SessionEndedRequestHandler(IntentHandler):
    """Acknowledges session termination; the platform forbids speech here."""

    predicate = staticmethod(is_request_type(RequestType.SESSION_ENDED))

    def respond(self, request: RequestEnvelope) -> SkillResponse:
        logger.info("session ended", extra={"reason": request.request.reason or "-"})
        return SkillResponse()


class FallbackIntentHandler(IntentHandler):
    """Handles utterances the language model could not map to any skill intent."""

    predicate = staticmethod(is_intent_name(IntentName.FALLBACK))

    def respond(self, request: RequestEnvelope) -> SkillResponse:
        return simple_response(FALLBACK_TEXT, reprompt=FALLBACK_TEXT)


def default_handlers(rng: Optional[random.Random] = None) -> list[IntentHandler]:
    """Handlers in registration order; the first matching predicate wins."""
    return [
        CancelAndStopIntentHandler(),
        QuoteCentralIntentHandler(rng=rng),
        HelpIntentHandler(),
        LaunchRequestHandler(),
        SessionEndedRequestHandler(),
        FallbackIntentHandler(),
    ]


__all__ = [
    "Predicate",
    "IntentHandler",
    "LaunchRequestHandler",
    "HelpIntentHandler",
    "CancelAndStopIntentHandler",
    "QuoteCentralIntentHandler",
    "SessionEndedRequestHandler",
    "FallbackIntentHandler",
    "default_handlers",
    "is_request_type",
    "is_intent_name",
    "any_of",
    "simple_response",
    "WELCOME_TEXT",
    "HELP_TEXT",
    "GOODBYE_TEXT",
    "FALLBACK_TEXT",
    "QUOTE_PREFIX",
]
