"""Ordered intent router: first handler whose predicate matches wins."""

from __future__ import annotations

from typing import Iterable, Optional

from quote_central.core.logging import get_logger
from quote_central.core.models import RequestEnvelope, SkillResponse
from quote_central.services.handlers import IntentHandler

logger = get_logger(__name__)


class IntentRouterError(RuntimeError):
    """Base error for router failures."""


class IntentHandlerNotFoundError(IntentRouterError):
    """Raised when no registered handler matches the request."""

    def __init__(self, request: RequestEnvelope) -> None:
        super().__init__(
            f"No handler registered for request {request.request_type}"
            + (f" ({request.intent_name})" if request.intent_name else "")
        )
        self.request = request


class IntentRouter:
    """Dispatch requests to registered handlers in registration order."""

    def __init__(self, handlers: Iterable[IntentHandler] | None = None) -> None:
        self._handlers: list[IntentHandler] = list(handlers or [])

    def register(self, handler: IntentHandler) -> None:
        """Append ``handler``; it is consulted after every earlier registration."""

        self._handlers.append(handler)

    def unregister(self, handler: IntentHandler) -> None:
        """Remove a handler if present."""

        if handler in self._handlers:
            self._handlers.remove(handler)

    def find_handler(self, request: RequestEnvelope) -> Optional[IntentHandler]:
        """Return the first handler whose predicate matches ``request``."""

        for handler in self._handlers:
            if handler.matches(request):
                return handler
        return None

    def matching_handlers(self, request: RequestEnvelope) -> list[IntentHandler]:
        """Return every handler whose predicate matches ``request``, in order."""

        return [handler for handler in self._handlers if handler.matches(request)]

    def dispatch(self, request: RequestEnvelope) -> SkillResponse:
        """Invoke the first matching handler and return its response."""

        matches = self.matching_handlers(request)
        if not matches:
            raise IntentHandlerNotFoundError(request)
        if len(matches) > 1:
            logger.warning(
                "multiple handlers match request; using the first registered",
                extra={
                    "request_type": request.request_type,
                    "intent": request.intent_name,
                    "handlers": [handler.name for handler in matches],
                },
            )
        handler = matches[0]
        logger.info(
            "dispatching request",
            extra={
                "request_type": request.request_type,
                "intent": request.intent_name,
                "handler": handler.name,
            },
        )
        return handler.respond(request)

    def handlers(self) -> list[IntentHandler]:
        """Return a shallow copy of the registered handlers."""

        return list(self._handlers)


__all__ = [
    "IntentRouter",
    "IntentRouterError",
    "IntentHandlerNotFoundError",
]
