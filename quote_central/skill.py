"""Skill entry point binding the intent router to the registered skill id."""

from __future__ import annotations

import random
from typing import Any, Mapping, Optional

from quote_central.core.config import config
from quote_central.core.exceptions import SkillIdMismatchError
from quote_central.core.logging import get_logger, skill_request_context
from quote_central.core.models import RequestEnvelope, SkillResponse
from quote_central.services import ServiceContainer, build_default_services
from quote_central.services.intent_router import IntentRouter

logger = get_logger(__name__)


class Skill:
    """A configured skill: verifies the target skill id then dispatches."""

    def __init__(
        self,
        router: IntentRouter,
        skill_id: Optional[str] = None,
        *,
        verify_skill_id: bool = True,
    ) -> None:
        self.router = router
        self.skill_id = skill_id
        self.verify_skill_id = verify_skill_id

    def verify(self, envelope: RequestEnvelope) -> None:
        """Reject requests addressed to a different skill."""
        if not self.verify_skill_id or not self.skill_id:
            return
        received = envelope.application_id
        if received != self.skill_id:
            logger.warning(
                "rejecting request for foreign skill id",
                extra={"expected_skill_id": self.skill_id, "received_skill_id": received},
            )
            raise SkillIdMismatchError(self.skill_id, received)

    def handle(self, envelope: RequestEnvelope) -> SkillResponse:
        """Verify and dispatch a parsed envelope."""
        with skill_request_context(envelope.request.request_id, envelope.session_id):
            self.verify(envelope)
            return self.router.dispatch(envelope)

    def invoke(self, payload: Mapping[str, Any]) -> dict[str, Any]:
        """JSON in, JSON out: parse ``payload``, dispatch, serialize the response."""
        envelope = RequestEnvelope.from_payload(payload)
        return self.handle(envelope).to_envelope()


def build_skill(
    services: Optional[ServiceContainer] = None,
    *,
    skill_id: Optional[str] = None,
    verify_skill_id: Optional[bool] = None,
    rng: Optional[random.Random] = None,
) -> Skill:
    """Return a skill wired to the default handlers and configured skill id.

    ``rng`` seeds the default handlers only; it cannot be applied to a
    caller-supplied ``services`` container.
    """
    if services is not None and rng is not None:
        raise ValueError("rng only applies to default services; seed the container instead")
    container = services or build_default_services(rng=rng)
    if container.intent_router is None:
        raise RuntimeError("Service container has no intent router configured.")
    return Skill(
        container.intent_router,
        skill_id=skill_id if skill_id is not None else config.SKILL_ID,
        verify_skill_id=config.VERIFY_SKILL_ID if verify_skill_id is None else verify_skill_id,
    )


__all__ = ["Skill", "build_skill"]
