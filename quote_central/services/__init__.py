"""Application service layer: quote selection, intent handlers, and routing."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:  # pragma: no cover - type narrowing only
    from .intent_router import IntentRouter


@dataclass(slots=True)
class ServiceContainer:
    """Aggregate of application-level services available to the skill."""

    intent_router: Optional["IntentRouter"] = None


def build_default_services(*, rng: Optional[random.Random] = None) -> ServiceContainer:
    """Return a service container with the default handlers registered."""

    # pylint: disable=import-outside-toplevel
    from .handlers import default_handlers
    from .intent_router import IntentRouter

    return ServiceContainer(intent_router=IntentRouter(default_handlers(rng=rng)))


__all__ = ["ServiceContainer", "build_default_services"]
