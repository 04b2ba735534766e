"""Request kinds and reserved intent names understood by the skill."""

from enum import Enum


class RequestType(str, Enum):
    """Platform request kinds the skill responds to."""

    LAUNCH = "LaunchRequest"
    INTENT = "IntentRequest"
    SESSION_ENDED = "SessionEndedRequest"


class IntentName(str, Enum):
    """Built-in and application-defined intent names."""

    HELP = "AMAZON.HelpIntent"
    STOP = "AMAZON.StopIntent"
    CANCEL = "AMAZON.CancelIntent"
    FALLBACK = "AMAZON.FallbackIntent"
    QUOTE_CENTRAL = "QuoteCentralIntent"


__all__ = ["RequestType", "IntentName"]
