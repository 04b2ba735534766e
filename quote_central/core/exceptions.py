"""Core exception types shared across layers."""


class SkillError(Exception):
    """Base error for failures raised while serving a skill request."""


class InvalidRequestEnvelopeError(SkillError):
    """Raised when an inbound payload is not a valid request envelope."""


class SkillIdMismatchError(SkillError):
    """Raised when a request targets a different skill than the one configured."""

    def __init__(self, expected: str, received: str | None) -> None:
        super().__init__(f"Request application id {received!r} does not match skill {expected!r}")
        self.expected = expected
        self.received = received


class EmptyQuoteTableError(SkillError):
    """Raised when asked to select a quote from an empty table."""


__all__ = [
    "SkillError",
    "InvalidRequestEnvelopeError",
    "SkillIdMismatchError",
    "EmptyQuoteTableError",
]
