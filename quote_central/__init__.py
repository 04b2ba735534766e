"""Quote Central voice skill."""

QUOTE_CENTRAL_VERSION = "1.0.0"
QUOTE_CENTRAL_SKILL_NAME = "QuoteCentral"

__all__ = ["QUOTE_CENTRAL_VERSION", "QUOTE_CENTRAL_SKILL_NAME"]
