"""Function-as-a-service entry point (AWS Lambda handler signature)."""

from __future__ import annotations

from typing import Any, Mapping

from quote_central.core.logging import get_logger
from quote_central.skill import build_skill

logger = get_logger(__name__)

skill = build_skill()


def lambda_handler(event: Mapping[str, Any], context: Any = None) -> dict[str, Any]:
    """Serve one request envelope; errors propagate to the hosting runtime."""
    aws_request_id = getattr(context, "aws_request_id", None)
    logger.info(
        "lambda invocation",
        extra={"aws_request_id": aws_request_id or "-"},
    )
    return skill.invoke(event)


__all__ = ["lambda_handler", "skill"]
