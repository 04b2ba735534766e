"""Structured logging helpers with correlation and skill request metadata."""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from contextvars import ContextVar, Token
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Iterator, Optional

from pythonjsonlogger import jsonlogger

from quote_central.core.config import settings

_correlation_id: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)
_skill_request_id: ContextVar[Optional[str]] = ContextVar("skill_request_id", default=None)
_skill_session_id: ContextVar[Optional[str]] = ContextVar("skill_session_id", default=None)

LEVEL_NAME = str(getattr(settings, "QUOTE_CENTRAL_LOG_LEVEL", "info")).upper()
LOG_LEVEL = getattr(logging, LEVEL_NAME, logging.INFO)

BASE_DIR = Path(__file__).resolve().parent.parent
ROOT_DIR = BASE_DIR.parent


def _resolve_logs_dir() -> Path:
    """Select a writable logs directory honoring configuration overrides."""

    configured_dir = getattr(settings, "QUOTE_CENTRAL_LOG_DIR", None)
    candidates = []
    if configured_dir:
        candidates.append(Path(configured_dir))

    # Precedence: explicit override → repo root logs → /tmp (read-only lambda bundles)
    candidates.append(ROOT_DIR / "logs")
    candidates.append(Path("/tmp") / "quote_central" / "logs")

    for candidate in candidates:
        try:
            candidate.mkdir(parents=True, exist_ok=True)
        except OSError:
            continue
        return candidate

    raise PermissionError("Unable to create a writable logs directory")


LOGS_DIR = _resolve_logs_dir()
LOG_SCHEMA_VERSION = str(getattr(settings, "QUOTE_CENTRAL_LOG_SCHEMA_VERSION", "1.0.0"))
LOG_FILE_PATH = LOGS_DIR / "quote_central.log"
LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 5


class VersionedJsonFormatter(jsonlogger.JsonFormatter):
    """Inject a schema version into each structured log entry."""

    def __init__(self, *args, schema_version: str, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._schema_version = schema_version

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)
        # Explicit overrides on the record win.
        log_record.setdefault("schema_version", self._schema_version)


class CorrelationIdFilter(logging.Filter):  # pylint: disable=too-few-public-methods
    """Attach correlation and skill request metadata to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id() or "-"
        record.skill_request_id = get_skill_request_id() or "-"
        record.skill_session_id = get_skill_session_id() or "-"
        return True


def bind_correlation_id(value: Optional[str]) -> Token[Optional[str]]:
    """Bind ``value`` to the correlation id context variable."""

    return _correlation_id.set(value)


def reset_correlation_id(token: Token[Optional[str]]) -> None:
    """Reset the correlation id context variable to a previous state."""

    _correlation_id.reset(token)


def get_correlation_id() -> Optional[str]:
    """Return the current correlation id if bound."""

    return _correlation_id.get()


def bind_skill_request_id(value: Optional[str]) -> Token[Optional[str]]:
    """Bind the platform-issued request id for the request being dispatched."""

    return _skill_request_id.set(value)


def reset_skill_request_id(token: Token[Optional[str]]) -> None:
    """Reset the platform request id context variable."""

    _skill_request_id.reset(token)


def get_skill_request_id() -> Optional[str]:
    """Return the current platform request id if bound."""

    return _skill_request_id.get()


def bind_skill_session_id(value: Optional[str]) -> Token[Optional[str]]:
    """Bind the platform session id for the request being dispatched."""

    return _skill_session_id.set(value)


def reset_skill_session_id(token: Token[Optional[str]]) -> None:
    """Reset the platform session id context variable."""

    _skill_session_id.reset(token)


def get_skill_session_id() -> Optional[str]:
    """Return the current platform session id if bound."""

    return _skill_session_id.get()


@contextmanager
def correlation_id_context(value: Optional[str]) -> Iterator[None]:
    """Context manager that temporarily binds a correlation id."""

    token = bind_correlation_id(value)
    try:
        yield
    finally:
        reset_correlation_id(token)


@contextmanager
def skill_request_context(
    request_id: Optional[str], session_id: Optional[str] = None
) -> Iterator[None]:
    """Context manager that temporarily binds platform request and session ids."""

    request_token = bind_skill_request_id(request_id)
    session_token = bind_skill_session_id(session_id)
    try:
        yield
    finally:
        reset_skill_session_id(session_token)
        reset_skill_request_id(request_token)


def _build_formatter() -> VersionedJsonFormatter:
    return VersionedJsonFormatter(
        " ".join(
            [
                "%(asctime)s",
                "%(levelname)s",
                "%(name)s",
                "%(message)s",
                "%(correlation_id)s",
                "%(skill_request_id)s",
                "%(skill_session_id)s",
            ]
        ),
        rename_fields={
            "asctime": "timestamp",
            "levelname": "level",
            "name": "logger",
            "correlation_id": "cid",
            "skill_request_id": "request_id",
            "skill_session_id": "session_id",
        },
        datefmt="%Y-%m-%d %H:%M:%S",
        json_ensure_ascii=False,
        schema_version=LOG_SCHEMA_VERSION,
    )


def _ensure_root_handlers() -> None:
    """Install the shared stdout and rotating file handlers exactly once."""

    root_logger = logging.getLogger()
    if any(getattr(handler, "_quote_central", False) for handler in root_logger.handlers):
        return

    formatter = _build_formatter()
    correlation_filter = CorrelationIdFilter()

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.addFilter(correlation_filter)
    stream_handler.setFormatter(formatter)
    setattr(stream_handler, "_quote_central", True)
    root_logger.addHandler(stream_handler)

    file_handler = RotatingFileHandler(
        LOG_FILE_PATH, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT, encoding="utf-8"
    )
    file_handler.addFilter(correlation_filter)
    file_handler.setFormatter(formatter)
    setattr(file_handler, "_quote_central", True)
    root_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """Return a logger that propagates to the shared correlation-aware handlers."""

    _ensure_root_handlers()
    logger = logging.getLogger(name)
    logger.setLevel(LOG_LEVEL)
    return logger


__all__ = [
    "CorrelationIdFilter",
    "VersionedJsonFormatter",
    "bind_correlation_id",
    "bind_skill_request_id",
    "bind_skill_session_id",
    "reset_correlation_id",
    "reset_skill_request_id",
    "reset_skill_session_id",
    "get_correlation_id",
    "get_skill_request_id",
    "get_skill_session_id",
    "correlation_id_context",
    "skill_request_context",
    "get_logger",
    "LOG_FILE_PATH",
    "LOG_SCHEMA_VERSION",
]
