"""
utils/logging.py — structlog setup shared by the client, the CLI and the portal.

Logs go to stderr; stdout belongs to CLI output. settings.log_format picks
JSON lines ("json") or the coloured dev renderer ("console"). Session
secrets never reach a log line: keys such as access_token or password are
masked by a processor before rendering.

Usage:
    from notary_client.utils.logging import configure_logging, get_logger

    configure_logging()
    log = get_logger(__name__, component="records")
    log.info("record_reviewed", record_id="rec-1", status="APPROVED")
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from notary_shared.config import settings

_QUIET_LIBRARIES = ("httpx", "httpcore", "uvicorn.access")

SECRET_KEYS = frozenset({
    "access_token", "accessToken",
    "refresh_token", "refreshToken",
    "password", "authorization", "Authorization",
})
MASK = "***"


def mask_secrets(_logger: Any, _method: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """structlog processor: replace secret values with MASK."""
    for key in SECRET_KEYS.intersection(event_dict):
        if event_dict[key]:
            event_dict[key] = MASK
    return event_dict


def _renderer(fmt: str) -> Any:
    if fmt == "json":
        return structlog.processors.JSONRenderer(ensure_ascii=False)
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(log_level: str | None = None, log_format: str | None = None) -> None:
    """
    Configure structlog once per process; calling again just reapplies it.

    Args:
        log_level:  Overrides settings.log_level.
        log_format: Overrides settings.log_format ("json" | "console").
    """
    level = logging.getLevelName((log_level or settings.log_level).upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level)
    for name in _QUIET_LIBRARIES:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            mask_secrets,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            _renderer(log_format or settings.log_format),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str, **context: Any) -> structlog.BoundLogger:
    """A structlog logger named ``name`` with ``context`` bound to every event."""
    logger = structlog.get_logger(name)
    return logger.bind(**context) if context else logger  # type: ignore[return-value]
