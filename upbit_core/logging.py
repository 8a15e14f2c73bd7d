"""
Logging Setup
=============
Structured logging for upbit-core.

Usage:
    from upbit_core.logging import setup_logging

    setup_logging(service_name="trading-bot", json_output=False)

Request and response records from the pipeline are emitted through
structlog; any bound logger can be passed to a client instead.
"""

import logging
import sys
from typing import Any, Dict, MutableMapping

import structlog

REDACTED = "[REDACTED]"
SENSITIVE_KEYS = frozenset({"secret_key", "authorization", "token", "jwt"})


def mask_key(key: str, visible: int = 4) -> str:
    """
    Mask a key for safe display.

    Args:
        key: Full key
        visible: Number of leading characters to keep

    Returns:
        Masked key (e.g., "AbCd****")
    """
    if not key or len(key) <= visible:
        return "****"
    return f"{key[:visible]}****"


def redact_sensitive(_logger: Any, _method: str, event_dict: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
    """structlog processor that blanks credential-bearing fields."""
    for key in list(event_dict):
        if key.lower() in SENSITIVE_KEYS:
            event_dict[key] = REDACTED
    return event_dict


def _add_service(service_name: str):
    def processor(_logger: Any, _method: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
        event_dict.setdefault("service", service_name)
        return event_dict

    return processor


def setup_logging(
    service_name: str = "upbit-core",
    level: str = "INFO",
    json_output: bool = True,
) -> None:
    """
    Configure structlog on top of stdlib logging.

    Args:
        service_name: Name attached to every record
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_output: Whether to output JSON (for production)
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(handler)

    renderer = structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            _add_service(service_name),
            redact_sensitive,
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> Any:
    """Get a structlog logger with the given name."""
    return structlog.get_logger(name)
