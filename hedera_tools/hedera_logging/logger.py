"""
structlog setup for the service.

Each line is a JSON object with event_type, level, timestamp and the logger
name, plus whatever request context RequestContextMiddleware has bound
(request_id, method, path). Request bodies carry ledger credentials, so the
processor chain masks key material before anything is rendered.
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, Mapping

import structlog

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_LEVEL_VALUE = getattr(logging, LOG_LEVEL, logging.INFO)

# "json" for servers, anything else for the console renderer
LOG_FORMAT = os.getenv("LOG_FORMAT", "json").strip().lower()

REDACTED = "***"

# Field names (wire and attribute spelling) whose values are keys.
SECRET_FIELDS = frozenset(
    {
        "userPrivateKey",
        "user_private_key",
        "supplyKey",
        "supply_key",
        "adminKey",
        "admin_key",
        "associateKey",
        "associate_key",
        "dissociateKey",
        "dissociate_key",
        "newKey",
        "new_key",
        "privateKey",
        "private_key",
        "newPrivateKey",
        "new_private_key",
    }
)


def _mask(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {k: REDACTED if k in SECRET_FIELDS and v else _mask(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_mask(v) for v in value]
    return value


def redact_secrets(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Replace key material with REDACTED, at top level and inside nested mappings."""
    for name, value in list(event_dict.items()):
        if name in SECRET_FIELDS:
            if value:
                event_dict[name] = REDACTED
        elif isinstance(value, (Mapping, list, tuple)):
            event_dict[name] = _mask(value)
    return event_dict


def _add_timestamp(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    event_dict.setdefault("timestamp", datetime.now(timezone.utc).isoformat())
    return event_dict


def _normalize_event(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """structlog's 'event' becomes event_type; message defaults to the same text."""
    if "event" in event_dict and "event_type" not in event_dict:
        event_dict["event_type"] = event_dict.pop("event")
    if "event_type" in event_dict:
        event_dict.setdefault("message", str(event_dict["event_type"]))
    return event_dict


def build_processors(log_format: str = LOG_FORMAT) -> list[Any]:
    """Processor chain ending in a renderer; redaction runs before rendering."""
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        redact_secrets,
        _add_timestamp,
        _normalize_event,
    ]
    if log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))
    return processors


def configure_structlog() -> None:
    structlog.configure(
        processors=build_processors(),
        wrapper_class=structlog.make_filtering_bound_logger(LOG_LEVEL_VALUE),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )


if not structlog.is_configured():
    configure_structlog()


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Structured logger bound to the module name.

        logger = get_logger(__name__)
        logger.info("mint_token_succeeded", token_id="0.0.2002", transaction_id="...")
    """
    return structlog.get_logger(name).bind(logger=name)
