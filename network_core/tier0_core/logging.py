"""
network_core.tier0_core.logging
────────────────────────────────
Structured logging for the library. network_core is used in-process by an
application that usually owns logging already, so configuration is
best-effort and never clobbers the host:

  - structlog already configured      → the host's processors are used as-is
  - structlog still at its defaults   → network_core installs its own pipeline
                                        and a stdout handler on "network_core"

Credentials are kept out of the logs either way. The library pipeline runs
``redact_processor`` on every event, and call sites pass header mappings
through ``redact`` before logging them so a host pipeline never sees them
in the clear.

Stack: structlog over stdlib logging (stdout JSON or console)
Configure via: NETWORK_CORE_LOG_LEVEL, NETWORK_CORE_LOG_FORMAT=json|console
"""
from __future__ import annotations

import logging
import sys
from typing import Any, Mapping

import structlog

from network_core.tier0_core.config import get_config

LOGGER_NAME = "network_core"
HANDLER_NAME = "network_core.stdout"

REDACT_KEYS = frozenset({
    "password", "secret", "token", "api_key", "apikey",
    "authorization", "proxy-authorization", "cookie", "set-cookie",
    "access_token", "refresh_token", "client_secret", "x-api-key",
})

REDACTED = "[REDACTED]"

_configured = False


# ── Redaction ─────────────────────────────────────────────────────────────────

def redact(mapping: Mapping[Any, Any] | None) -> dict[Any, Any] | None:
    """Copy of *mapping* with sensitive keys masked. None stays None."""
    if mapping is None:
        return None
    return {
        k: REDACTED if str(k).lower() in REDACT_KEYS else v
        for k, v in mapping.items()
    }


def redact_processor(logger: Any, method: str, event_dict: dict) -> dict:
    """Mask sensitive fields, one level into dict values (e.g. headers=...)."""
    for key, value in list(event_dict.items()):
        if key.lower() in REDACT_KEYS:
            event_dict[key] = REDACTED
        elif isinstance(value, Mapping):
            event_dict[key] = redact(value)
    return event_dict


# ── Configuration ─────────────────────────────────────────────────────────────

def _pre_chain() -> list[Any]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        redact_processor,
    ]


def _renderer(fmt: str) -> Any:
    if fmt == "console":
        return structlog.dev.ConsoleRenderer()
    return structlog.processors.JSONRenderer()


def _attach_handler(level: int, fmt: str) -> None:
    lib_logger = logging.getLogger(LOGGER_NAME)
    lib_logger.setLevel(level)
    if any(h.get_name() == HANDLER_NAME for h in lib_logger.handlers):
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_pre_chain(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer(fmt),
        ],
    ))
    lib_logger.addHandler(handler)


def configure_logging(
    *,
    level: str | None = None,
    fmt: str | None = None,
    force: bool = False,
) -> bool:
    """
    Install the network_core logging pipeline.

    Level and format default to NetworkCoreConfig (NETWORK_CORE_LOG_LEVEL,
    NETWORK_CORE_LOG_FORMAT). Unless *force* is set, nothing is changed when
    structlog has already been configured by someone else. Returns True if
    the library pipeline was installed.
    """
    global _configured
    _configured = True

    if structlog.is_configured() and not force:
        return False

    cfg = get_config()
    level_no = getattr(logging, (level or cfg.log_level).upper(), logging.INFO)
    fmt = (fmt or cfg.log_format).lower()

    structlog.configure(
        processors=_pre_chain() + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level_no),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _attach_handler(level_no, fmt)
    return True


# ── Public API ────────────────────────────────────────────────────────────────

def get_logger(name: str | None = None) -> Any:
    """
    Return a structured logger bound to *name*.

    The first call configures logging (see configure_logging). Call it at
    log time, not at import time, so the host gets a chance to configure
    structlog first.

    Usage:
        get_logger(__name__).debug("http.request", method="GET", path="/users/1")
    """
    if not _configured:
        configure_logging()
    return structlog.get_logger(name or LOGGER_NAME)


def bind_context(**kwargs: Any) -> None:
    """Bind fields to the current async/thread context for subsequent logs."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()


__all__ = [
    "REDACTED",
    "bind_context",
    "clear_context",
    "configure_logging",
    "get_logger",
    "redact",
    "redact_processor",
]
