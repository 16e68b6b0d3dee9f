"""
network_core.tier0_core.http
─────────────────────────────
HTTP primitives: standard status codes and the envelope type the call
wrapper consumes. An envelope is the raw HTTP-level outcome (status code,
status message, optional deserialized body) before any business-level
interpretation.
"""
from __future__ import annotations

from dataclasses import dataclass
from http import HTTPStatus
from typing import Generic, Protocol, TypeVar

R = TypeVar("R")
R_co = TypeVar("R_co", covariant=True)


# ── Status code constants ──────────────────────────────────────────────────

class HTTP:
    """Standard HTTP status codes."""

    # 2xx
    OK = 200
    CREATED = 201
    ACCEPTED = 202
    NO_CONTENT = 204

    # 4xx
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    CONFLICT = 409
    UNPROCESSABLE_ENTITY = 422
    TOO_MANY_REQUESTS = 429

    # 5xx
    INTERNAL_SERVER_ERROR = 500
    BAD_GATEWAY = 502
    SERVICE_UNAVAILABLE = 503
    GATEWAY_TIMEOUT = 504

    SUCCESS_MIN = 200
    SUCCESS_MAX = 299

    @classmethod
    def is_success(cls, status_code: int) -> bool:
        return cls.SUCCESS_MIN <= status_code <= cls.SUCCESS_MAX


def reason_phrase(status_code: int) -> str:
    """Standard reason phrase for *status_code*, or "" when unknown."""
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return ""


# ── Envelope ──────────────────────────────────────────────────────────────────

class Envelope(Protocol[R_co]):
    """Anything shaped like an HttpEnvelope is accepted by the call wrapper."""

    @property
    def status_code(self) -> int: ...

    @property
    def status_message(self) -> str: ...

    @property
    def is_success_status(self) -> bool: ...

    @property
    def body(self) -> R_co | None: ...


@dataclass(frozen=True)
class HttpEnvelope(Generic[R]):
    """Status line plus the optional deserialized body of one HTTP response."""
    status_code: int
    status_message: str = ""
    body: R | None = None

    @property
    def is_success_status(self) -> bool:
        return HTTP.is_success(self.status_code)

    @classmethod
    def of(cls, status_code: int, body: R | None = None) -> "HttpEnvelope[R]":
        """Build an envelope using the standard reason phrase as message."""
        return cls(status_code, reason_phrase(status_code), body)


__all__ = ["HTTP", "Envelope", "HttpEnvelope", "reason_phrase"]
