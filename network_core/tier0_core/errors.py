"""
network_core.tier0_core.errors
───────────────────────────────
Error taxonomy for the library itself, plus the stable error-code and
default-message constants placed on ``NetworkResult.Error`` values.

Codes here are developer-facing identifiers, never end-user text. Apps map
them to localized messages on their side.
"""
from __future__ import annotations

from typing import Any


# ── Error codes carried by NetworkResult.Error ───────────────────────────────

class ErrorCode:
    """Machine-matchable codes produced by the call wrapper."""

    # HTTP failures are reported as HTTP_<status>, e.g. HTTP_404
    HTTP_PREFIX = "HTTP_"

    EMPTY_BODY = "EMPTY_BODY"
    NULL_DATA = "NULL_DATA"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"

    @classmethod
    def for_status(cls, status_code: int) -> str:
        return f"{cls.HTTP_PREFIX}{status_code}"


class ErrorMessage:
    """Fallback messages (English) used when the server supplies none."""

    RESPONSE_BODY_NULL = "Response body is null"
    SUCCESS_BUT_DATA_NULL = "Success but data is null"


# ── Base error ────────────────────────────────────────────────────────────────

class NetworkCoreError(Exception):
    """
    Base class for all errors raised by network_core. Every error has:
    - code: stable machine-readable string (snake_case)
    - detail: developer-facing description
    - metadata: extra structured context
    """

    code: str = "network_core_error"

    def __init__(
        self,
        detail: str = "An unexpected error occurred.",
        *,
        code: str | None = None,
        **metadata: Any,
    ) -> None:
        self.code = code or self.__class__.code
        self.detail = detail
        self.metadata = metadata
        super().__init__(detail)

    def to_dict(self) -> dict:
        return {
            "error": {
                "code": self.code,
                "message": self.detail,
                **self.metadata,
            }
        }


# ── Typed error classes ───────────────────────────────────────────────────────

class ResultUnavailableError(NetworkCoreError):
    """get_or_throw() was called on an Empty or Error result."""
    code = "result_unavailable"

    def __init__(
        self,
        detail: str,
        *,
        result_code: str | None = None,
        http_code: int | None = None,
        **metadata: Any,
    ) -> None:
        self.result_code = result_code
        self.http_code = http_code
        super().__init__(detail, **metadata)

    def to_dict(self) -> dict:
        d = super().to_dict()
        if self.result_code is not None:
            d["error"]["result_code"] = self.result_code
        if self.http_code is not None:
            d["error"]["http_code"] = self.http_code
        return d


class ResultPendingError(NetworkCoreError):
    """get_or_throw() was called while the result is still Loading."""
    code = "result_pending"


class ConfigurationError(NetworkCoreError):
    """Misconfiguration detected when building a client or reading config."""
    code = "configuration_error"


__all__ = [
    "ErrorCode",
    "ErrorMessage",
    "NetworkCoreError",
    "ResultUnavailableError",
    "ResultPendingError",
    "ConfigurationError",
]
