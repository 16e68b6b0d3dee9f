"""
network_core test configuration.

No test touches the network: envelopes are built by hand or produced by
ApiClient over httpx.MockTransport.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

import pytest
from pydantic import BaseModel

# ── Pin the environment ────────────────────────────────────────────────────
# These must be set before any network_core modules read config.

os.environ.setdefault("NETWORK_CORE_ENV", "test")
os.environ.setdefault("NETWORK_CORE_LOG_LEVEL", "WARNING")

T = TypeVar("T")


# ── Response DTOs implementing the contract ────────────────────────────────

class User(BaseModel):
    id: int
    name: str


class ApiResponse(BaseModel, Generic[T]):
    """Server format where ``code == 200`` means success."""
    code: int
    message: str | None = None
    data: T | None = None

    @property
    def success(self) -> bool:
        return self.code == 200

    @property
    def error_code(self) -> str | None:
        return None if self.success else str(self.code)


class LegacyResponse(BaseModel, Generic[T]):
    """Older server format: boolean flag and differently named fields."""
    res: bool
    msg: str | None = None
    result: T | None = None

    @property
    def success(self) -> bool:
        return self.res

    @property
    def data(self) -> T | None:
        return self.result

    @property
    def error_code(self) -> str | None:
        return None if self.res else "LEGACY_ERROR"

    @property
    def message(self) -> str | None:
        return self.msg


@dataclass(frozen=True)
class StubBody:
    """Plain dataclass body with explicit values for every query."""
    success: bool
    data: Any = None
    error_code: str | None = None
    message: str | None = None


# ── Fixtures ───────────────────────────────────────────────────────────────

@pytest.fixture(autouse=True)
def reset_config():
    """Each test reads a fresh config so env changes do not bleed."""
    from network_core.tier0_core.config import _reset_config

    _reset_config()
    yield
    _reset_config()


@pytest.fixture
def pristine_logging(monkeypatch):
    """
    structlog back at its defaults and network_core logging not yet
    configured, as in a fresh process. Everything is restored afterwards.
    """
    import structlog

    from network_core.tier0_core import logging as nc_logging

    saved = structlog.get_config()
    lib_logger = logging.getLogger(nc_logging.LOGGER_NAME)
    handlers, level = list(lib_logger.handlers), lib_logger.level

    structlog.reset_defaults()
    lib_logger.handlers[:] = []
    lib_logger.setLevel(logging.NOTSET)
    monkeypatch.setattr(nc_logging, "_configured", False)
    yield
    structlog.configure(**saved)
    lib_logger.handlers[:] = handlers
    lib_logger.setLevel(level)


@pytest.fixture
def user_model():
    return User


@pytest.fixture
def api_response():
    """The ``code == 200`` response model, unparametrized."""
    return ApiResponse


@pytest.fixture
def legacy_response():
    return LegacyResponse


@pytest.fixture
def stub_body():
    return StubBody


@pytest.fixture
def respond():
    """
    Return a factory building a zero-arg async operation that yields the
    given envelope and counts its invocations in ``operation.calls``.
    """
    def factory(envelope: Any):
        async def operation():
            operation.calls += 1
            return envelope
        operation.calls = 0
        return operation
    return factory


@pytest.fixture
def raising():
    """Return a factory building a zero-arg async operation that raises."""
    def factory(exc: BaseException):
        async def operation():
            raise exc
        return operation
    return factory
