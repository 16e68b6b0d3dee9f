"""
network_core.tier0_core.config
────────────────────────────────
Typed configuration with env layering: .env → environment variables.
All fields are typed via Pydantic. Only the transport adapter and logging
read it; the call wrapper itself is configuration-free.

Stack: pydantic-settings
"""
from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class NetworkCoreConfig(BaseSettings):
    """
    Typed library configuration.
    All env vars are prefixed with NETWORK_CORE_.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Application ───────────────────────────────────────────────────────────
    environment: str = Field(default="development", alias="NETWORK_CORE_ENV")

    # ── HTTP transport defaults ───────────────────────────────────────────────
    base_url: str = Field(default="", alias="NETWORK_CORE_BASE_URL")
    timeout: float = Field(default=30.0, alias="NETWORK_CORE_TIMEOUT")
    user_agent: str = Field(
        default="network-core/1.0", alias="NETWORK_CORE_USER_AGENT"
    )

    # ── Logging ───────────────────────────────────────────────────────────────
    log_level: str = Field(default="INFO", alias="NETWORK_CORE_LOG_LEVEL")
    log_format: str = Field(default="json", alias="NETWORK_CORE_LOG_FORMAT")

    @field_validator("environment")
    @classmethod
    def validate_env(cls, v: str) -> str:
        allowed = {"development", "staging", "production", "test"}
        if v.lower() not in allowed:
            raise ValueError(f"environment must be one of {allowed}, got {v!r}")
        return v.lower()

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"timeout must be positive, got {v!r}")
        return v

    @property
    def is_test(self) -> bool:
        return self.environment == "test"


@lru_cache(maxsize=1)
def get_config() -> NetworkCoreConfig:
    """
    Return the singleton config. Cached after first call.
    Call _reset_config() in tests to pick up new env vars.
    """
    return NetworkCoreConfig()


def _reset_config() -> None:
    """For tests — clear the config cache."""
    get_config.cache_clear()


__all__ = ["NetworkCoreConfig", "get_config"]
