"""
network_core
────────────
Stable top-level exports. Import from here, not from sub-modules directly.
Every name exported here is part of the public API and subject to semver.
"""
from network_core.tier0_core.logging import configure_logging, get_logger
from network_core.tier0_core.errors import (
    ErrorCode,
    ErrorMessage,
    NetworkCoreError,
    ResultUnavailableError,
    ResultPendingError,
    ConfigurationError,
)
from network_core.tier0_core.config import get_config, NetworkCoreConfig
from network_core.tier0_core.http import HTTP, Envelope, HttpEnvelope

from network_core.tier1_runtime.contract import ResponseContract
from network_core.tier1_runtime.result import (
    NetworkResult,
    Loading,
    LOADING,
    Success,
    Empty,
    Error,
    NetworkError,
    Fault,
)
from network_core.tier1_runtime.classify import FaultKind, classify, is_transport_fault
from network_core.tier1_runtime.safe_call import (
    call_with_data,
    call_without_data,
    network_call,
)

from network_core.tier3_platform.api_client import ApiClient, envelope_from_response

__version__ = "1.0.0"
__all__ = [
    # logging
    "configure_logging", "get_logger",
    # errors
    "ErrorCode", "ErrorMessage", "NetworkCoreError",
    "ResultUnavailableError", "ResultPendingError", "ConfigurationError",
    # config
    "get_config", "NetworkCoreConfig",
    # http
    "HTTP", "Envelope", "HttpEnvelope",
    # contract
    "ResponseContract",
    # result
    "NetworkResult", "Loading", "LOADING", "Success", "Empty",
    "Error", "NetworkError", "Fault",
    # classify
    "FaultKind", "classify", "is_transport_fault",
    # safe_call
    "call_with_data", "call_without_data", "network_call",
    # api_client
    "ApiClient", "envelope_from_response",
]
