"""
network_core.tier1_runtime.classify
────────────────────────────────────
Fault classification: decides whether an exception raised by an API call is
a transport fault (the request never completed: timeout, DNS failure,
connection reset, socket I/O) or anything else.

Transport faults become NetworkError results, everything else becomes Fault.
"""
from __future__ import annotations

from enum import Enum

import httpx

# OSError covers TimeoutError, ConnectionError, socket.gaierror and plain I/O
# errors. httpx.TransportError covers httpx's timeout/network/protocol errors,
# which do not derive from OSError.
TRANSPORT_FAULT_TYPES: tuple[type[BaseException], ...] = (
    OSError,
    httpx.TransportError,
)


class FaultKind(Enum):
    TRANSPORT = "transport"
    OTHER = "other"


def classify(fault: BaseException) -> FaultKind:
    """Return TRANSPORT for networking-layer faults, OTHER for the rest."""
    if isinstance(fault, TRANSPORT_FAULT_TYPES):
        return FaultKind.TRANSPORT
    return FaultKind.OTHER


def is_transport_fault(fault: BaseException) -> bool:
    return classify(fault) is FaultKind.TRANSPORT


__all__ = ["FaultKind", "classify", "is_transport_fault", "TRANSPORT_FAULT_TYPES"]
