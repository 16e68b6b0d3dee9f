"""
network_core.tier1_runtime.contract
────────────────────────────────────
The response contract: four read-only queries that let any server payload
shape report success, data, error code and message in a uniform way.

The library never implements it. Each app adapts its own DTOs, one per
server format, and the call wrapper only talks to this protocol.

Usage::

    class ApiResponse(BaseModel, Generic[T]):
        code: int
        message: str | None = None
        data: T | None = None

        @property
        def success(self) -> bool:
            return self.code == 200

        @property
        def error_code(self) -> str | None:
            return None if self.success else str(self.code)

A legacy format with a boolean flag and differently named fields adapts the
same way, exposing ``success``/``data``/``message`` as properties over its
own fields.
"""
from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class ResponseContract(Protocol[T_co]):
    """
    Uniform view over a server response body.

    Implementations must return the same answer every time a query is read
    on the same instance.
    """

    @property
    def success(self) -> bool:
        """True iff the server-level semantics indicate success."""
        ...

    @property
    def data(self) -> T_co | None:
        """The payload; None on failure or when the server sent none."""
        ...

    @property
    def error_code(self) -> str | None:
        """Server error code on failure. Expected to be None on success."""
        ...

    @property
    def message(self) -> str | None:
        """Human/developer-facing description, in either outcome."""
        ...


__all__ = ["ResponseContract"]
