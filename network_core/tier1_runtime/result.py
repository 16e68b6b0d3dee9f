"""
network_core.tier1_runtime.result
──────────────────────────────────
NetworkResult: the closed set of terminal outcomes of one API call.

Exactly one of six variants, each an immutable dataclass:

  Loading       call in flight (set by the caller, never by the wrapper)
  Success       call succeeded with data (data is never None)
  Empty         call succeeded, no data expected/returned
  Error         HTTP-level or business-level rejection (code + message)
  NetworkError  transport failure (timeout, DNS, connection reset, ...)
  Fault         anything else raised during the call

Consume it with predicates, extraction, chained hooks, ``fold`` or a
``match`` statement::

    result = await call_with_data(lambda: client.get("/users/1", UserResponse))

    (result
        .on_success(render_user)
        .on_error(lambda e: toast(e.code))
        .on_network_error(lambda exc: show_offline_banner()))

    match result:
        case Success(user):
            ...
        case Error(code="HTTP_404"):
            ...
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from network_core.tier0_core.errors import ResultPendingError, ResultUnavailableError

T = TypeVar("T")
U = TypeVar("U")


class NetworkResult(Generic[T]):
    """Base of the variant set. Not instantiated directly; not extensible."""

    __slots__ = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            raise TypeError("NetworkResult is a closed set of variants")

    # ── Predicates ───────────────────────────────────────────────────────────

    @property
    def is_success(self) -> bool:
        return isinstance(self, (Success, Empty))

    @property
    def is_failure(self) -> bool:
        # Loading counts as failure: it is not a delivered success.
        return not self.is_success

    # ── Extraction ───────────────────────────────────────────────────────────

    def get_or_none(self) -> T | None:
        """Return the data if Success, else None."""
        if isinstance(self, Success):
            return self.data
        return None

    def get_or_default(self, default: T) -> T:
        """Return the data if Success, else *default*."""
        if isinstance(self, Success):
            return self.data
        return default

    def get_or_throw(self) -> T:
        """
        Return the data if Success, otherwise raise.

        NetworkError and Fault re-raise the carried exception object itself.
        Empty and Error raise ResultUnavailableError; Loading raises
        ResultPendingError.
        """
        if isinstance(self, Success):
            return self.data
        if isinstance(self, Empty):
            raise ResultUnavailableError("Result is Empty, no data available")
        if isinstance(self, Error):
            raise ResultUnavailableError(
                f"Result is Error: [{self.code}] {self.message}",
                result_code=self.code,
                http_code=self.http_code,
            )
        if isinstance(self, (NetworkError, Fault)):
            raise self.fault
        if isinstance(self, Loading):
            raise ResultPendingError("Result is still Loading")
        raise TypeError(f"Unknown NetworkResult variant: {self!r}")

    # ── Hooks ────────────────────────────────────────────────────────────────
    # Each hook fires only for its own variant and returns self unchanged.

    def on_success(self, action: Callable[[T], Any]) -> NetworkResult[T]:
        if isinstance(self, Success):
            action(self.data)
        return self

    def on_empty(self, action: Callable[[str | None], Any]) -> NetworkResult[T]:
        if isinstance(self, Empty):
            action(self.message)
        return self

    def on_error(self, action: Callable[[Error], Any]) -> NetworkResult[T]:
        if isinstance(self, Error):
            action(self)
        return self

    def on_network_error(
        self, action: Callable[[BaseException], Any]
    ) -> NetworkResult[T]:
        if isinstance(self, NetworkError):
            action(self.fault)
        return self

    def on_fault(self, action: Callable[[BaseException], Any]) -> NetworkResult[T]:
        if isinstance(self, Fault):
            action(self.fault)
        return self

    def on_failure(
        self, action: Callable[[NetworkResult[Any]], Any]
    ) -> NetworkResult[T]:
        """Fires for Error, NetworkError and Fault (not for Loading)."""
        if isinstance(self, (Error, NetworkError, Fault)):
            action(self)
        return self

    def on_loading(self, action: Callable[[], Any]) -> NetworkResult[T]:
        if isinstance(self, Loading):
            action()
        return self

    # ── Exhaustive dispatch ──────────────────────────────────────────────────

    def fold(
        self,
        *,
        on_loading: Callable[[], U],
        on_success: Callable[[T], U],
        on_empty: Callable[[str | None], U],
        on_error: Callable[[Error], U],
        on_network_error: Callable[[BaseException], U],
        on_fault: Callable[[BaseException], U],
    ) -> U:
        """Call the one callback matching this variant and return its value."""
        if isinstance(self, Success):
            return on_success(self.data)
        if isinstance(self, Empty):
            return on_empty(self.message)
        if isinstance(self, Error):
            return on_error(self)
        if isinstance(self, NetworkError):
            return on_network_error(self.fault)
        if isinstance(self, Fault):
            return on_fault(self.fault)
        if isinstance(self, Loading):
            return on_loading()
        raise TypeError(f"Unknown NetworkResult variant: {self!r}")


# ── Variants ──────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Loading(NetworkResult[Any]):
    """Call in flight. Use the LOADING singleton."""


@dataclass(frozen=True)
class Success(NetworkResult[T]):
    data: T

    def __post_init__(self) -> None:
        if self.data is None:
            raise ValueError("Success.data must not be None")


@dataclass(frozen=True)
class Empty(NetworkResult[Any]):
    message: str | None = None


@dataclass(frozen=True)
class Error(NetworkResult[Any]):
    """
    The server was reached but rejected the call.

    http_code is the HTTP status of the response; code is either
    HTTP_<status>, one of the ErrorCode constants, or the server's own code.
    """
    code: str
    message: str | None = None
    http_code: int | None = None


@dataclass(frozen=True)
class NetworkError(NetworkResult[Any]):
    fault: BaseException


@dataclass(frozen=True)
class Fault(NetworkResult[Any]):
    fault: BaseException


LOADING: NetworkResult[Any] = Loading()


__all__ = [
    "NetworkResult",
    "Loading",
    "LOADING",
    "Success",
    "Empty",
    "Error",
    "NetworkError",
    "Fault",
]
