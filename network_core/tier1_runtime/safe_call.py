"""
network_core.tier1_runtime.safe_call
─────────────────────────────────────
Call wrapper: awaits an API call once and turns whatever happens into
exactly one NetworkResult. No exception derived from ``Exception`` escapes.

Precedence (first match wins):

  1. raised transport fault            → NetworkError(fault)
  2. raised anything else              → Fault(fault)
  3. status outside 2xx                → Error(HTTP_<status>, status message)
  4. no body                           → Error(EMPTY_BODY)       | Empty()
  5. body.success is False             → Error(body.error_code, else UNKNOWN_ERROR)
  6. body.data is None                 → Error(NULL_DATA)        | (skipped)
  7. otherwise                         → Success(body.data)      | Empty(body.message)

The right-hand column is ``call_without_data``, for calls where no payload is
expected (DELETE and friends) and a missing body is a legitimate success.

asyncio.CancelledError is a BaseException and propagates untouched, so
cancellation is never reported as a failure result.

Usage::

    result = await call_with_data(lambda: client.get("/users/1", UserResponse))
    deleted = await call_without_data(lambda: client.delete("/users/1", UserResponse))
"""
from __future__ import annotations

import functools
from typing import Any, Awaitable, Callable, TypeVar

from network_core.tier0_core.errors import ErrorCode, ErrorMessage
from network_core.tier0_core.http import Envelope
from network_core.tier1_runtime.classify import FaultKind, classify
from network_core.tier1_runtime.contract import ResponseContract
from network_core.tier1_runtime.result import (
    Empty,
    Error,
    Fault,
    NetworkError,
    NetworkResult,
    Success,
)

T = TypeVar("T")

Operation = Callable[[], Awaitable[Envelope[ResponseContract[T]]]]
Classifier = Callable[[BaseException], FaultKind]


# ── Public API ────────────────────────────────────────────────────────────────

async def call_with_data(
    operation: Operation[T],
    *,
    classifier: Classifier = classify,
) -> NetworkResult[T]:
    """Await *operation* and map its outcome; a missing payload is an Error."""
    return await _invoke(operation, _handle_response, classifier)


async def call_without_data(
    operation: Operation[Any],
    *,
    classifier: Classifier = classify,
) -> NetworkResult[None]:
    """Await *operation* and map its outcome; success resolves to Empty."""
    return await _invoke(operation, _handle_empty_response, classifier)


def network_call(
    *,
    expects_data: bool = True,
    classifier: Classifier = classify,
) -> Callable:
    """
    Decorator: make an async function that returns an envelope return a
    NetworkResult instead.

    Usage::

        @network_call()
        async def get_user(user_id: int) -> HttpEnvelope[UserResponse]:
            return await client.get(f"/users/{user_id}", UserResponse)

        @network_call(expects_data=False)
        async def delete_user(user_id: int) -> HttpEnvelope[UserResponse]:
            return await client.delete(f"/users/{user_id}", UserResponse)

        result = await get_user(1)
    """
    wrap = call_with_data if expects_data else call_without_data

    def decorator(fn: Callable[..., Awaitable[Any]]) -> Callable:
        @functools.wraps(fn)
        async def wrapper(*args: Any, **kwargs: Any) -> NetworkResult[Any]:
            return await wrap(lambda: fn(*args, **kwargs), classifier=classifier)

        return wrapper
    return decorator


# ── Internals ─────────────────────────────────────────────────────────────────

async def _invoke(
    operation: Operation[Any],
    handle: Callable[[Envelope[Any]], NetworkResult[Any]],
    classifier: Classifier,
) -> NetworkResult[Any]:
    # handle() reads caller-supplied contract properties; it must stay
    # inside the try.
    try:
        return handle(await operation())
    except Exception as exc:
        if classifier(exc) is FaultKind.TRANSPORT:
            return NetworkError(exc)
        return Fault(exc)


def _http_error(envelope: Envelope[Any]) -> Error:
    return Error(
        code=ErrorCode.for_status(envelope.status_code),
        message=envelope.status_message,
        http_code=envelope.status_code,
    )


def _business_error(envelope: Envelope[Any], body: ResponseContract[Any]) -> Error:
    # Only an absent code falls back; "" is the server's own value.
    code = body.error_code
    return Error(
        code=code if code is not None else ErrorCode.UNKNOWN_ERROR,
        message=body.message,
        http_code=envelope.status_code,
    )


def _handle_response(envelope: Envelope[ResponseContract[T]]) -> NetworkResult[T]:
    if not envelope.is_success_status:
        return _http_error(envelope)

    body = envelope.body
    if body is None:
        return Error(
            code=ErrorCode.EMPTY_BODY,
            message=ErrorMessage.RESPONSE_BODY_NULL,
            http_code=envelope.status_code,
        )

    if not body.success:
        return _business_error(envelope, body)

    data = body.data
    if data is None:
        message = body.message
        return Error(
            code=ErrorCode.NULL_DATA,
            message=message if message is not None else ErrorMessage.SUCCESS_BUT_DATA_NULL,
            http_code=envelope.status_code,
        )

    return Success(data)


def _handle_empty_response(
    envelope: Envelope[ResponseContract[Any]],
) -> NetworkResult[None]:
    if not envelope.is_success_status:
        return _http_error(envelope)

    body = envelope.body
    if body is None:
        return Empty()

    if not body.success:
        return _business_error(envelope, body)

    return Empty(body.message)


__all__ = ["call_with_data", "call_without_data", "network_call"]
