"""
network_core.tier3_platform.api_client
────────────────────────────────────────
Async HTTP transport that yields HttpEnvelopes, ready to be passed to the
call wrapper. It does the HTTP part only: send the request, decode a 2xx
body into the caller's response model, report the status line.

Failures are NOT mapped here. httpx transport errors are raised unchanged so
the wrapper classifies them as NetworkError; body decoding errors (pydantic
ValidationError, malformed JSON) propagate and end up as Fault.

Backed by: httpx (async HTTP).

Usage::

    async with ApiClient("https://api.example.com") as client:
        result = await call_with_data(
            lambda: client.get("/users/1", ApiResponse[User])
        )
"""
from __future__ import annotations

from typing import Any, Callable, TypeVar, Union

import httpx
from pydantic import BaseModel

from network_core.tier0_core.config import get_config
from network_core.tier0_core.errors import ConfigurationError
from network_core.tier0_core.http import HTTP, HttpEnvelope
from network_core.tier0_core.logging import get_logger, redact

R = TypeVar("R")

# A pydantic model class, or any callable taking the decoded JSON value.
BodyParser = Union[type[BaseModel], Callable[[Any], Any]]


def envelope_from_response(
    response: httpx.Response,
    parser: BodyParser | None = None,
) -> HttpEnvelope[Any]:
    """
    Convert an httpx response into an HttpEnvelope.

    The body is decoded only for 2xx responses with content and a parser;
    otherwise it is None. Error bodies are not decoded.
    """
    status = response.status_code
    body: Any = None
    if (
        parser is not None
        and HTTP.is_success(status)
        and status != HTTP.NO_CONTENT
        and response.content.strip()
    ):
        body = _decode(response, parser)
    return HttpEnvelope(
        status_code=status,
        status_message=response.reason_phrase,
        body=body,
    )


def _decode(response: httpx.Response, parser: BodyParser) -> Any:
    if isinstance(parser, type) and issubclass(parser, BaseModel):
        return parser.model_validate_json(response.content)
    return parser(response.json())


class ApiClient:
    """
    Async HTTP client returning HttpEnvelopes.

    Defaults for base URL, timeout and User-Agent come from NetworkCoreConfig.
    Pass ``transport`` (e.g. ``httpx.MockTransport``) to replace the network
    in tests.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout: float | None = None,
        headers: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        cfg = get_config()
        self._base_url = (cfg.base_url if base_url is None else base_url).rstrip("/")
        self._timeout = cfg.timeout if timeout is None else timeout
        if self._timeout <= 0:
            raise ConfigurationError(
                f"timeout must be positive, got {self._timeout!r}",
                timeout=self._timeout,
            )
        self._headers = {
            "Accept": "application/json",
            "User-Agent": cfg.user_agent,
            **(headers or {}),
        }
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def base_url(self) -> str:
        return self._base_url

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                headers=self._headers,
                transport=self._transport,
            )
        return self._client

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> ApiClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def get(self, path: str, parser: BodyParser | None = None, **kwargs: Any) -> HttpEnvelope[Any]:
        return await self.request("GET", path, parser, **kwargs)

    async def post(self, path: str, parser: BodyParser | None = None, json: Any = None, **kwargs: Any) -> HttpEnvelope[Any]:
        return await self.request("POST", path, parser, json=json, **kwargs)

    async def put(self, path: str, parser: BodyParser | None = None, json: Any = None, **kwargs: Any) -> HttpEnvelope[Any]:
        return await self.request("PUT", path, parser, json=json, **kwargs)

    async def patch(self, path: str, parser: BodyParser | None = None, json: Any = None, **kwargs: Any) -> HttpEnvelope[Any]:
        return await self.request("PATCH", path, parser, json=json, **kwargs)

    async def delete(self, path: str, parser: BodyParser | None = None, **kwargs: Any) -> HttpEnvelope[Any]:
        return await self.request("DELETE", path, parser, **kwargs)

    async def request(
        self,
        method: str,
        path: str,
        parser: BodyParser | None = None,
        **kwargs: Any,
    ) -> HttpEnvelope[Any]:
        """Send one request and return its envelope. Transport errors propagate."""
        client = self._get_client()
        log = get_logger(__name__)
        log.debug(
            "http.request",
            method=method,
            path=path,
            headers=redact(kwargs.get("headers")),
        )
        try:
            response = await client.request(method, path, **kwargs)
        except httpx.TransportError as exc:
            log.warning(
                "http.transport_error",
                method=method,
                path=path,
                error=str(exc),
                error_type=type(exc).__name__,
            )
            raise
        log.debug(
            "http.response",
            method=method,
            path=path,
            status_code=response.status_code,
            content_length=len(response.content),
        )
        return envelope_from_response(response, parser)


__all__ = ["ApiClient", "BodyParser", "envelope_from_response"]
