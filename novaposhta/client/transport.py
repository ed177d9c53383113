"""Async transports that carry request envelopes to the Nova Poshta API.

A transport is any async callable taking a ``TransportRequest`` and
returning a ``TransportResponse``. Network-level failures (unreachable
host, timeout, non-JSON body) are raised as ``TransportError``; logical
API failures are returned like any other body.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Protocol

import httpx

from novaposhta.errors import TransportError
from novaposhta.utils.redaction import sanitize_error_message

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0

DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


@dataclass(frozen=True)
class TransportRequest:
    """One POST of a request envelope."""

    url: str
    body: dict[str, Any]
    headers: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_HEADERS))


@dataclass(frozen=True)
class TransportResponse:
    """HTTP status plus the decoded JSON body."""

    status: int
    data: Any


class Transport(Protocol):
    """Async callable performing a single request."""

    async def __call__(self, request: TransportRequest) -> TransportResponse: ...


class HttpxTransport:
    """Transport backed by ``httpx.AsyncClient``.

    Owns its client unless one is injected, in which case closing is left
    to the caller.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        client: httpx.AsyncClient | None = None,
    ):
        """Initialize the transport.

        Args:
            timeout: Per-request timeout in seconds.
            client: Optional pre-configured client (tests inject one built
                on ``httpx.MockTransport``).
        """
        self._timeout = timeout
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def __call__(self, request: TransportRequest) -> TransportResponse:
        """POST the envelope and decode the JSON body.

        Raises:
            TransportError: On timeout, connection failure, or a body that
                is not valid JSON.
        """
        try:
            response = await self._client.post(
                request.url,
                json=request.body,
                headers=request.headers,
                timeout=self._timeout,
            )
        except httpx.TimeoutException as e:
            logger.warning(f"Nova Poshta request timed out: {request.url}")
            raise TransportError.from_code(
                "E-4002", url=request.url, timeout=self._timeout
            ) from e
        except httpx.RequestError as e:
            reason = sanitize_error_message(str(e), max_length=500)
            logger.warning(f"Nova Poshta request failed: {reason}")
            raise TransportError.from_code("E-4001", url=request.url, reason=reason) from e

        try:
            data = response.json()
        except ValueError as e:
            raise TransportError.from_code(
                "E-4003",
                status=response.status_code,
                details={"body": sanitize_error_message(response.text, max_length=500)},
            ) from e

        return TransportResponse(status=response.status_code, data=data)

    async def aclose(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpxTransport":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()
