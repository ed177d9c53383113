"""In-memory transport double for client and tool tests."""

from collections import deque
from typing import Any

from novaposhta.client import TransportRequest, TransportResponse


class FakeTransport:
    """Transport double that answers from a queue of JSON bodies.

    When the queue is empty it answers ``{"success": true, "data": []}``.
    Queued exceptions are raised instead of answering.
    """

    def __init__(self):
        self.requests: list[TransportRequest] = []
        self._bodies: deque[Any] = deque()

    def queue(self, *bodies: Any) -> "FakeTransport":
        self._bodies.extend(bodies)
        return self

    @property
    def bodies(self) -> list[dict[str, Any]]:
        return [request.body for request in self.requests]

    @property
    def last_body(self) -> dict[str, Any]:
        return self.requests[-1].body

    @property
    def last_properties(self) -> dict[str, Any]:
        return self.last_body["methodProperties"]

    async def __call__(self, request: TransportRequest) -> TransportResponse:
        self.requests.append(request)
        body = self._bodies.popleft() if self._bodies else {"success": True, "data": []}
        if isinstance(body, BaseException):
            raise body
        return TransportResponse(status=200, data=body)


def ok(*records: Any, **extra: Any) -> dict[str, Any]:
    """Successful API body with the given records."""
    return {"success": True, "data": list(records), "errors": [], "warnings": [], **extra}


def fail(*errors: str, **extra: Any) -> dict[str, Any]:
    """Failed API body with the given error messages."""
    return {"success": False, "data": [], "errors": list(errors), **extra}
