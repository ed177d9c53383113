"""Typed async client for the Nova Poshta JSON API."""

from novaposhta.client.core import (
    DEFAULT_BASE_URL,
    Client,
    ClientContext,
    Service,
    create_client,
)
from novaposhta.client.envelope import build_request
from novaposhta.client.pagination import fetch_all_pages
from novaposhta.client.response import ResponseEnvelope, failed_response, normalize_response
from novaposhta.client.services import ALL_SERVICES, build_client
from novaposhta.client.transport import (
    HttpxTransport,
    Transport,
    TransportRequest,
    TransportResponse,
)

__all__ = [
    "ALL_SERVICES",
    "Client",
    "ClientContext",
    "DEFAULT_BASE_URL",
    "HttpxTransport",
    "ResponseEnvelope",
    "Service",
    "Transport",
    "TransportRequest",
    "TransportResponse",
    "build_client",
    "build_request",
    "create_client",
    "failed_response",
    "fetch_all_pages",
    "normalize_response",
]
