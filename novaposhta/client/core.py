"""Client core: context, bound transport, service interface and registry.

A ``Client`` is a namespace registry. Services are attached with
``use()`` and then reached as attributes::

    client = create_client(ClientContext(transport=HttpxTransport(), api_key=key))
    client.use(TrackingService()).use(AddressService())
    await client.tracking.track_document("20450123456789")

``return`` is a Python keyword, so a service registered under that
namespace is reachable as ``client.return_`` (or ``client.service("return")``).
"""

import logging
from abc import ABC
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar

from novaposhta.client.envelope import build_request
from novaposhta.client.response import ResponseEnvelope, normalize_response
from novaposhta.client.transport import Transport, TransportRequest
from novaposhta.utils.redaction import redact_for_logging

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.novaposhta.ua/v2.0/json/"


@dataclass(frozen=True)
class ClientContext:
    """Everything a service needs to talk to the API."""

    transport: Transport
    base_url: str = DEFAULT_BASE_URL
    api_key: str | None = None


@dataclass(frozen=True)
class BoundTransport:
    """Transport closed over the base URL and API key of one client."""

    transport: Transport
    base_url: str
    api_key: str | None = None

    async def request(
        self,
        model_name: str | Enum,
        called_method: str | Enum,
        method_properties: dict[str, Any] | None = None,
    ) -> ResponseEnvelope:
        """Build the envelope, send it, and normalize the answer.

        Raises:
            TransportError: Propagated unchanged from the transport.
        """
        body = build_request(self.api_key, model_name, called_method, method_properties)
        logger.debug(
            f"Nova Poshta call {body['modelName']}.{body['calledMethod']}: "
            f"{redact_for_logging(body)}"
        )

        response = await self.transport(TransportRequest(url=self.base_url, body=body))
        envelope = normalize_response(response.status, response.data)

        if not envelope.success:
            logger.info(
                f"Nova Poshta {body['modelName']}.{body['calledMethod']} failed: "
                f"{', '.join(envelope.errors or envelope.error_codes)}"
            )
        return envelope


class Service(ABC):
    """Base class for domain services.

    Subclasses set ``namespace`` and call ``_request``. The bound transport
    is installed once by ``attach`` and never replaced.
    """

    namespace: ClassVar[str]

    def __init__(self):
        self._bound: BoundTransport | None = None

    def attach(self, context: ClientContext) -> None:
        """Bind this service to a client context.

        Raises:
            RuntimeError: If the service is already attached.
        """
        if self._bound is not None:
            raise RuntimeError(
                f"Service '{self.namespace}' is already attached to a client"
            )
        self._bound = BoundTransport(
            transport=context.transport,
            base_url=context.base_url,
            api_key=context.api_key,
        )

    @property
    def api_key(self) -> str | None:
        return self._bound.api_key if self._bound else None

    async def _request(
        self,
        model_name: str | Enum,
        called_method: str | Enum,
        method_properties: dict[str, Any] | None = None,
    ) -> ResponseEnvelope:
        if self._bound is None:
            raise RuntimeError(
                f"Service '{self.namespace}' is not attached; register it with Client.use()"
            )
        return await self._bound.request(model_name, called_method, method_properties)


class Client:
    """Registry of services keyed by namespace."""

    def __init__(self, context: ClientContext):
        self._context = context
        self._services: dict[str, Service] = {}

    @property
    def context(self) -> ClientContext:
        return self._context

    @property
    def namespaces(self) -> list[str]:
        return list(self._services)

    def use(self, service: Service) -> "Client":
        """Attach a service and register it under its namespace.

        Registering a second service with the same namespace replaces the
        first.

        Returns:
            This client, for chaining.
        """
        service.attach(self._context)
        if service.namespace in self._services:
            logger.debug(f"Replacing service registered under '{service.namespace}'")
        self._services[service.namespace] = service
        return self

    def service(self, namespace: str) -> Service:
        """Look up a registered service.

        Raises:
            KeyError: If nothing is registered under ``namespace``.
        """
        return self._services[namespace]

    def __getattr__(self, name: str) -> Service:
        if name.startswith("__"):
            raise AttributeError(name)
        services = self.__dict__.get("_services", {})
        if name in services:
            return services[name]
        # client.return_ -> "return"
        if name.endswith("_") and name[:-1] in services:
            return services[name[:-1]]
        raise AttributeError(f"No service registered under namespace '{name}'")

    def __contains__(self, namespace: str) -> bool:
        return namespace in self._services


def create_client(context: ClientContext) -> Client:
    """Create an empty client; register services with ``use()``."""
    return Client(context)
