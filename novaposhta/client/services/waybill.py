"""Waybill service (InternetDocument model).

Pricing, delivery date estimates and the waybill lifecycle. All create
variants validate locally with their request model and then share one
``InternetDocument.save`` call.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

from pydantic import ValidationError

from novaposhta.client.core import Service
from novaposhta.client.enums import NovaPoshtaMethod, NovaPoshtaModel
from novaposhta.client.models.base import MethodProperties
from novaposhta.client.models.waybill import (
    DeliveryDateRequest,
    PostomatWaybillRequest,
    PriceRequest,
    WaybillDeleteRequest,
    WaybillRequest,
    WaybillUpdateRequest,
    WaybillWithOptionsRequest,
    postomat_violations,
)
from novaposhta.client.response import ResponseEnvelope, failed_response
from novaposhta.errors import NovaPoshtaError

logger = logging.getLogger(__name__)

RequestModel = TypeVar("RequestModel", bound=MethodProperties)


def _coerce(model: type[RequestModel], request: RequestModel | Mapping[str, Any]) -> RequestModel:
    if isinstance(request, model):
        return request
    if isinstance(request, MethodProperties):
        request = request.to_properties()
    return model.model_validate(request)


class WaybillService(Service):
    """Waybill pricing and lifecycle."""

    namespace = "waybill"

    async def get_price(self, request: PriceRequest | Mapping[str, Any]) -> ResponseEnvelope:
        """Delivery cost for a shipment (``getDocumentPrice``).

        Raises:
            ValidationError: If the request is structurally invalid.
        """
        request = _coerce(PriceRequest, request)
        return await self._request(
            NovaPoshtaModel.INTERNET_DOCUMENT,
            NovaPoshtaMethod.GET_DOCUMENT_PRICE,
            request.to_properties(),
        )

    async def get_delivery_date(
        self, request: DeliveryDateRequest | Mapping[str, Any]
    ) -> ResponseEnvelope:
        """Estimated delivery date (``getDocumentDeliveryDate``)."""
        request = _coerce(DeliveryDateRequest, request)
        return await self._request(
            NovaPoshtaModel.INTERNET_DOCUMENT,
            NovaPoshtaMethod.GET_DOCUMENT_DELIVERY_DATE,
            request.to_properties(),
        )

    async def get_estimate(
        self, request: PriceRequest | Mapping[str, Any]
    ) -> dict[str, ResponseEnvelope]:
        """Price and delivery date for the same shipment.

        The two calls are made one after the other.

        Returns:
            ``{"price": envelope, "delivery_date": envelope}``
        """
        request = _coerce(PriceRequest, request)
        price = await self.get_price(request)
        delivery_date = await self.get_delivery_date(
            DeliveryDateRequest(
                city_sender=request.city_sender,
                city_recipient=request.city_recipient,
                service_type=request.service_type,
                date_time=request.date_time,
            )
        )
        return {"price": price, "delivery_date": delivery_date}

    async def _save(self, request: WaybillRequest) -> ResponseEnvelope:
        return await self._request(
            NovaPoshtaModel.INTERNET_DOCUMENT,
            NovaPoshtaMethod.SAVE,
            request.to_properties(),
        )

    async def create(self, request: WaybillRequest | Mapping[str, Any]) -> ResponseEnvelope:
        """Create a standard waybill. Needs an API key."""
        return await self._save(_coerce(WaybillRequest, request))

    async def create_with_options(
        self, request: WaybillWithOptionsRequest | Mapping[str, Any]
    ) -> ResponseEnvelope:
        """Create a waybill with cash on delivery or other options."""
        return await self._save(_coerce(WaybillWithOptionsRequest, request))

    async def create_for_postomat(
        self, request: PostomatWaybillRequest | Mapping[str, Any]
    ) -> ResponseEnvelope:
        """Create a waybill to a postomat.

        Postomat cells have hard limits; a request that breaks any of them
        is rejected before anything is sent.

        Raises:
            NovaPoshtaError: E-2004 listing every violated limit.
        """
        request = _coerce(PostomatWaybillRequest, request)
        violations = postomat_violations(request)
        if violations:
            raise NovaPoshtaError.from_code("E-2004", reason="; ".join(violations))
        return await self._save(request)

    async def create_batch(
        self, requests: Iterable[WaybillRequest | Mapping[str, Any]]
    ) -> list[ResponseEnvelope]:
        """Create several waybills, one call at a time.

        An item that fails local validation yields a failed envelope in its
        slot; the rest of the batch still goes out. Transport failures
        propagate.
        """
        results = []
        for index, request in enumerate(requests):
            try:
                results.append(await self.create(request))
            except ValidationError as e:
                logger.info(f"Batch waybill {index} rejected locally: {e.error_count()} errors")
                results.append(failed_response(f"Waybill {index} is invalid: {e}", "E-2003"))
        return results

    async def update(self, request: WaybillUpdateRequest | Mapping[str, Any]) -> ResponseEnvelope:
        """Update an existing waybill. ``Ref`` is required."""
        request = _coerce(WaybillUpdateRequest, request)
        return await self._request(
            NovaPoshtaModel.INTERNET_DOCUMENT,
            NovaPoshtaMethod.UPDATE,
            request.to_properties(),
        )

    async def delete(self, document_refs: Iterable[str]) -> ResponseEnvelope:
        """Delete waybills by document ref."""
        request = WaybillDeleteRequest(document_refs=list(document_refs))
        return await self._request(
            NovaPoshtaModel.INTERNET_DOCUMENT,
            NovaPoshtaMethod.DELETE,
            request.to_properties(),
        )

    async def delete_batch(self, document_refs: Iterable[str]) -> ResponseEnvelope:
        return await self.delete(document_refs)

    @staticmethod
    def validate_waybill(request: WaybillRequest | Mapping[str, Any]) -> bool:
        """True if ``request`` would pass local validation for ``create``."""
        try:
            _coerce(WaybillRequest, request)
        except ValidationError:
            return False
        return True
