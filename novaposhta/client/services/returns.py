"""Return order service (AdditionalServiceGeneral model).

Registered under the ``return`` namespace, so it is reached as
``client.return_``.
"""

from collections.abc import Mapping
from typing import Any

from novaposhta.client.core import Service
from novaposhta.client.enums import NovaPoshtaMethod, NovaPoshtaModel
from novaposhta.client.models.returns import (
    ReturnOrderListRequest,
    ReturnOrderRequest,
    ReturnToNewAddress,
    ReturnToSenderAddress,
    ReturnToWarehouse,
    ReturnUpdateRequest,
    is_return_order_editable,
)
from novaposhta.client.pagination import DEFAULT_PAGE_LIMIT, fetch_all_pages
from novaposhta.client.response import ResponseEnvelope


class ReturnService(Service):
    """Return orders for delivered or refused shipments. Needs an API key."""

    namespace = "return"

    is_editable = staticmethod(is_return_order_editable)

    async def _additional_service(
        self, method: NovaPoshtaMethod, properties: dict[str, Any]
    ) -> ResponseEnvelope:
        return await self._request(NovaPoshtaModel.ADDITIONAL_SERVICE, method, properties)

    async def get_list(
        self, request: ReturnOrderListRequest | Mapping[str, Any] | None = None
    ) -> ResponseEnvelope:
        """Return orders matching the filters; every filter is optional."""
        if request is None:
            request = ReturnOrderListRequest()
        elif not isinstance(request, ReturnOrderListRequest):
            request = ReturnOrderListRequest.model_validate(request)
        return await self._additional_service(
            NovaPoshtaMethod.GET_RETURN_ORDERS_LIST, request.to_properties()
        )

    async def check_possibility(self, number: str) -> ResponseEnvelope:
        """Whether a return can be ordered for a waybill.

        On success the data lists the addresses and warehouses the parcel
        may be sent back to.
        """
        return await self._additional_service(
            NovaPoshtaMethod.CHECK_POSSIBILITY_CREATE_RETURN, {"Number": str(number).strip()}
        )

    async def create(self, request: ReturnOrderRequest | Mapping[str, Any]) -> ResponseEnvelope:
        """Send a full return order to ``save``."""
        if not isinstance(request, ReturnOrderRequest):
            request = ReturnOrderRequest.model_validate(request)
        return await self._additional_service(NovaPoshtaMethod.SAVE, request.to_properties())

    async def create_to_sender_address(
        self, request: ReturnToSenderAddress | Mapping[str, Any]
    ) -> ResponseEnvelope:
        if not isinstance(request, ReturnToSenderAddress):
            request = ReturnToSenderAddress.model_validate(request)
        return await self.create(ReturnOrderRequest.from_variant(request))

    async def create_to_new_address(
        self, request: ReturnToNewAddress | Mapping[str, Any]
    ) -> ResponseEnvelope:
        if not isinstance(request, ReturnToNewAddress):
            request = ReturnToNewAddress.model_validate(request)
        return await self.create(ReturnOrderRequest.from_variant(request))

    async def create_to_warehouse(
        self, request: ReturnToWarehouse | Mapping[str, Any]
    ) -> ResponseEnvelope:
        if not isinstance(request, ReturnToWarehouse):
            request = ReturnToWarehouse.model_validate(request)
        return await self.create(ReturnOrderRequest.from_variant(request))

    async def update(self, request: ReturnUpdateRequest | Mapping[str, Any]) -> ResponseEnvelope:
        """Edit a return order. The API only accepts this while it is Accepted."""
        if not isinstance(request, ReturnUpdateRequest):
            request = ReturnUpdateRequest.model_validate(request)
        return await self._additional_service(NovaPoshtaMethod.UPDATE, request.to_properties())

    async def get_pricing(self, request: ReturnUpdateRequest | Mapping[str, Any]) -> ResponseEnvelope:
        """Price an edit without applying it (``OnlyGetPricing``)."""
        if isinstance(request, ReturnUpdateRequest):
            request = request.model_copy(update={"only_get_pricing": True})
        else:
            request = ReturnUpdateRequest.model_validate({**request, "OnlyGetPricing": True})
        return await self.update(request)

    async def get_by_number(self, order_number: str) -> dict[str, Any] | None:
        """One return order by its number (e.g. ``102-00003168``), or None."""
        response = await self.get_list(ReturnOrderListRequest(number=order_number))
        if not response.success or not response.data:
            return None
        return response.data[0]

    async def get_by_ref(self, ref: str) -> dict[str, Any] | None:
        response = await self.get_list(ReturnOrderListRequest(ref=ref))
        if not response.success or not response.data:
            return None
        return response.data[0]

    async def get_by_date_range(
        self,
        begin_date: str,
        end_date: str,
        page: int | None = None,
        limit: int | None = None,
    ) -> ResponseEnvelope:
        """Return orders created between two dates (dd.mm.yyyy)."""
        return await self.get_list(
            ReturnOrderListRequest(
                begin_date=begin_date,
                end_date=end_date,
                page=str(page) if page is not None else None,
                limit=str(limit) if limit is not None else None,
            )
        )

    async def get_all(self, limit: int = DEFAULT_PAGE_LIMIT) -> ResponseEnvelope:
        """Every return order, fetched page by page."""

        async def fetch_page(page: int, page_limit: int) -> ResponseEnvelope:
            return await self.get_list(ReturnOrderListRequest(page=str(page), limit=str(page_limit)))

        return await fetch_all_pages(fetch_page, limit=limit)

    # Older method names kept for callers written against them
    async def get_return_orders_list(
        self, request: ReturnOrderListRequest | Mapping[str, Any] | None = None
    ) -> ResponseEnvelope:
        return await self.get_list(request)

    async def check_possibility_create_return(self, number: str) -> ResponseEnvelope:
        return await self.check_possibility(number)

    async def save(self, request: ReturnOrderRequest | Mapping[str, Any]) -> ResponseEnvelope:
        return await self.create(request)
