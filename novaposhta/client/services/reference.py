"""Reference service: directory data from the Common models.

None of these methods need an API key except the time interval lookups.
"""

from typing import Any

from novaposhta.client.core import Service
from novaposhta.client.enums import NovaPoshtaMethod, NovaPoshtaModel
from novaposhta.client.response import ResponseEnvelope


class ReferenceService(Service):
    """Cargo types, service types, payer types and other dictionaries."""

    namespace = "reference"

    async def _common(
        self, method: NovaPoshtaMethod, properties: dict[str, Any] | None = None
    ) -> ResponseEnvelope:
        return await self._request(NovaPoshtaModel.COMMON, method, properties)

    async def get_cargo_types(self) -> ResponseEnvelope:
        return await self._common(NovaPoshtaMethod.GET_CARGO_TYPES)

    async def get_service_types(self) -> ResponseEnvelope:
        return await self._common(NovaPoshtaMethod.GET_SERVICE_TYPES)

    async def get_pallets_list(self) -> ResponseEnvelope:
        return await self._common(NovaPoshtaMethod.GET_PALLETS_LIST)

    async def get_ownership_forms_list(self) -> ResponseEnvelope:
        return await self._common(NovaPoshtaMethod.GET_OWNERSHIP_FORMS_LIST)

    async def get_pack_list(
        self,
        length: float | None = None,
        width: float | None = None,
        height: float | None = None,
        type_of_packing: str | None = None,
    ) -> ResponseEnvelope:
        """Packaging options, optionally filtered by dimensions in mm."""
        properties = {
            "Length": length,
            "Width": width,
            "Height": height,
            "TypeOfPacking": type_of_packing,
        }
        return await self._common(
            NovaPoshtaMethod.GET_PACK_LIST,
            {key: value for key, value in properties.items() if value is not None},
        )

    async def get_tires_wheels_list(self) -> ResponseEnvelope:
        return await self._common(NovaPoshtaMethod.GET_TIRES_WHEELS_LIST)

    async def get_cargo_description_list(
        self, find_by_string: str | None = None, page: int | None = None
    ) -> ResponseEnvelope:
        properties: dict[str, Any] = {}
        if find_by_string:
            properties["FindByString"] = find_by_string
        if page is not None:
            properties["Page"] = page
        return await self._common(NovaPoshtaMethod.GET_CARGO_DESCRIPTION_LIST, properties)

    async def get_backward_delivery_cargo_types(self) -> ResponseEnvelope:
        return await self._common(NovaPoshtaMethod.GET_BACKWARD_DELIVERY_CARGO_TYPES)

    async def get_types_of_payers(self) -> ResponseEnvelope:
        return await self._common(NovaPoshtaMethod.GET_TYPES_OF_PAYERS)

    async def get_types_of_payers_for_redelivery(self) -> ResponseEnvelope:
        return await self._common(NovaPoshtaMethod.GET_TYPES_OF_PAYERS_FOR_REDELIVERY)

    async def get_payment_forms(self) -> ResponseEnvelope:
        return await self._common(NovaPoshtaMethod.GET_PAYMENT_FORMS)

    async def get_types_of_counterparties(self) -> ResponseEnvelope:
        return await self._common(NovaPoshtaMethod.GET_TYPES_OF_COUNTERPARTIES)

    async def get_time_intervals(
        self, recipient_city_ref: str, date_time: str | None = None
    ) -> ResponseEnvelope:
        """Delivery time windows in a recipient city.

        Args:
            recipient_city_ref: City ref from ``address.get_cities``.
            date_time: Delivery date, dd.mm.yyyy. Today when omitted.
        """
        properties = {"RecipientCityRef": recipient_city_ref}
        if date_time:
            properties["DateTime"] = date_time
        return await self._common(NovaPoshtaMethod.GET_TIME_INTERVALS, properties)

    async def get_pickup_time_intervals(
        self, sender_city_ref: str, date_time: str | None = None
    ) -> ResponseEnvelope:
        """Courier pickup windows in a sender city."""
        properties = {"SenderCityRef": sender_city_ref}
        if date_time:
            properties["DateTime"] = date_time
        return await self._common(NovaPoshtaMethod.GET_PICKUP_TIME_INTERVALS, properties)

    async def get_message_code_text(self) -> ResponseEnvelope:
        """The full table of API message codes with UA/RU descriptions."""
        return await self._request(
            NovaPoshtaModel.COMMON_GENERAL, NovaPoshtaMethod.GET_MESSAGE_CODE_TEXT, {}
        )

    async def decode_message_code(self, code: str) -> dict[str, Any] | None:
        """Look up one message code in ``getMessageCodeText``.

        Returns:
            Dict with ``code``, ``text``, ``description_ua`` and
            ``description_ru``, or None if the code is unknown or the
            lookup failed.
        """
        code = str(code).strip()
        response = await self.get_message_code_text()
        if not response.success:
            return None
        for item in response.data:
            if isinstance(item, dict) and str(item.get("MessageCode", "")) == code:
                return {
                    "code": code,
                    "text": item.get("MessageText"),
                    "description_ua": item.get("MessageDescriptionUA"),
                    "description_ru": item.get("MessageDescriptionRU"),
                }
        return None
