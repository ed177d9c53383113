"""Counterparty service: senders, recipients and third-party payers."""

from collections.abc import Mapping
from typing import Any

from pydantic import TypeAdapter

from novaposhta.client.core import Service
from novaposhta.client.enums import NovaPoshtaMethod, NovaPoshtaModel
from novaposhta.client.models.counterparty import (
    CounterpartyProperty,
    CounterpartySaveRequest,
    CounterpartyUpdateRequest,
    OrganizationCounterparty,
    PrivatePersonCounterparty,
)
from novaposhta.client.response import ResponseEnvelope

_save_adapter = TypeAdapter(CounterpartySaveRequest)


class CounterpartyService(Service):
    """Counterparty directory of the API key owner. Every call needs an API key."""

    namespace = "counterparty"

    async def get_counterparties(
        self,
        counterparty_property: CounterpartyProperty | str,
        page: int | None = None,
        find_by_string: str | None = None,
        city_ref: str | None = None,
    ) -> ResponseEnvelope:
        """Counterparties of one kind (Sender, Recipient or ThirdPerson)."""
        properties: dict[str, Any] = {
            "CounterpartyProperty": CounterpartyProperty(counterparty_property).value
        }
        if page is not None:
            properties["Page"] = page
        if find_by_string:
            properties["FindByString"] = find_by_string
        if city_ref:
            properties["CityRef"] = city_ref
        return await self._request(
            NovaPoshtaModel.COUNTERPARTY, NovaPoshtaMethod.GET_COUNTERPARTIES, properties
        )

    async def get_counterparty_addresses(
        self,
        ref: str,
        counterparty_property: CounterpartyProperty | str | None = None,
        page: int | None = None,
    ) -> ResponseEnvelope:
        properties: dict[str, Any] = {"Ref": ref}
        if counterparty_property:
            properties["CounterpartyProperty"] = CounterpartyProperty(counterparty_property).value
        if page is not None:
            properties["Page"] = page
        return await self._request(
            NovaPoshtaModel.COUNTERPARTY, NovaPoshtaMethod.GET_COUNTERPARTY_ADDRESSES, properties
        )

    async def get_counterparty_contact_persons(
        self, ref: str, page: int | None = None
    ) -> ResponseEnvelope:
        properties: dict[str, Any] = {"Ref": ref}
        if page is not None:
            properties["Page"] = page
        return await self._request(
            NovaPoshtaModel.COUNTERPARTY,
            NovaPoshtaMethod.GET_COUNTERPARTY_CONTACT_PERSONS,
            properties,
        )

    async def get_counterparty_options(self, ref: str) -> ResponseEnvelope:
        """Contract options (payment control, credit, etc.) of a counterparty."""
        return await self._request(
            NovaPoshtaModel.COUNTERPARTY, NovaPoshtaMethod.GET_COUNTERPARTY_OPTIONS, {"Ref": ref}
        )

    async def save(
        self,
        request: PrivatePersonCounterparty | OrganizationCounterparty | Mapping[str, Any],
    ) -> ResponseEnvelope:
        """Create a counterparty.

        A mapping is validated against the variant its ``CounterpartyType``
        names: a private person needs a first name, last name and phone, an
        organization needs an ownership form and EDRPOU code.

        Raises:
            ValidationError: If required fields for the variant are missing.
        """
        if not isinstance(request, (PrivatePersonCounterparty, OrganizationCounterparty)):
            request = _save_adapter.validate_python(dict(request))
        return await self._request(
            NovaPoshtaModel.COUNTERPARTY, NovaPoshtaMethod.SAVE, request.to_properties()
        )

    async def update(
        self, request: CounterpartyUpdateRequest | Mapping[str, Any]
    ) -> ResponseEnvelope:
        if not isinstance(request, CounterpartyUpdateRequest):
            request = CounterpartyUpdateRequest.model_validate(request)
        return await self._request(
            NovaPoshtaModel.COUNTERPARTY, NovaPoshtaMethod.UPDATE, request.to_properties()
        )

    async def delete(self, ref: str) -> ResponseEnvelope:
        """Delete a counterparty. The API only allows this for recipients."""
        return await self._request(
            NovaPoshtaModel.COUNTERPARTY, NovaPoshtaMethod.DELETE, {"Ref": ref}
        )
