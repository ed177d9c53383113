"""Contact person service (ContactPerson model)."""

from collections.abc import Mapping
from typing import Any

from novaposhta.client.core import Service
from novaposhta.client.enums import NovaPoshtaMethod, NovaPoshtaModel
from novaposhta.client.models.counterparty import (
    ContactPersonDeleteRequest,
    ContactPersonSaveRequest,
    ContactPersonUpdateRequest,
)
from novaposhta.client.response import ResponseEnvelope


class ContactPersonService(Service):
    """Contact people attached to a counterparty. Needs an API key."""

    namespace = "contact_person"

    async def save(self, request: ContactPersonSaveRequest | Mapping[str, Any]) -> ResponseEnvelope:
        if not isinstance(request, ContactPersonSaveRequest):
            request = ContactPersonSaveRequest.model_validate(request)
        return await self._request(
            NovaPoshtaModel.CONTACT_PERSON, NovaPoshtaMethod.SAVE, request.to_properties()
        )

    async def update(
        self, request: ContactPersonUpdateRequest | Mapping[str, Any]
    ) -> ResponseEnvelope:
        if not isinstance(request, ContactPersonUpdateRequest):
            request = ContactPersonUpdateRequest.model_validate(request)
        return await self._request(
            NovaPoshtaModel.CONTACT_PERSON, NovaPoshtaMethod.UPDATE, request.to_properties()
        )

    async def delete(self, ref: str, counterparty_ref: str) -> ResponseEnvelope:
        request = ContactPersonDeleteRequest(ref=ref, counterparty_ref=counterparty_ref)
        return await self._request(
            NovaPoshtaModel.CONTACT_PERSON, NovaPoshtaMethod.DELETE, request.to_properties()
        )
