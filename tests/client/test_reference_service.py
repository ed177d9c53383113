"""Tests for ReferenceService."""

import pytest

from tests.helpers import fail, ok

MESSAGE_CODES = [
    {
        "MessageCode": "20000200039",
        "MessageText": "Document number is not correct",
        "MessageDescriptionUA": "Номер документа некоректний",
        "MessageDescriptionRU": "Номер документа некорректный",
    },
]


class TestDictionaries:
    """Test the no-argument Common lookups."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method,called",
        [
            ("get_cargo_types", "getCargoTypes"),
            ("get_service_types", "getServiceTypes"),
            ("get_pallets_list", "getPalletsList"),
            ("get_ownership_forms_list", "getOwnershipFormsList"),
            ("get_tires_wheels_list", "getTiresWheelsList"),
            ("get_backward_delivery_cargo_types", "getBackwardDeliveryCargoTypes"),
            ("get_types_of_payers", "getTypesOfPayers"),
            ("get_types_of_payers_for_redelivery", "getTypesOfPayersForRedelivery"),
            ("get_payment_forms", "getPaymentForms"),
            ("get_types_of_counterparties", "getTypesOfCounterparties"),
        ],
    )
    async def test_common_lookup(self, client, transport, method, called):
        """Test each lookup calls the matching Common method with no properties."""
        await getattr(client.reference, method)()

        assert transport.last_body["modelName"] == "Common"
        assert transport.last_body["calledMethod"] == called
        assert transport.last_properties == {}


class TestFilteredLookups:
    """Test lookups that take arguments."""

    @pytest.mark.asyncio
    async def test_pack_list_drops_missing_dimensions(self, client, transport):
        await client.reference.get_pack_list(length=100, width=200)

        assert transport.last_properties == {"Length": 100, "Width": 200}

    @pytest.mark.asyncio
    async def test_cargo_description_list(self, client, transport):
        await client.reference.get_cargo_description_list("книги", page=2)

        assert transport.last_properties == {"FindByString": "книги", "Page": 2}

    @pytest.mark.asyncio
    async def test_time_intervals(self, client, transport):
        await client.reference.get_time_intervals("city-ref", "21.10.2026")

        assert transport.last_body["calledMethod"] == "getTimeIntervals"
        assert transport.last_properties == {"RecipientCityRef": "city-ref", "DateTime": "21.10.2026"}

    @pytest.mark.asyncio
    async def test_pickup_time_intervals(self, client, transport):
        await client.reference.get_pickup_time_intervals("city-ref")

        assert transport.last_body["calledMethod"] == "getPickupTimeIntervals"
        assert transport.last_properties == {"SenderCityRef": "city-ref"}


class TestMessageCodes:
    """Test message code decoding."""

    @pytest.mark.asyncio
    async def test_decode_known_code(self, client, transport):
        """Test a known code is returned with both descriptions."""
        transport.queue(ok(*MESSAGE_CODES))

        decoded = await client.reference.decode_message_code(" 20000200039 ")

        assert transport.last_body["modelName"] == "CommonGeneral"
        assert transport.last_body["calledMethod"] == "getMessageCodeText"
        assert decoded == {
            "code": "20000200039",
            "text": "Document number is not correct",
            "description_ua": "Номер документа некоректний",
            "description_ru": "Номер документа некорректный",
        }

    @pytest.mark.asyncio
    async def test_decode_unknown_code(self, client, transport):
        transport.queue(ok(*MESSAGE_CODES))

        assert await client.reference.decode_message_code("1") is None

    @pytest.mark.asyncio
    async def test_decode_when_lookup_fails(self, client, transport):
        transport.queue(fail("API key expired"))

        assert await client.reference.decode_message_code("20000200039") is None
