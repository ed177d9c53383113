"""Tests for WaybillService."""

import pytest
from pydantic import ValidationError

from novaposhta.client.models.waybill import PostomatWaybillRequest, PriceRequest, postomat_violations
from novaposhta.client.services.waybill import WaybillService
from novaposhta.errors import NovaPoshtaError
from tests.helpers import ok


def waybill_payload(**overrides):
    payload = {
        "PayerType": "Sender",
        "PaymentMethod": "Cash",
        "DateTime": "20.10.2026",
        "CargoType": "Parcel",
        "Weight": 1.5,
        "ServiceType": "WarehouseWarehouse",
        "SeatsAmount": 1,
        "Description": "Books",
        "Cost": 500,
        "CitySender": "city-a",
        "Sender": "sender-ref",
        "SenderAddress": "warehouse-a",
        "ContactSender": "contact-a",
        "SendersPhone": "380501234567",
        "CityRecipient": "city-b",
        "Recipient": "recipient-ref",
        "RecipientAddress": "warehouse-b",
        "ContactRecipient": "contact-b",
        "RecipientsPhone": "380671234567",
    }
    payload.update(overrides)
    return payload


def postomat_payload(**overrides):
    seat = {"volumetricWidth": 20, "volumetricLength": 30, "volumetricHeight": 10, "weight": 2}
    return waybill_payload(OptionsSeat=[seat], **overrides)


PRICE = {
    "CitySender": "city-a",
    "CityRecipient": "city-b",
    "ServiceType": "WarehouseWarehouse",
    "CargoType": "Parcel",
    "Cost": 500,
    "Weight": 2,
    "DateTime": "20.10.2026",
}


class TestPricing:
    """Test price and delivery date requests."""

    @pytest.mark.asyncio
    async def test_get_price_from_mapping(self, client, transport):
        """Test a PascalCase mapping is validated and sent."""
        transport.queue(ok({"Cost": 70}))

        response = await client.waybill.get_price(PRICE)

        assert response.data == [{"Cost": 70}]
        assert transport.last_body["modelName"] == "InternetDocument"
        assert transport.last_body["calledMethod"] == "getDocumentPrice"
        assert transport.last_properties == {**PRICE, "Cost": 500.0, "Weight": 2.0, "SeatsAmount": 1}

    @pytest.mark.asyncio
    async def test_get_price_rejects_zero_weight(self, client, transport):
        """Test local validation fails before any request."""
        with pytest.raises(ValidationError):
            await client.waybill.get_price({**PRICE, "Weight": 0})

        assert transport.requests == []

    @pytest.mark.asyncio
    async def test_get_estimate_makes_both_calls(self, client, transport):
        """Test estimate calls price then delivery date with the same cities and date."""
        transport.queue(ok({"Cost": 70}), ok({"DeliveryDate": {"date": "2026-10-22"}}))

        estimate = await client.waybill.get_estimate(PriceRequest.model_validate(PRICE))

        assert estimate["price"].data == [{"Cost": 70}]
        assert estimate["delivery_date"].data[0]["DeliveryDate"]["date"] == "2026-10-22"
        assert [b["calledMethod"] for b in transport.bodies] == [
            "getDocumentPrice",
            "getDocumentDeliveryDate",
        ]
        assert transport.last_properties == {
            "CitySender": "city-a",
            "CityRecipient": "city-b",
            "ServiceType": "WarehouseWarehouse",
            "DateTime": "20.10.2026",
        }


class TestCreate:
    """Test waybill creation variants."""

    @pytest.mark.asyncio
    async def test_create_sends_save(self, client, transport):
        """Test a standard waybill goes to InternetDocument.save."""
        transport.queue(ok({"Ref": "doc-ref", "IntDocNumber": "20450000000001"}))

        response = await client.waybill.create(waybill_payload())

        assert response.data[0]["Ref"] == "doc-ref"
        assert transport.last_body["calledMethod"] == "save"
        assert transport.last_properties["SendersPhone"] == "380501234567"

    @pytest.mark.asyncio
    async def test_unknown_fields_forwarded(self, client, transport):
        """Test less common API fields are sent verbatim."""
        await client.waybill.create(waybill_payload(AdditionalInformation="fragile"))

        assert transport.last_properties["AdditionalInformation"] == "fragile"

    @pytest.mark.asyncio
    async def test_create_with_options(self, client, transport):
        """Test cash on delivery data is sent."""
        backward = [{"PayerType": "Recipient", "CargoType": "Money", "RedeliveryString": "500"}]

        await client.waybill.create_with_options(waybill_payload(BackwardDeliveryData=backward))

        assert transport.last_properties["BackwardDeliveryData"] == backward

    @pytest.mark.asyncio
    async def test_postomat_within_limits(self, client, transport):
        """Test a postomat waybill inside the limits is sent."""
        await client.waybill.create_for_postomat(postomat_payload())

        assert transport.last_properties["OptionsSeat"][0]["volumetricWidth"] == 20.0

    @pytest.mark.asyncio
    async def test_postomat_over_limits_rejected(self, client, transport):
        """Test every violated limit is reported and nothing is sent."""
        seat = {"volumetricWidth": 50, "volumetricLength": 30, "volumetricHeight": 10, "weight": 2}

        with pytest.raises(NovaPoshtaError) as exc_info:
            await client.waybill.create_for_postomat(
                waybill_payload(OptionsSeat=[seat], Weight=31, Cost=15000)
            )

        assert exc_info.value.code == "E-2004"
        assert "weight 31.0 kg exceeds 30 kg" in exc_info.value.message
        assert "declared cost 15000 UAH exceeds 10000 UAH" in exc_info.value.message
        assert "seat 1 is 50x30x10 cm" in exc_info.value.message
        assert transport.requests == []

    def test_postomat_requires_seats(self):
        """Test OptionsSeat is mandatory for postomat delivery."""
        with pytest.raises(ValidationError):
            PostomatWaybillRequest.model_validate(waybill_payload())

    def test_postomat_violations_empty_when_valid(self):
        assert postomat_violations(PostomatWaybillRequest.model_validate(postomat_payload())) == []


class TestBatchAndLifecycle:
    """Test batch creation, update and delete."""

    @pytest.mark.asyncio
    async def test_batch_isolates_invalid_items(self, client, transport):
        """Test an invalid item fails alone and the rest still go out."""
        transport.queue(ok({"Ref": "first"}), ok({"Ref": "third"}))
        invalid = waybill_payload()
        del invalid["Recipient"]

        results = await client.waybill.create_batch([waybill_payload(), invalid, waybill_payload()])

        assert [r.success for r in results] == [True, False, True]
        assert results[1].error_codes == ["E-2003"]
        assert results[1].errors[0].startswith("Waybill 1 is invalid")
        assert len(transport.requests) == 2

    @pytest.mark.asyncio
    async def test_update_requires_ref(self, client, transport):
        """Test update without Ref fails locally."""
        with pytest.raises(ValidationError):
            await client.waybill.update({"Weight": 2})

    @pytest.mark.asyncio
    async def test_update_forwards_changes(self, client, transport):
        await client.waybill.update({"Ref": "doc-ref", "Description": "Toys"})

        assert transport.last_body["calledMethod"] == "update"
        assert transport.last_properties == {"Ref": "doc-ref", "Description": "Toys"}

    @pytest.mark.asyncio
    async def test_delete(self, client, transport):
        await client.waybill.delete_batch(["ref-1", "ref-2"])

        assert transport.last_body["calledMethod"] == "delete"
        assert transport.last_properties == {"DocumentRefs": ["ref-1", "ref-2"]}

    @pytest.mark.asyncio
    async def test_delete_requires_refs(self, client):
        with pytest.raises(ValidationError):
            await client.waybill.delete([])

    def test_validate_waybill(self):
        """Test validate_waybill reports local validity without sending."""
        assert WaybillService.validate_waybill(waybill_payload()) is True
        assert WaybillService.validate_waybill(waybill_payload(SeatsAmount=0)) is False
