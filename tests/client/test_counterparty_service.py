"""Tests for CounterpartyService and ContactPersonService."""

import pytest
from pydantic import ValidationError

from tests.helpers import ok


class TestCounterpartyQueries:
    """Test counterparty listing calls."""

    @pytest.mark.asyncio
    async def test_get_counterparties(self, client, transport):
        await client.counterparty.get_counterparties("Recipient", page=1, find_by_string="Шевченко")

        assert transport.last_body["modelName"] == "Counterparty"
        assert transport.last_body["calledMethod"] == "getCounterparties"
        assert transport.last_properties == {
            "CounterpartyProperty": "Recipient",
            "Page": 1,
            "FindByString": "Шевченко",
        }

    @pytest.mark.asyncio
    async def test_unknown_property_rejected(self, client, transport):
        with pytest.raises(ValueError):
            await client.counterparty.get_counterparties("Buyer")

        assert transport.requests == []

    @pytest.mark.asyncio
    async def test_addresses_and_contacts(self, client, transport):
        await client.counterparty.get_counterparty_addresses("cp-ref", counterparty_property="Sender")
        assert transport.last_properties == {"Ref": "cp-ref", "CounterpartyProperty": "Sender"}

        await client.counterparty.get_counterparty_contact_persons("cp-ref", page=2)
        assert transport.last_body["calledMethod"] == "getCounterpartyContactPersons"
        assert transport.last_properties == {"Ref": "cp-ref", "Page": 2}

        await client.counterparty.get_counterparty_options("cp-ref")
        assert transport.last_body["calledMethod"] == "getCounterpartyOptions"


class TestCounterpartySave:
    """Test save picks the variant from CounterpartyType."""

    @pytest.mark.asyncio
    async def test_private_person(self, client, transport):
        transport.queue(ok({"Ref": "cp-ref", "Description": "Шевченко Тарас"}))

        response = await client.counterparty.save(
            {
                "CounterpartyType": "PrivatePerson",
                "CounterpartyProperty": "Recipient",
                "FirstName": "Тарас",
                "LastName": "Шевченко",
                "Phone": "380501234567",
            }
        )

        assert response.data[0]["Ref"] == "cp-ref"
        assert transport.last_body["calledMethod"] == "save"
        assert transport.last_properties["CounterpartyType"] == "PrivatePerson"

    @pytest.mark.asyncio
    async def test_organization(self, client, transport):
        await client.counterparty.save(
            {
                "CounterpartyType": "Organization",
                "CounterpartyProperty": "Recipient",
                "OwnershipForm": "form-ref",
                "EDRPOU": "12345678",
            }
        )

        assert transport.last_properties == {
            "CounterpartyType": "Organization",
            "CounterpartyProperty": "Recipient",
            "OwnershipForm": "form-ref",
            "EDRPOU": "12345678",
        }

    @pytest.mark.asyncio
    async def test_private_person_needs_names(self, client, transport):
        with pytest.raises(ValidationError):
            await client.counterparty.save(
                {"CounterpartyType": "PrivatePerson", "CounterpartyProperty": "Recipient", "Phone": "380501234567"}
            )

        assert transport.requests == []

    @pytest.mark.asyncio
    async def test_update_and_delete(self, client, transport):
        await client.counterparty.update({"Ref": "cp-ref", "CounterpartyProperty": "Recipient", "Email": "a@b.ua"})
        assert transport.last_body["calledMethod"] == "update"
        assert transport.last_properties["Email"] == "a@b.ua"

        await client.counterparty.delete("cp-ref")
        assert transport.last_body["calledMethod"] == "delete"
        assert transport.last_properties == {"Ref": "cp-ref"}


class TestContactPerson:
    """Test ContactPerson save, update and delete."""

    @pytest.mark.asyncio
    async def test_save(self, client, transport):
        await client.contact_person.save(
            {"CounterpartyRef": "cp-ref", "FirstName": "Леся", "LastName": "Українка", "Phone": "380671234567"}
        )

        assert transport.last_body["modelName"] == "ContactPerson"
        assert transport.last_body["calledMethod"] == "save"
        assert "MiddleName" not in transport.last_properties

    @pytest.mark.asyncio
    async def test_update_requires_ref(self, client):
        with pytest.raises(ValidationError):
            await client.contact_person.update({"CounterpartyRef": "cp-ref"})

    @pytest.mark.asyncio
    async def test_delete(self, client, transport):
        await client.contact_person.delete("person-ref", "cp-ref")

        assert transport.last_properties == {"Ref": "person-ref", "CounterpartyRef": "cp-ref"}
