"""Counterparty tools. Every tool here needs an API key."""

from typing import Any

from fastmcp import Context

from novaposhta.mcp.utils import first_record, get_client, raise_for_response, tool_errors
from novaposhta.mcp.validation import optional_phone, require_string


def _drop_none(**fields: Any) -> dict[str, Any]:
    return {key: value for key, value in fields.items() if value is not None}


async def counterparty_get_counterparties(
    counterparty_property: str,
    ctx: Context,
    page: int | None = None,
    find_by_string: str | None = None,
    city_ref: str | None = None,
) -> dict:
    """List counterparties of one kind: Sender, Recipient or ThirdPerson."""
    with tool_errors("Counterparty", "counterparty_get_counterparties"):
        response = await get_client(ctx).counterparty.get_counterparties(
            require_string(counterparty_property, "counterparty_property"),
            page=page,
            find_by_string=find_by_string,
            city_ref=city_ref,
        )
        raise_for_response(response, "Failed to get counterparties")

        counterparties = [
            {
                "ref": item.get("Ref"),
                "description": item.get("Description"),
                "city": item.get("City"),
                "counterparty_type": item.get("CounterpartyType"),
                "ownership_form": item.get("OwnershipForm"),
                "ownership_form_description": item.get("OwnershipFormDescription"),
                "edrpou": item.get("EDRPOU"),
            }
            for item in response.data
        ]
        return {"total": len(counterparties), "counterparties": counterparties}


async def counterparty_get_addresses(
    ref: str,
    ctx: Context,
    counterparty_property: str | None = None,
    page: int | None = None,
) -> dict:
    """Addresses registered for a counterparty."""
    with tool_errors("Counterparty", "counterparty_get_addresses"):
        response = await get_client(ctx).counterparty.get_counterparty_addresses(
            require_string(ref, "ref"), counterparty_property=counterparty_property, page=page
        )
        raise_for_response(response, "Failed to get counterparty addresses")

        addresses = [
            {
                "ref": item.get("Ref"),
                "description": item.get("Description"),
                "streets_type": item.get("StreetsType"),
                "streets_type_description": item.get("StreetsTypeDescription"),
            }
            for item in response.data
        ]
        return {"total": len(addresses), "addresses": addresses}


async def counterparty_get_contact_persons(ref: str, ctx: Context, page: int | None = None) -> dict:
    """Contact people of a counterparty."""
    with tool_errors("Counterparty", "counterparty_get_contact_persons"):
        response = await get_client(ctx).counterparty.get_counterparty_contact_persons(
            require_string(ref, "ref"), page=page
        )
        raise_for_response(response, "Failed to get contact persons")

        contact_persons = [
            {
                "ref": item.get("Ref"),
                "description": item.get("Description"),
                "phones": item.get("Phones"),
                "email": item.get("Email"),
                "last_name": item.get("LastName"),
                "first_name": item.get("FirstName"),
                "middle_name": item.get("MiddleName"),
            }
            for item in response.data
        ]
        return {"total": len(contact_persons), "contact_persons": contact_persons}


async def counterparty_save(
    counterparty_type: str,
    counterparty_property: str,
    phone: str,
    ctx: Context,
    first_name: str | None = None,
    last_name: str | None = None,
    middle_name: str | None = None,
    email: str | None = None,
    ownership_form: str | None = None,
    edrpou: str | None = None,
) -> dict:
    """Create a counterparty.

    A PrivatePerson needs first and last name. An Organization needs
    ownership_form and edrpou.
    """
    with tool_errors("Counterparty", "counterparty_save"):
        if counterparty_type not in ("PrivatePerson", "Organization"):
            raise ValueError(
                f"Invalid counterparty_type: {counterparty_type}. Must be PrivatePerson or Organization."
            )
        request = _drop_none(
            CounterpartyType=counterparty_type,
            CounterpartyProperty=counterparty_property,
            Phone=optional_phone(require_string(phone, "phone")),
            FirstName=first_name,
            LastName=last_name,
            MiddleName=middle_name,
            Email=email,
            OwnershipForm=ownership_form,
            EDRPOU=edrpou,
        )
        response = await get_client(ctx).counterparty.save(request)
        raise_for_response(response, "Failed to save counterparty")

        record = first_record(response)
        return {"success": True, "ref": record.get("Ref"), "description": record.get("Description")}


async def counterparty_update(
    ref: str,
    counterparty_property: str,
    ctx: Context,
    first_name: str | None = None,
    middle_name: str | None = None,
    last_name: str | None = None,
    phone: str | None = None,
    email: str | None = None,
) -> dict:
    """Edit a counterparty's name or contacts."""
    with tool_errors("Counterparty", "counterparty_update"):
        request = _drop_none(
            Ref=require_string(ref, "ref"),
            CounterpartyProperty=counterparty_property,
            FirstName=first_name,
            MiddleName=middle_name,
            LastName=last_name,
            Phone=optional_phone(phone),
            Email=email,
        )
        response = await get_client(ctx).counterparty.update(request)
        raise_for_response(response, "Failed to update counterparty")

        record = first_record(response)
        return {"success": True, "ref": record.get("Ref"), "description": record.get("Description")}


async def counterparty_delete(ref: str, ctx: Context) -> dict:
    """Delete a recipient counterparty."""
    with tool_errors("Counterparty", "counterparty_delete"):
        response = await get_client(ctx).counterparty.delete(require_string(ref, "ref"))
        raise_for_response(response, "Failed to delete counterparty")

        return {"success": True, "message": "Counterparty deleted successfully"}


async def counterparty_get_options(ref: str, ctx: Context) -> dict:
    """Contract options of a counterparty."""
    with tool_errors("Counterparty", "counterparty_get_options"):
        response = await get_client(ctx).counterparty.get_counterparty_options(require_string(ref, "ref"))
        raise_for_response(response, "Failed to get counterparty options")

        return {"success": True, "data": first_record(response)}
