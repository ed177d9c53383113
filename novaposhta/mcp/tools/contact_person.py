"""Contact person tools. Every tool here needs an API key."""

from fastmcp import Context

from novaposhta.mcp.utils import first_record, get_client, raise_for_response, tool_errors
from novaposhta.mcp.validation import optional_phone, require_string


async def contact_person_save(
    counterparty_ref: str,
    first_name: str,
    last_name: str,
    phone: str,
    ctx: Context,
    middle_name: str | None = None,
    email: str | None = None,
) -> dict:
    """Add a contact person to a counterparty."""
    with tool_errors("Contact person", "contact_person_save"):
        response = await get_client(ctx).contact_person.save(
            {
                "CounterpartyRef": require_string(counterparty_ref, "counterparty_ref"),
                "FirstName": require_string(first_name, "first_name"),
                "LastName": require_string(last_name, "last_name"),
                "Phone": optional_phone(require_string(phone, "phone")),
                "MiddleName": middle_name,
                "Email": email,
            }
        )
        raise_for_response(response, "Failed to save contact person")

        record = first_record(response)
        return {"success": True, "ref": record.get("Ref"), "description": record.get("Description")}


async def contact_person_update(
    ref: str,
    counterparty_ref: str,
    ctx: Context,
    first_name: str | None = None,
    middle_name: str | None = None,
    last_name: str | None = None,
    phone: str | None = None,
    email: str | None = None,
) -> dict:
    """Edit a contact person."""
    with tool_errors("Contact person", "contact_person_update"):
        response = await get_client(ctx).contact_person.update(
            {
                "Ref": require_string(ref, "ref"),
                "CounterpartyRef": require_string(counterparty_ref, "counterparty_ref"),
                "FirstName": first_name,
                "MiddleName": middle_name,
                "LastName": last_name,
                "Phone": optional_phone(phone),
                "Email": email,
            }
        )
        raise_for_response(response, "Failed to update contact person")

        record = first_record(response)
        return {"success": True, "ref": record.get("Ref"), "description": record.get("Description")}


async def contact_person_delete(ref: str, counterparty_ref: str, ctx: Context) -> dict:
    """Remove a contact person from a counterparty."""
    with tool_errors("Contact person", "contact_person_delete"):
        response = await get_client(ctx).contact_person.delete(
            require_string(ref, "ref"), require_string(counterparty_ref, "counterparty_ref")
        )
        raise_for_response(response, "Failed to delete contact person")

        return {"success": True, "message": "Contact person deleted successfully"}
