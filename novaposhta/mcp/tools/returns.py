"""Return order tools. Every tool here needs an API key."""

from typing import Any

from fastmcp import Context

from novaposhta.client import ResponseEnvelope
from novaposhta.mcp.utils import first_record, get_client, tool_errors
from novaposhta.mcp.validation import require_string


def _order_base(
    int_doc_number: str, payment_method: str, reason: str, subtype_reason: str, note: str | None
) -> dict[str, Any]:
    base = {
        "IntDocNumber": require_string(int_doc_number, "int_doc_number"),
        "PaymentMethod": require_string(payment_method, "payment_method"),
        "Reason": require_string(reason, "reason"),
        "SubtypeReason": require_string(subtype_reason, "subtype_reason"),
    }
    if note:
        base["Note"] = note
    return base


def _created(response: ResponseEnvelope) -> dict:
    record = first_record(response)
    return {
        "success": response.success,
        "order_number": record.get("Number"),
        "order_ref": record.get("Ref"),
        "errors": response.errors,
    }


def _priced(response: ResponseEnvelope) -> dict:
    record = first_record(response)
    return {
        "success": response.success,
        "scheduled_delivery_date": record.get("ScheduledDeliveryDate"),
        "pricing": record.get("Pricing"),
        "errors": response.errors,
    }


async def return_get_list(
    ctx: Context,
    number: str | None = None,
    ref: str | None = None,
    begin_date: str | None = None,
    end_date: str | None = None,
    page: int | None = None,
    limit: int | None = None,
) -> dict:
    """List return orders, optionally filtered by number, ref or date range."""
    with tool_errors("Return", "return_get_list"):
        request = {
            "Number": number,
            "Ref": ref,
            "BeginDate": begin_date,
            "EndDate": end_date,
            "Page": str(page) if page is not None else None,
            "Limit": str(limit) if limit is not None else None,
        }
        response = await get_client(ctx).return_.get_list(request)

        return {
            "success": response.success,
            "count": len(response.data),
            "orders": response.data,
            "errors": response.errors,
        }


async def return_check_possibility(number: str, ctx: Context) -> dict:
    """Check whether a return can be ordered for a waybill.

    Returns:
        Dictionary with can_return and the addresses the parcel may go back to.
    """
    with tool_errors("Return", "return_check_possibility"):
        response = await get_client(ctx).return_.check_possibility(require_string(number, "number"))

        return {
            "success": response.success,
            "can_return": response.success and len(response.data) > 0,
            "addresses": response.data,
            "errors": response.errors,
        }


async def return_create_to_sender_address(
    int_doc_number: str,
    payment_method: str,
    reason: str,
    subtype_reason: str,
    return_address_ref: str,
    ctx: Context,
    note: str | None = None,
) -> dict:
    """Return a parcel to an address offered by return_check_possibility."""
    with tool_errors("Return", "return_create_to_sender_address"):
        request = _order_base(int_doc_number, payment_method, reason, subtype_reason, note)
        request["ReturnAddressRef"] = require_string(return_address_ref, "return_address_ref")

        response = await get_client(ctx).return_.create_to_sender_address(request)
        return _created(response)


async def return_create_to_new_address(
    int_doc_number: str,
    payment_method: str,
    reason: str,
    subtype_reason: str,
    recipient_settlement: str,
    recipient_settlement_street: str,
    building_number: str,
    ctx: Context,
    note_address_recipient: str | None = None,
    note: str | None = None,
) -> dict:
    """Return a parcel to a new street address."""
    with tool_errors("Return", "return_create_to_new_address"):
        request = _order_base(int_doc_number, payment_method, reason, subtype_reason, note)
        request["RecipientSettlement"] = require_string(recipient_settlement, "recipient_settlement")
        request["RecipientSettlementStreet"] = require_string(
            recipient_settlement_street, "recipient_settlement_street"
        )
        request["BuildingNumber"] = require_string(building_number, "building_number")
        if note_address_recipient:
            request["NoteAddressRecipient"] = note_address_recipient

        response = await get_client(ctx).return_.create_to_new_address(request)
        return _created(response)


async def return_create_to_warehouse(
    int_doc_number: str,
    payment_method: str,
    reason: str,
    subtype_reason: str,
    recipient_warehouse: str,
    ctx: Context,
    note: str | None = None,
) -> dict:
    """Return a parcel to a Nova Poshta warehouse."""
    with tool_errors("Return", "return_create_to_warehouse"):
        request = _order_base(int_doc_number, payment_method, reason, subtype_reason, note)
        request["RecipientWarehouse"] = require_string(recipient_warehouse, "recipient_warehouse")

        response = await get_client(ctx).return_.create_to_warehouse(request)
        return _created(response)


async def return_update(
    ref: str,
    int_doc_number: str,
    payment_method: str,
    reason: str,
    subtype_reason: str,
    ctx: Context,
    only_get_pricing: bool | None = None,
    recipient_settlement: str | None = None,
    recipient_warehouse: str | None = None,
    recipient_settlement_street: str | None = None,
    building_number: str | None = None,
    note_address_recipient: str | None = None,
) -> dict:
    """Edit a return order while it is still Accepted."""
    with tool_errors("Return", "return_update"):
        request = _order_base(int_doc_number, payment_method, reason, subtype_reason, None)
        request["Ref"] = require_string(ref, "ref")
        optional = {
            "OnlyGetPricing": only_get_pricing,
            "RecipientSettlement": recipient_settlement,
            "RecipientWarehouse": recipient_warehouse,
            "RecipientSettlementStreet": recipient_settlement_street,
            "BuildingNumber": building_number,
            "NoteAddressRecipient": note_address_recipient,
        }
        request.update({key: value for key, value in optional.items() if value is not None})

        response = await get_client(ctx).return_.update(request)
        return _priced(response)


async def return_get_pricing(
    ref: str,
    int_doc_number: str,
    payment_method: str,
    reason: str,
    subtype_reason: str,
    ctx: Context,
    recipient_settlement: str | None = None,
    recipient_warehouse: str | None = None,
) -> dict:
    """Price a change to a return order without applying it."""
    with tool_errors("Return", "return_get_pricing"):
        request = _order_base(int_doc_number, payment_method, reason, subtype_reason, None)
        request["Ref"] = require_string(ref, "ref")
        if recipient_settlement:
            request["RecipientSettlement"] = recipient_settlement
        if recipient_warehouse:
            request["RecipientWarehouse"] = recipient_warehouse

        response = await get_client(ctx).return_.get_pricing(request)
        return _priced(response)
