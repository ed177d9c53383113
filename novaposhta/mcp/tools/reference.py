"""Reference tools: dictionaries needed to fill in waybills."""

from fastmcp import Context

from novaposhta.client import ResponseEnvelope
from novaposhta.client.models.returns import PaymentMethod
from novaposhta.mcp.utils import get_client, raise_for_response, tool_errors
from novaposhta.mcp.validation import require_date, require_string


def _listing(response: ResponseEnvelope, key: str) -> dict:
    raise_for_response(response, "Nova Poshta API returned an error")
    return {"total": len(response.data), key: response.data}


async def reference_get_cargo_types(ctx: Context) -> dict:
    """Cargo types (Parcel, Documents, Cargo, Pallet, TiresWheels)."""
    with tool_errors("Reference", "reference_get_cargo_types"):
        return _listing(await get_client(ctx).reference.get_cargo_types(), "cargo_types")


async def reference_get_service_types(ctx: Context) -> dict:
    """Delivery technologies (WarehouseWarehouse, WarehouseDoors, ...)."""
    with tool_errors("Reference", "reference_get_service_types"):
        return _listing(await get_client(ctx).reference.get_service_types(), "service_types")


async def reference_get_payment_methods(ctx: Context) -> dict:
    """Payment methods accepted for waybills and returns."""
    return {"payment_methods": [method.value for method in PaymentMethod]}


async def reference_get_pallet_types(ctx: Context) -> dict:
    with tool_errors("Reference", "reference_get_pallet_types"):
        return _listing(await get_client(ctx).reference.get_pallets_list(), "pallets")


async def reference_get_time_intervals(
    recipient_city_ref: str, ctx: Context, date_time: str | None = None
) -> dict:
    """Delivery time windows in a recipient city. Needs an API key."""
    with tool_errors("Reference", "reference_get_time_intervals"):
        recipient_city_ref = require_string(recipient_city_ref, "recipient_city_ref")
        date_time = require_date(date_time, "date_time") if date_time else None

        response = await get_client(ctx).reference.get_time_intervals(recipient_city_ref, date_time)
        raise_for_response(response, "Failed to get time intervals")

        return {"intervals": response.data}


async def reference_get_ownership_forms(ctx: Context) -> dict:
    """Legal ownership forms, needed to register an organization counterparty."""
    with tool_errors("Reference", "reference_get_ownership_forms"):
        return _listing(
            await get_client(ctx).reference.get_ownership_forms_list(), "ownership_forms"
        )


async def reference_decode_message(code: str, ctx: Context) -> dict:
    """Explain a Nova Poshta message code (as seen in errorCodes/warningCodes)."""
    with tool_errors("Reference", "reference_decode_message"):
        code = require_string(code, "code")
        decoded = await get_client(ctx).reference.decode_message_code(code)

        if decoded is None:
            return {"found": False, "code": code, "message": f"Message code {code} not found"}
        return {"found": True, **decoded}


async def reference_get_types_of_payers(ctx: Context) -> dict:
    with tool_errors("Reference", "reference_get_types_of_payers"):
        return _listing(await get_client(ctx).reference.get_types_of_payers(), "payer_types")


async def reference_get_payment_forms(ctx: Context) -> dict:
    with tool_errors("Reference", "reference_get_payment_forms"):
        return _listing(await get_client(ctx).reference.get_payment_forms(), "payment_forms")


async def reference_get_types_of_counterparties(ctx: Context) -> dict:
    with tool_errors("Reference", "reference_get_types_of_counterparties"):
        return _listing(
            await get_client(ctx).reference.get_types_of_counterparties(), "counterparty_types"
        )
