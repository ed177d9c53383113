"""Waybill tools: pricing, delivery dates, and the waybill lifecycle.

Create and update tools take the API payload as a ``request`` object with
the API's PascalCase field names (``PayerType``, ``CitySender``, ...).
"""

from typing import Any

from fastmcp import Context

from novaposhta.client import ResponseEnvelope
from novaposhta.client.models.waybill import DeliveryDateRequest, PriceRequest
from novaposhta.mcp.utils import first_record, get_client, raise_for_response, tool_errors
from novaposhta.mcp.validation import require_date, require_refs, require_string


def _price_request(
    city_sender: str,
    city_recipient: str,
    service_type: str,
    cargo_type: str,
    cost: float,
    weight: float,
    seats_amount: int,
    date_time: str | None,
) -> PriceRequest:
    return PriceRequest(
        city_sender=require_string(city_sender, "city_sender"),
        city_recipient=require_string(city_recipient, "city_recipient"),
        service_type=require_string(service_type, "service_type"),
        cargo_type=require_string(cargo_type, "cargo_type"),
        cost=cost,
        weight=weight,
        seats_amount=seats_amount,
        date_time=require_date(date_time, "date_time") if date_time else None,
    )


def _require_object(value: Any, field: str) -> dict[str, Any]:
    if not isinstance(value, dict) or not value:
        raise ValueError(f"{field} must be an object with valid Nova Poshta payload")
    return value


def _created(response: ResponseEnvelope) -> dict:
    return {
        "success": response.success,
        "refs": [item.get("Ref") for item in response.data if isinstance(item, dict)],
        "warnings": response.warnings,
    }


async def waybill_calculate_cost(
    city_sender: str,
    city_recipient: str,
    service_type: str,
    cargo_type: str,
    cost: float,
    weight: float,
    ctx: Context,
    seats_amount: int = 1,
    date_time: str | None = None,
) -> dict:
    """Delivery price and estimated delivery date for a shipment.

    Args:
        city_sender: Sender city ref.
        city_recipient: Recipient city ref.
        service_type: e.g. WarehouseWarehouse, WarehouseDoors.
        cargo_type: e.g. Parcel, Documents, Cargo.
        cost: Declared value in UAH.
        weight: Weight in kg.
        seats_amount: Number of seats (default 1).
        date_time: Shipping date, dd.mm.yyyy (default today).
    """
    with tool_errors("Waybill", "waybill_calculate_cost"):
        request = _price_request(
            city_sender, city_recipient, service_type, cargo_type, cost, weight, seats_amount, date_time
        )
        waybill = get_client(ctx).waybill
        price = await waybill.get_price(request)
        raise_for_response(price, "Failed to calculate cost")
        delivery = await waybill.get_delivery_date(
            DeliveryDateRequest(
                city_sender=request.city_sender,
                city_recipient=request.city_recipient,
                service_type=request.service_type,
                date_time=request.date_time,
            )
        )

        return {
            "success": price.success and delivery.success,
            "price": first_record(price),
            "delivery_date": first_record(delivery),
        }


async def waybill_get_estimate(
    city_sender: str,
    city_recipient: str,
    service_type: str,
    cargo_type: str,
    cost: float,
    weight: float,
    ctx: Context,
    seats_amount: int = 1,
    date_time: str | None = None,
) -> dict:
    """Price and delivery date for the same shipment date."""
    with tool_errors("Waybill", "waybill_get_estimate"):
        request = _price_request(
            city_sender, city_recipient, service_type, cargo_type, cost, weight, seats_amount, date_time
        )
        estimate = await get_client(ctx).waybill.get_estimate(request)
        price, delivery = estimate["price"], estimate["delivery_date"]

        return {
            "success": price.success and delivery.success,
            "price": first_record(price),
            "delivery_date": first_record(delivery),
            "errors": price.errors + delivery.errors,
        }


async def waybill_get_delivery_date(
    city_sender: str,
    city_recipient: str,
    service_type: str,
    ctx: Context,
    date_time: str | None = None,
) -> dict:
    """Estimated delivery date between two cities."""
    with tool_errors("Waybill", "waybill_get_delivery_date"):
        request = DeliveryDateRequest(
            city_sender=require_string(city_sender, "city_sender"),
            city_recipient=require_string(city_recipient, "city_recipient"),
            service_type=require_string(service_type, "service_type"),
            date_time=require_date(date_time, "date_time") if date_time else None,
        )
        response = await get_client(ctx).waybill.get_delivery_date(request)
        raise_for_response(response, "Failed to get delivery date")

        return {
            "success": True,
            "delivery_date": first_record(response),
            "warnings": response.warnings,
        }


async def waybill_create(request: dict[str, Any], ctx: Context) -> dict:
    """Create a standard waybill. Needs an API key."""
    with tool_errors("Waybill", "waybill_create"):
        response = await get_client(ctx).waybill.create(_require_object(request, "request"))
        raise_for_response(response, "Failed to create waybill")
        return _created(response)


async def waybill_create_with_options(request: dict[str, Any], ctx: Context) -> dict:
    """Create a waybill with cash on delivery, third-party payer or RedBox options."""
    with tool_errors("Waybill", "waybill_create_with_options"):
        response = await get_client(ctx).waybill.create_with_options(
            _require_object(request, "request")
        )
        raise_for_response(response, "Failed to create waybill")
        return _created(response)


async def waybill_create_for_postomat(request: dict[str, Any], ctx: Context) -> dict:
    """Create a waybill to a postomat.

    ``OptionsSeat`` with per-seat dimensions is required. Parcels over
    30 kg, larger than 40x60x30 cm, or declared above 10000 UAH are
    rejected before the call.
    """
    with tool_errors("Waybill", "waybill_create_for_postomat"):
        response = await get_client(ctx).waybill.create_for_postomat(
            _require_object(request, "request")
        )
        raise_for_response(response, "Failed to create postomat waybill")
        return _created(response)


async def waybill_create_batch(requests: list[dict[str, Any]], ctx: Context) -> dict:
    """Create several waybills; each one succeeds or fails on its own."""
    with tool_errors("Waybill", "waybill_create_batch"):
        if not requests:
            raise ValueError("requests must contain at least one waybill request")
        payloads = [_require_object(item, f"requests[{i}]") for i, item in enumerate(requests)]

        await ctx.info(f"Creating {len(payloads)} waybills")
        responses = await get_client(ctx).waybill.create_batch(payloads)

        successful = sum(1 for r in responses if r.success)
        return {
            "summary": {
                "total": len(responses),
                "successful": successful,
                "failed": len(responses) - successful,
            },
            "results": [r.to_wire() for r in responses],
        }


async def waybill_update(request: dict[str, Any], ctx: Context) -> dict:
    """Update a waybill. ``Ref`` plus the fields to change. Needs an API key."""
    with tool_errors("Waybill", "waybill_update"):
        response = await get_client(ctx).waybill.update(_require_object(request, "request"))
        raise_for_response(response, "Failed to update waybill")

        return {"success": True, "updated": len(response.data), "warnings": response.warnings}


async def waybill_delete(document_refs: list[str], ctx: Context) -> dict:
    """Delete waybills by document ref. Needs an API key."""
    with tool_errors("Waybill", "waybill_delete"):
        refs = require_refs(document_refs, "document_refs")
        response = await get_client(ctx).waybill.delete(refs)
        raise_for_response(response, "Failed to delete waybills")

        return {"success": True, "deleted": len(response.data)}


async def waybill_delete_batch(document_refs: list[str], ctx: Context) -> dict:
    """Delete many waybills in one call. Needs an API key."""
    with tool_errors("Waybill", "waybill_delete_batch"):
        refs = require_refs(document_refs, "document_refs")
        response = await get_client(ctx).waybill.delete_batch(refs)
        raise_for_response(response, "Failed to delete waybills")

        return {"success": True, "deleted": len(response.data)}
