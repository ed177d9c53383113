"""Tracking tools: live status, batch tracking, movement history."""

from fastmcp import Context

from novaposhta.mcp.utils import get_client, raise_for_response, tool_errors
from novaposhta.mcp.validation import (
    optional_phone,
    require_date,
    require_tracking_number,
    require_tracking_numbers,
)

# getMovementOfDocuments accepts at most this many numbers
MAX_MOVEMENT_DOCUMENTS = 10


async def track_document(document_number: str, ctx: Context, phone: str | None = None) -> dict:
    """Track a single Nova Poshta document.

    Args:
        document_number: 14-digit tracking number.
        phone: Optional sender or recipient phone (380XXXXXXXXX); unlocks
            the full record.

    Returns:
        Dictionary with found flag and the key fields of the tracking
        record (status, city, warehouse, dates, weight, cost).
    """
    with tool_errors("Tracking", "track_document"):
        number = require_tracking_number(document_number)
        phone = optional_phone(phone)

        await ctx.info(f"Tracking document {number}")
        record = await get_client(ctx).tracking.track_document(number, phone)

        if record is None:
            return {"found": False, "number": number, "message": f"Document {number} not found"}

        return {
            "found": True,
            "number": record.get("Number"),
            "status": record.get("Status"),
            "status_code": record.get("StatusCode"),
            "city": record.get("CityRecipient"),
            "warehouse": record.get("WarehouseRecipient"),
            "scheduled_delivery_date": record.get("ScheduledDeliveryDate"),
            "actual_delivery_date": record.get("ActualDeliveryDate"),
            "recipient_date_time": record.get("RecipientDateTime"),
            "weight": record.get("DocumentWeight"),
            "cost": record.get("DocumentCost"),
        }


async def track_multiple_documents(document_numbers: list[str], ctx: Context) -> dict:
    """Track several documents in one raw API call.

    Returns:
        Dictionary with success, errors and the number of records returned.
    """
    with tool_errors("Tracking", "track_multiple_documents"):
        numbers = require_tracking_numbers(document_numbers)

        await ctx.info(f"Tracking {len(numbers)} documents")
        response = await get_client(ctx).tracking.track_documents(numbers)

        return {
            "success": response.success,
            "errors": response.errors,
            "tracked": len(response.data),
            "documents": response.data,
        }


async def track_multiple(document_numbers: list[str], ctx: Context) -> dict:
    """Track many documents and classify them by delivery stage.

    Returns:
        Dictionary with successful and failed counts, the failed numbers,
        API errors of rejected chunks, and statistics (delivered, in transit, at warehouse, unknown).
    """
    with tool_errors("Tracking", "track_multiple"):
        numbers = require_tracking_numbers(document_numbers)

        await ctx.info(f"Batch tracking {len(numbers)} documents")
        result = await get_client(ctx).tracking.track_multiple(numbers)

        return {
            "successful": len(result.successful),
            "failed": len(result.failed),
            "failed_numbers": result.failed,
            "errors": result.errors,
            "statistics": result.statistics.model_dump(),
        }


async def get_document_movement(
    document_numbers: list[str],
    ctx: Context,
    show_delivery_details: bool = False,
) -> dict:
    """Movement history (checkpoints with timestamps) for up to 10 documents."""
    with tool_errors("Tracking", "get_document_movement"):
        numbers = require_tracking_numbers(document_numbers)
        if len(numbers) > MAX_MOVEMENT_DOCUMENTS:
            raise ValueError(
                f"document_numbers accepts at most {MAX_MOVEMENT_DOCUMENTS} numbers, got {len(numbers)}"
            )

        response = await get_client(ctx).tracking.get_document_movement(
            numbers, show_delivery_details=show_delivery_details
        )
        raise_for_response(response, "Failed to get document movement")

        return {"success": True, "entries": len(response.data), "movement": response.data}


async def get_document_list(
    date_from: str,
    date_to: str,
    ctx: Context,
    page: int | None = None,
    get_full_list: bool = False,
) -> dict:
    """List documents created between two dates (dd.mm.yyyy). Needs an API key.

    Args:
        date_from: Start date, dd.mm.yyyy.
        date_to: End date, dd.mm.yyyy.
        page: Page number (default 1).
        get_full_list: Ignore pagination and return everything (may be slow).
    """
    with tool_errors("Tracking", "get_document_list"):
        date_from = require_date(date_from, "date_from")
        date_to = require_date(date_to, "date_to")

        response = await get_client(ctx).tracking.get_document_list(
            date_from, date_to, page=page, get_full_list=get_full_list
        )
        raise_for_response(response, "Failed to get document list")

        return {"success": True, "total": len(response.data), "documents": response.data}
