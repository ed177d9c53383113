"""Scan sheet (registry) tools. Every tool here needs an API key.

Rejected documents do not flip ``success``; each tool reports them
separately using the scan sheet predicates.
"""

from fastmcp import Context

from novaposhta.client.services.scan_sheet import (
    has_delete_error,
    has_insert_errors,
    has_remove_errors,
    is_scan_sheet_empty,
    is_scan_sheet_printed,
)
from novaposhta.mcp.utils import first_record, get_client, raise_for_response, tool_errors
from novaposhta.mcp.validation import require_refs, require_string


async def scan_sheet_insert_documents(
    document_refs: list[str], ctx: Context, ref: str | None = None
) -> dict:
    """Add waybills to a scan sheet; creates a new sheet when ref is omitted."""
    with tool_errors("Scan sheet", "scan_sheet_insert_documents"):
        refs = require_refs(document_refs, "document_refs")
        response = await get_client(ctx).scan_sheet.insert_documents(refs, ref=ref or None)
        raise_for_response(response, "Failed to insert documents")

        record = first_record(response)
        return {
            "success": True,
            "ref": record.get("Ref"),
            "number": record.get("Number"),
            "has_errors": has_insert_errors(record),
            "data": response.data,
        }


async def scan_sheet_get(ref: str, ctx: Context, counterparty_ref: str | None = None) -> dict:
    """Details of one scan sheet."""
    with tool_errors("Scan sheet", "scan_sheet_get"):
        response = await get_client(ctx).scan_sheet.get_scan_sheet(
            require_string(ref, "ref"), counterparty_ref=counterparty_ref or None
        )
        raise_for_response(response, "Failed to get scan sheet")

        record = first_record(response)
        return {"success": True, "empty": is_scan_sheet_empty(record), "scan_sheet": record}


async def scan_sheet_list(ctx: Context, fetch_all: bool = False) -> dict:
    """List scan sheets; fetch_all walks every page."""
    with tool_errors("Scan sheet", "scan_sheet_list"):
        scan_sheet = get_client(ctx).scan_sheet
        if fetch_all:
            response = await scan_sheet.get_all_scan_sheets()
        else:
            response = await scan_sheet.get_scan_sheet_list()
        raise_for_response(response, "Failed to list scan sheets")

        sheets = [
            {
                "ref": item.get("Ref"),
                "number": item.get("Number"),
                "date_time": item.get("DateTime"),
                "count": item.get("Count"),
                "printed": is_scan_sheet_printed(item),
            }
            for item in response.data
            if isinstance(item, dict)
        ]
        return {"total": len(sheets), "scan_sheets": sheets, "warnings": response.warnings}


async def scan_sheet_delete(scan_sheet_refs: list[str], ctx: Context) -> dict:
    """Delete scan sheets."""
    with tool_errors("Scan sheet", "scan_sheet_delete"):
        refs = require_refs(scan_sheet_refs, "scan_sheet_refs")
        response = await get_client(ctx).scan_sheet.delete_scan_sheet(refs)
        raise_for_response(response, "Failed to delete scan sheets")

        failed = [
            {"ref": item.get("Ref"), "error": item.get("Error")}
            for item in response.data
            if isinstance(item, dict) and has_delete_error(item)
        ]
        return {"success": not failed, "deleted": len(response.data) - len(failed), "failed": failed}


async def scan_sheet_remove_documents(
    document_refs: list[str], ctx: Context, ref: str | None = None
) -> dict:
    """Take waybills off a scan sheet."""
    with tool_errors("Scan sheet", "scan_sheet_remove_documents"):
        refs = require_refs(document_refs, "document_refs")
        response = await get_client(ctx).scan_sheet.remove_documents(refs, ref=ref or None)
        raise_for_response(response, "Failed to remove documents")

        record = first_record(response)
        return {"success": True, "has_errors": has_remove_errors(record), "data": response.data}


async def scan_sheet_print(ref: str, ctx: Context, print_type: str | None = None) -> dict:
    """Printable form of a scan sheet (pdf or html)."""
    with tool_errors("Scan sheet", "scan_sheet_print"):
        response = await get_client(ctx).scan_sheet.print_scan_sheet(
            require_string(ref, "ref"), print_type=print_type or None
        )
        raise_for_response(response, "Failed to print scan sheet")

        return {"success": True, "data": response.data}
