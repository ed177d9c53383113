"""Scan sheet service (ScanSheetGeneral model).

A scan sheet is a registry grouping waybills handed over together. Calls
report rejected documents inside the data records rather than through
``success``; check them with the predicates re-exported here.
"""

from collections.abc import Iterable
from typing import Any

from novaposhta.client.core import Service
from novaposhta.client.enums import NovaPoshtaMethod, NovaPoshtaModel
from novaposhta.client.models.scan_sheet import (
    has_delete_error,
    has_insert_errors,
    has_remove_errors,
    is_scan_sheet_empty,
    is_scan_sheet_printed,
    validate_document_refs,
)
from novaposhta.client.pagination import DEFAULT_PAGE_LIMIT, fetch_all_pages
from novaposhta.client.response import ResponseEnvelope

__all__ = [
    "ScanSheetService",
    "has_delete_error",
    "has_insert_errors",
    "has_remove_errors",
    "is_scan_sheet_empty",
    "is_scan_sheet_printed",
]


def _refs(document_refs: Iterable[str], field: str) -> list[str]:
    refs = list(document_refs)
    if not validate_document_refs(refs):
        raise ValueError(f"{field} must be a non-empty list of refs")
    return refs


class ScanSheetService(Service):
    """Scan sheet (registry) management. Every call needs an API key."""

    namespace = "scan_sheet"

    async def insert_documents(
        self, document_refs: Iterable[str], ref: str | None = None, date: str | None = None
    ) -> ResponseEnvelope:
        """Add documents to a scan sheet, creating one when ``ref`` is None.

        Raises:
            ValueError: If ``document_refs`` is empty or holds blank refs.
        """
        properties: dict[str, Any] = {"DocumentRefs": _refs(document_refs, "document_refs")}
        if ref:
            properties["Ref"] = ref
        if date:
            properties["Date"] = date
        return await self._request(
            NovaPoshtaModel.SCAN_SHEET, NovaPoshtaMethod.INSERT_DOCUMENTS, properties
        )

    async def get_scan_sheet(self, ref: str, counterparty_ref: str | None = None) -> ResponseEnvelope:
        properties = {"Ref": ref}
        if counterparty_ref:
            properties["CounterpartyRef"] = counterparty_ref
        return await self._request(
            NovaPoshtaModel.SCAN_SHEET, NovaPoshtaMethod.GET_SCAN_SHEET, properties
        )

    async def get_scan_sheet_list(
        self, page: int | None = None, limit: int | None = None
    ) -> ResponseEnvelope:
        properties: dict[str, Any] = {}
        if page is not None:
            properties["Page"] = page
        if limit is not None:
            properties["Limit"] = limit
        return await self._request(
            NovaPoshtaModel.SCAN_SHEET, NovaPoshtaMethod.GET_SCAN_SHEET_LIST, properties
        )

    async def delete_scan_sheet(self, scan_sheet_refs: Iterable[str]) -> ResponseEnvelope:
        """Delete scan sheets. Per-sheet failures show up in ``has_delete_error``."""
        return await self._request(
            NovaPoshtaModel.SCAN_SHEET,
            NovaPoshtaMethod.DELETE_SCAN_SHEET,
            {"ScanSheetRefs": _refs(scan_sheet_refs, "scan_sheet_refs")},
        )

    async def remove_documents(
        self, document_refs: Iterable[str], ref: str | None = None
    ) -> ResponseEnvelope:
        """Take documents off a scan sheet."""
        properties: dict[str, Any] = {"DocumentRefs": _refs(document_refs, "document_refs")}
        if ref:
            properties["Ref"] = ref
        return await self._request(
            NovaPoshtaModel.SCAN_SHEET, NovaPoshtaMethod.REMOVE_DOCUMENTS, properties
        )

    async def print_scan_sheet(
        self, ref: str, document_refs: Iterable[str] | None = None, print_type: str | None = None
    ) -> ResponseEnvelope:
        """Printable form of a scan sheet (``Type`` is pdf or html)."""
        properties: dict[str, Any] = {"Ref": ref}
        if document_refs is not None:
            properties["DocumentRefs"] = list(document_refs)
        if print_type:
            properties["Type"] = print_type
        return await self._request(
            NovaPoshtaModel.SCAN_SHEET, NovaPoshtaMethod.PRINT_SCAN_SHEET, properties
        )

    async def create_scan_sheet(self, document_refs: Iterable[str]) -> ResponseEnvelope:
        return await self.insert_documents(document_refs)

    async def add_documents(
        self, scan_sheet_ref: str, document_refs: Iterable[str]
    ) -> ResponseEnvelope:
        return await self.insert_documents(document_refs, ref=scan_sheet_ref)

    async def delete_single(self, scan_sheet_ref: str) -> ResponseEnvelope:
        return await self.delete_scan_sheet([scan_sheet_ref])

    async def get_all_scan_sheets(self, limit: int = DEFAULT_PAGE_LIMIT) -> ResponseEnvelope:
        """Every scan sheet, fetched page by page."""
        return await fetch_all_pages(
            lambda page, page_limit: self.get_scan_sheet_list(page=page, limit=page_limit),
            limit=limit,
        )
