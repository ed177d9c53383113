"""Tests for ScanSheetService and the scan sheet predicates."""

import pytest

from novaposhta.client.models.scan_sheet import (
    has_delete_error,
    has_insert_errors,
    has_remove_errors,
    is_scan_sheet_empty,
    is_scan_sheet_printed,
    validate_document_refs,
)
from tests.helpers import ok


class TestPredicates:
    """Test each buried-error predicate on its own record shape."""

    def test_insert_errors_top_level(self):
        assert has_insert_errors({"Errors": ["Document is already in a registry"]}) is True

    def test_insert_errors_nested(self):
        assert has_insert_errors({"Data": {"Errors": [{"Ref": "x"}]}}) is True

    def test_insert_without_errors(self):
        assert has_insert_errors({"Errors": [], "Data": {"Errors": []}}) is False
        assert has_insert_errors({"Ref": "sheet"}) is False

    def test_delete_error(self):
        assert has_delete_error({"Ref": "sheet", "Error": "Scan sheet is printed"}) is True
        assert has_delete_error({"Ref": "sheet", "Error": ""}) is False
        assert has_delete_error({"Ref": "sheet"}) is False

    def test_remove_errors(self):
        assert has_remove_errors({"DocumentRefs": {"Success": [], "Errors": [{"Ref": "d"}]}}) is True
        assert has_remove_errors({"DocumentRefs": {"Success": [{"Ref": "d"}], "Errors": []}}) is False
        assert has_remove_errors({"DocumentRefs": ["d"]}) is False

    def test_empty_and_printed(self):
        assert is_scan_sheet_empty({"Count": "0"}) is True
        assert is_scan_sheet_empty({"Count": "3"}) is False
        assert is_scan_sheet_empty({}) is True
        assert is_scan_sheet_printed({"Printed": "1"}) is True
        assert is_scan_sheet_printed({"Printed": "0"}) is False

    def test_validate_document_refs(self):
        assert validate_document_refs(["a", "b"]) is True
        assert validate_document_refs([]) is False
        assert validate_document_refs(["a", ""]) is False
        assert validate_document_refs("a") is False


class TestScanSheetService:
    """Test ScanSheetGeneral requests."""

    @pytest.mark.asyncio
    async def test_insert_creates_new_sheet(self, client, transport):
        """Test insert without ref sends only the documents."""
        transport.queue(ok({"Ref": "sheet-ref", "Number": "105-1", "Errors": []}))

        response = await client.scan_sheet.create_scan_sheet(["doc-1", "doc-2"])

        assert response.data[0]["Ref"] == "sheet-ref"
        assert transport.last_body["modelName"] == "ScanSheetGeneral"
        assert transport.last_body["calledMethod"] == "insertDocuments"
        assert transport.last_properties == {"DocumentRefs": ["doc-1", "doc-2"]}

    @pytest.mark.asyncio
    async def test_add_documents_targets_sheet(self, client, transport):
        await client.scan_sheet.add_documents("sheet-ref", ["doc-1"])

        assert transport.last_properties == {"DocumentRefs": ["doc-1"], "Ref": "sheet-ref"}

    @pytest.mark.asyncio
    async def test_empty_refs_rejected(self, client, transport):
        """Test empty or blank refs fail before sending."""
        with pytest.raises(ValueError):
            await client.scan_sheet.insert_documents([])
        with pytest.raises(ValueError):
            await client.scan_sheet.remove_documents(["doc", ""])

        assert transport.requests == []

    @pytest.mark.asyncio
    async def test_delete_single(self, client, transport):
        await client.scan_sheet.delete_single("sheet-ref")

        assert transport.last_body["calledMethod"] == "deleteScanSheet"
        assert transport.last_properties == {"ScanSheetRefs": ["sheet-ref"]}

    @pytest.mark.asyncio
    async def test_get_and_print(self, client, transport):
        await client.scan_sheet.get_scan_sheet("sheet-ref", counterparty_ref="cp-ref")
        assert transport.last_properties == {"Ref": "sheet-ref", "CounterpartyRef": "cp-ref"}

        await client.scan_sheet.print_scan_sheet("sheet-ref", print_type="pdf")
        assert transport.last_body["calledMethod"] == "printScanSheet"
        assert transport.last_properties == {"Ref": "sheet-ref", "Type": "pdf"}

    @pytest.mark.asyncio
    async def test_get_all_scan_sheets(self, client, transport):
        """Test fetch-all walks getScanSheetList pages."""
        transport.queue(ok({"Ref": "a"}, {"Ref": "b"}), ok())

        response = await client.scan_sheet.get_all_scan_sheets(limit=2)

        assert [s["Ref"] for s in response.data] == ["a", "b"]
        assert [b["methodProperties"] for b in transport.bodies] == [
            {"Page": 1, "Limit": 2},
            {"Page": 2, "Limit": 2},
        ]
