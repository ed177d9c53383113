"""Scan sheet (registry) helpers.

The ScanSheetGeneral methods answer ``success: true`` even when individual
documents were rejected; the rejection is buried in the data record. Each
method buries it differently, so each gets its own predicate.
"""

from collections.abc import Mapping
from typing import Any


def _non_empty(value: Any) -> bool:
    return isinstance(value, (list, tuple)) and len(value) > 0


def has_insert_errors(item: Mapping[str, Any]) -> bool:
    """True if an ``insertDocuments`` record reports rejected documents.

    Errors may sit at the top level (``Errors``) or inside the nested
    ``Data.Errors`` list.
    """
    if _non_empty(item.get("Errors")):
        return True
    nested = item.get("Data")
    if isinstance(nested, Mapping) and _non_empty(nested.get("Errors")):
        return True
    return False


def has_delete_error(item: Mapping[str, Any]) -> bool:
    """True if a ``deleteScanSheet`` record carries a non-empty ``Error``."""
    error = item.get("Error")
    return error is not None and error != ""


def has_remove_errors(item: Mapping[str, Any]) -> bool:
    """True if a ``removeDocuments`` record lists errors under ``DocumentRefs``."""
    refs = item.get("DocumentRefs")
    if not isinstance(refs, Mapping):
        return False
    return _non_empty(refs.get("Errors"))


def is_scan_sheet_empty(item: Mapping[str, Any]) -> bool:
    """True if ``Count`` is zero or not a number."""
    try:
        return int(str(item.get("Count", "")).strip()) == 0
    except ValueError:
        return True


def is_scan_sheet_printed(item: Mapping[str, Any]) -> bool:
    """True if a ``getScanSheetList`` record is flagged as printed."""
    return str(item.get("Printed", "")) == "1"


def validate_document_refs(document_refs: Any) -> bool:
    """True for a non-empty list of non-empty strings."""
    if not isinstance(document_refs, (list, tuple)) or not document_refs:
        return False
    return all(isinstance(ref, str) and ref for ref in document_refs)
