"""Argument validation for MCP tools.

Tool arguments come from an LLM and are checked here before any request
is built.
"""

import re
from collections.abc import Iterable
from typing import Any

from novaposhta.errors import NovaPoshtaError

TRACKING_NUMBER_PATTERN = re.compile(r"^\d{14}$")
PHONE_PATTERN = re.compile(r"^380\d{9}$")
DATE_PATTERN = re.compile(r"^\d{2}\.\d{2}\.\d{4}$")


def is_tracking_number(value: Any) -> bool:
    return isinstance(value, str) and bool(TRACKING_NUMBER_PATTERN.match(value.strip()))


def sanitize_phone(value: str) -> str:
    """Drop spaces, dashes, brackets and a leading '+'."""
    return re.sub(r"[\s\-()+]", "", value)


def is_phone_number(value: Any) -> bool:
    return isinstance(value, str) and bool(PHONE_PATTERN.match(value))


def is_date_format(value: Any) -> bool:
    """True for dd.mm.yyyy. The calendar date itself is not checked."""
    return isinstance(value, str) and bool(DATE_PATTERN.match(value))


def require_string(value: Any, field: str) -> str:
    """Return a stripped non-empty string.

    Raises:
        ValueError: If ``value`` is not a non-empty string.
    """
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{field} must be a non-empty string")
    return value.strip()


def require_tracking_number(value: Any, field: str = "document_number") -> str:
    """Return a stripped 14-digit tracking number.

    Raises:
        NovaPoshtaError: E-2001 if the value is not a tracking number.
    """
    number = require_string(value, field)
    if not is_tracking_number(number):
        raise NovaPoshtaError.from_code("E-2001", value=number)
    return number


def require_tracking_numbers(values: Iterable[Any] | None, field: str = "document_numbers") -> list[str]:
    numbers = [require_string(value, f"{field}[]") for value in (values or [])]
    if not numbers:
        raise ValueError(f"{field} must contain at least one tracking number")
    for number in numbers:
        if not is_tracking_number(number):
            raise NovaPoshtaError.from_code("E-2001", value=number)
    return numbers


def optional_phone(value: Any) -> str | None:
    """Sanitize an optional phone to 380XXXXXXXXX.

    Raises:
        NovaPoshtaError: E-2002 if the phone does not match after sanitizing.
    """
    if value is None or value == "":
        return None
    phone = sanitize_phone(require_string(value, "phone"))
    if not is_phone_number(phone):
        raise NovaPoshtaError.from_code("E-2002", value=value)
    return phone


def require_date(value: Any, field: str) -> str:
    date = require_string(value, field)
    if not is_date_format(date):
        raise ValueError(f"{field} must be in format dd.mm.yyyy")
    return date


def require_refs(values: Iterable[Any] | None, field: str) -> list[str]:
    refs = [require_string(value, f"{field}[]") for value in (values or [])]
    if not refs:
        raise ValueError(f"{field} must contain at least one ref")
    return refs
