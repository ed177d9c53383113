"""Response envelope model and normalizer.

The Nova Poshta API answers HTTP 200 for almost everything, including
logical failures, and is loose about field shapes (``data`` may be a list,
an object, or null; message fields may be arrays, objects, or strings).
``normalize_response`` turns whatever arrived into one predictable
``ResponseEnvelope``.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ResponseEnvelope(BaseModel):
    """Normalized response of a single Nova Poshta call.

    ``data`` is always a list. A failed envelope always carries at least one
    entry in ``errors`` or ``error_codes``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    success: bool = Field(default=False, description="Logical outcome reported by the API")
    data: list[Any] = Field(default_factory=list, description="Result records")
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    info: list[Any] = Field(
        default_factory=list, description='Info entries as sent; paged listings put {"totalCount": N} here'
    )
    message_codes: list[str] = Field(default_factory=list, alias="messageCodes")
    error_codes: list[str] = Field(default_factory=list, alias="errorCodes")
    warning_codes: list[str] = Field(default_factory=list, alias="warningCodes")
    info_codes: list[str] = Field(default_factory=list, alias="infoCodes")

    def to_wire(self) -> dict[str, Any]:
        """Dump with the API's camelCase keys."""
        return self.model_dump(by_alias=True)


def _as_list(value: Any) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, list):
        return value
    if isinstance(value, tuple):
        return list(value)
    if isinstance(value, Mapping):
        return [value]
    if isinstance(value, str) and not value:
        return []
    return [value]


def _as_messages(value: Any) -> list[str]:
    # Messages come as arrays, keyed objects ({"20000": "text"}) or bare strings
    if isinstance(value, Mapping):
        value = list(value.values())
    return [str(item) for item in _as_list(value) if item is not None and item != ""]


def normalize_response(status: int, body: Any) -> ResponseEnvelope:
    """Normalize a decoded response body into a ``ResponseEnvelope``.

    Never raises. ``success`` is True only when the body says exactly
    ``"success": true``.

    Args:
        status: HTTP status code, used in synthetic error text.
        body: Decoded JSON body.

    Returns:
        Normalized envelope.
    """
    if not isinstance(body, Mapping):
        return failed_response(f"Unexpected response body from Nova Poshta API (HTTP {status})")

    success = body.get("success") is True
    errors = _as_messages(body.get("errors"))
    error_codes = _as_messages(body.get("errorCodes"))

    if not success and not errors and not error_codes:
        errors = [f"Nova Poshta API request failed (HTTP {status})"]

    return ResponseEnvelope(
        success=success,
        data=_as_list(body.get("data")),
        errors=errors,
        warnings=_as_messages(body.get("warnings")),
        info=_as_list(body.get("info")),
        message_codes=_as_messages(body.get("messageCodes")),
        error_codes=error_codes,
        warning_codes=_as_messages(body.get("warningCodes")),
        info_codes=_as_messages(body.get("infoCodes")),
    )


def failed_response(message: str, error_code: str | None = None) -> ResponseEnvelope:
    """Build a failed envelope carrying a single error."""
    return ResponseEnvelope(
        success=False,
        errors=[message],
        error_codes=[error_code] if error_code else [],
    )
