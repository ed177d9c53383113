"""Request envelope builder.

Every Nova Poshta call is a POST of the same four-key JSON object::

    {"apiKey": ..., "modelName": ..., "calledMethod": ..., "methodProperties": {...}}

The ``apiKey`` key is left out entirely for anonymous calls.
"""

from enum import Enum
from typing import Any


def _wire_name(value: str | Enum) -> str:
    return value.value if isinstance(value, Enum) else str(value)


def build_request(
    api_key: str | None,
    model_name: str | Enum,
    called_method: str | Enum,
    method_properties: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Build a fresh request envelope.

    Properties are passed through without validation. The caller's dict is
    copied so later mutation on either side does not leak.

    Args:
        api_key: API key, or None for anonymous calls.
        model_name: Remote model (e.g. ``TrackingDocument``).
        called_method: Remote method (e.g. ``getStatusDocuments``).
        method_properties: Method arguments; None means ``{}``.

    Returns:
        Envelope dict ready to be JSON-encoded.
    """
    envelope: dict[str, Any] = {}
    if api_key is not None:
        envelope["apiKey"] = api_key
    envelope["modelName"] = _wire_name(model_name)
    envelope["calledMethod"] = _wire_name(called_method)
    envelope["methodProperties"] = dict(method_properties or {})
    return envelope
