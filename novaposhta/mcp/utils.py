"""Helpers shared by the MCP tool modules."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from fastmcp import Context
from fastmcp.exceptions import ToolError

from novaposhta.client import Client, ResponseEnvelope
from novaposhta.errors import NovaPoshtaError, error_from_api_response, format_error


def get_client(ctx: Context) -> Client:
    """Return the client created by the server lifespan.

    Raises:
        RuntimeError: If request context not available.
    """
    if ctx.request_context is None:
        raise RuntimeError("Request context not available")
    return ctx.request_context.lifespan_context["client"]


@contextmanager
def tool_errors(domain: str, name: str) -> Iterator[None]:
    """Re-raise failures inside a tool as ``ToolError`` with a readable prefix.

    Example:
        with tool_errors("Tracking", "track_document"):
            ...
        # ToolError: Tracking tool "track_document": <message>
    """
    try:
        yield
    except ToolError:
        raise
    except (NovaPoshtaError, ValueError, TypeError) as e:
        raise ToolError(f'{domain} tool "{name}": {format_error(e)}') from e


def raise_for_response(response: ResponseEnvelope, fallback: str) -> None:
    """Raise a coded ``NovaPoshtaError`` if the envelope reports failure."""
    if response.success:
        return
    raise error_from_api_response(response.errors, response.error_codes, fallback)


def first_record(response: ResponseEnvelope) -> dict[str, Any]:
    """First data record, or an empty dict."""
    if response.data and isinstance(response.data[0], dict):
        return response.data[0]
    return {}
