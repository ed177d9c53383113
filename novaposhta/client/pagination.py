"""Fetch-all pagination over page/limit listing methods."""

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from novaposhta.client.response import ResponseEnvelope
from novaposhta.errors import TransportError

logger = logging.getLogger(__name__)

DEFAULT_PAGE_LIMIT = 100

PageFetcher = Callable[[int, int], Awaitable[ResponseEnvelope]]


def _stopped_warning(page: int, reason: str) -> str:
    return f"Pagination stopped at page {page}: {reason}"


async def fetch_all_pages(
    fetch_page: PageFetcher,
    limit: int = DEFAULT_PAGE_LIMIT,
    max_pages: int | None = None,
) -> ResponseEnvelope:
    """Call ``fetch_page(page, limit)`` from page 1 until the listing ends.

    Pages are requested one after another. The walk stops on a failed call,
    an empty page, or a page whose size differs from ``limit``. Whatever was
    collected is returned as a successful envelope.

    A failed page after the first one is not an error for the caller, but
    it is not silent either: a ``Pagination stopped at page N: ...`` entry
    is added to ``warnings``. The same applies to a ``TransportError`` on
    page 2 or later. A ``TransportError`` on page 1 propagates, since there
    is nothing to return.

    Args:
        fetch_page: Coroutine function taking (page, limit).
        limit: Page size, must be positive.
        max_pages: Optional safety cap on the number of pages requested.

    Returns:
        Successful envelope with the concatenated data.

    Raises:
        ValueError: If ``limit`` is not positive.
        TransportError: If the first page cannot be fetched.
    """
    if limit <= 0:
        raise ValueError(f"limit must be positive, got {limit}")

    collected: list[Any] = []
    warnings: list[str] = []
    page = 1

    while max_pages is None or page <= max_pages:
        try:
            response = await fetch_page(page, limit)
        except TransportError as e:
            if page == 1:
                raise
            logger.warning(f"Transport failure at page {page}, returning {len(collected)} items: {e}")
            warnings.append(_stopped_warning(page, e.message))
            break

        if not response.success:
            reason = ", ".join(response.errors or response.error_codes)
            logger.warning(f"Stopping pagination at page {page}: {reason}")
            warnings.append(_stopped_warning(page, reason))
            break

        if not response.data:
            break

        collected.extend(response.data)
        warnings.extend(response.warnings)

        if len(response.data) != limit:
            break
        page += 1

    return ResponseEnvelope(success=True, data=collected, warnings=warnings)
