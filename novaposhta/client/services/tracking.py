"""Tracking service (TrackingDocument model).

Resolves shipment numbers to tracking records and classifies them by
lifecycle stage. ``track_multiple`` is the aggregation entry point used by
the bridging layer and the CLI.
"""

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable, Iterable, Mapping, Sequence
from typing import Any

from novaposhta.client.core import Service
from novaposhta.client.enums import NovaPoshtaMethod, NovaPoshtaModel
from novaposhta.client.models.tracking import (
    AT_WAREHOUSE_STATUSES,
    DELIVERED_STATUSES,
    DEFAULT_LOCALE,
    BatchTrackingResult,
    StatusClass,
    TrackingStatistics,
    classify_status,
    parse_status_code,
    status_description,
)
from novaposhta.client.response import ResponseEnvelope
from novaposhta.errors import NovaPoshtaError, error_from_api_response

logger = logging.getLogger(__name__)

# Upper bound on Documents per getStatusDocuments call
MAX_DOCUMENTS_PER_REQUEST = 100

DEFAULT_MONITOR_INTERVAL = 60.0

DocumentQuery = str | Mapping[str, Any]
MonitorCallback = Callable[[list[dict[str, Any]]], Awaitable[None] | None]


def _document_entry(document: DocumentQuery) -> dict[str, Any]:
    if isinstance(document, Mapping):
        entry = {"DocumentNumber": str(document.get("DocumentNumber", "")).strip()}
        phone = document.get("Phone")
        if phone:
            entry["Phone"] = str(phone)
        return entry
    return {"DocumentNumber": str(document).strip()}


def _record_number(record: Any) -> str | None:
    if not isinstance(record, Mapping):
        return None
    number = record.get("Number")
    return str(number).strip() if number is not None else None


class TrackingService(Service):
    """Shipment tracking."""

    namespace = "tracking"

    async def track_document(self, number: str, phone: str | None = None) -> dict[str, Any] | None:
        """Track a single document.

        Args:
            number: 14-digit tracking number.
            phone: Sender or recipient phone; unlocks full details.

        Returns:
            The tracking record, or None if the call succeeded without one.

        Raises:
            NovaPoshtaError: If the API rejected the call (bad key, malformed
                number and so on).
        """
        response = await self.track_documents([{"DocumentNumber": number, "Phone": phone}])
        if not response.success:
            raise error_from_api_response(
                response.errors, response.error_codes, f"Failed to track document {number}"
            )
        if not response.data:
            return None
        return response.data[0]

    async def track_documents(self, documents: Iterable[DocumentQuery]) -> ResponseEnvelope:
        """Track several documents in one ``getStatusDocuments`` call.

        Records are returned as the API sends them: no reordering, no
        padding for numbers it did not recognise.

        Args:
            documents: Tracking numbers, or mappings with ``DocumentNumber``
                and an optional ``Phone``.
        """
        entries = [_document_entry(document) for document in documents]
        return await self._request(
            NovaPoshtaModel.TRACKING_DOCUMENT,
            NovaPoshtaMethod.GET_STATUS_DOCUMENTS,
            {"Documents": entries},
        )

    async def track_multiple(
        self,
        numbers: Sequence[str],
        cancel_event: asyncio.Event | None = None,
    ) -> BatchTrackingResult:
        """Track many documents and classify every one of them.

        Numbers are sent in chunks of ``MAX_DOCUMENTS_PER_REQUEST``, one chunk
        at a time. A number with no matching record is ``failed``; a record
        with an unrecognised status is ``unknown``. ``successful`` keeps
        input order.

        Error messages of rejected chunks are collected in ``errors``; their
        numbers count as failed.

        If ``cancel_event`` is set between chunks, the numbers not yet sent
        are reported as failed and ``cancelled`` is True.

        Raises:
            TransportError: If a chunk cannot be sent at all.
        """
        numbers = [str(n).strip() for n in numbers]
        successful: list[dict[str, Any]] = []
        failed: list[str] = []
        stats = TrackingStatistics(total_tracked=len(numbers))
        errors: list[str] = []
        cancelled = False

        for start in range(0, len(numbers), MAX_DOCUMENTS_PER_REQUEST):
            chunk = numbers[start:start + MAX_DOCUMENTS_PER_REQUEST]

            if cancel_event is not None and cancel_event.is_set():
                logger.info(f"Batch tracking cancelled, {len(numbers) - start} numbers not sent")
                failed.extend(numbers[start:])
                cancelled = True
                break

            response = await self.track_documents(chunk)
            if not response.success:
                logger.warning(f"Tracking chunk failed: {', '.join(response.errors)}")
                errors.extend(response.errors)

            by_number = {}
            for record in response.data:
                number = _record_number(record)
                if number and number not in by_number:
                    by_number[number] = record

            for number in chunk:
                record = by_number.get(number)
                if record is None:
                    failed.append(number)
                    continue
                successful.append(record)
                bucket = classify_status(record.get("StatusCode"))
                if bucket is StatusClass.DELIVERED:
                    stats.delivered += 1
                elif bucket is StatusClass.AT_WAREHOUSE:
                    stats.at_warehouse += 1
                elif bucket is StatusClass.IN_TRANSIT:
                    stats.in_transit += 1
                else:
                    stats.unknown += 1

        stats.failed = len(failed)
        return BatchTrackingResult(
            successful=successful,
            failed=failed,
            statistics=stats,
            errors=errors,
            cancelled=cancelled,
        )

    async def get_document_movement(
        self,
        numbers: Iterable[str],
        show_delivery_details: bool = False,
    ) -> ResponseEnvelope:
        """Movement history (checkpoints) of up to 10 documents."""
        return await self._request(
            NovaPoshtaModel.TRACKING_DOCUMENT,
            NovaPoshtaMethod.GET_DOCUMENT_MOVEMENT,
            {
                "Documents": [{"DocumentNumber": str(n).strip()} for n in numbers],
                "ShowDeliveryDetails": show_delivery_details,
            },
        )

    async def get_document_list(
        self,
        date_from: str,
        date_to: str,
        page: int | None = None,
        get_full_list: bool = False,
    ) -> ResponseEnvelope:
        """Documents created between two dates (dd.mm.yyyy). Needs an API key."""
        properties: dict[str, Any] = {"DateTimeFrom": date_from, "DateTimeTo": date_to}
        if page is not None:
            properties["Page"] = page
        properties["GetFullList"] = "1" if get_full_list else "0"
        return await self._request(
            NovaPoshtaModel.INTERNET_DOCUMENT,
            NovaPoshtaMethod.GET_DOCUMENT_LIST,
            properties,
        )

    @staticmethod
    def is_at_warehouse(item: Mapping[str, Any] | int | str) -> bool:
        """True for status codes 4, 5 and 8 (waiting at a pickup point)."""
        code = item.get("StatusCode") if isinstance(item, Mapping) else item
        return parse_status_code(code) in AT_WAREHOUSE_STATUSES

    @staticmethod
    def is_delivered(item: Mapping[str, Any] | int | str) -> bool:
        """True for status codes 9, 10 and 11."""
        code = item.get("StatusCode") if isinstance(item, Mapping) else item
        return parse_status_code(code) in DELIVERED_STATUSES

    @staticmethod
    def get_status_description(status_code: int | str, locale: str = DEFAULT_LOCALE) -> str | None:
        """Localized status text; ``locale`` is ua, ru or en."""
        return status_description(status_code, locale)

    def monitor_documents(
        self,
        numbers: Sequence[str],
        callback: MonitorCallback,
        interval: float = DEFAULT_MONITOR_INTERVAL,
    ) -> "asyncio.Task[None]":
        """Poll ``track_documents`` every ``interval`` seconds.

        The callback receives the record list of each successful poll and
        may be sync or async. Failed polls are logged and retried on the next
        tick. Cancel the returned task to stop monitoring.

        Raises:
            ValueError: If ``interval`` is not positive.
        """
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        numbers = list(numbers)

        async def poll() -> None:
            while True:
                try:
                    response = await self.track_documents(numbers)
                except NovaPoshtaError:
                    logger.exception(f"Polling {len(numbers)} documents failed")
                else:
                    if response.success:
                        result = callback(list(response.data))
                        if inspect.isawaitable(result):
                            await result
                    else:
                        logger.warning(f"Polling returned errors: {', '.join(response.errors)}")
                await asyncio.sleep(interval)

        return asyncio.get_running_loop().create_task(poll(), name="novaposhta-monitor")
