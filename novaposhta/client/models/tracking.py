"""Tracking models: delivery status codes, classification, batch results."""

from enum import Enum, IntEnum
from typing import Any

from pydantic import BaseModel, Field


class DeliveryStatus(IntEnum):
    """Nova Poshta ``StatusCode`` values covered by tracking classification."""

    CREATED = 1
    DELETED = 2
    NOT_FOUND = 3
    ARRIVED_AT_WAREHOUSE = 4
    ARRIVED_AT_POSTOMAT = 5
    IN_TRANSIT_TO_RECIPIENT_CITY = 6
    ARRIVING_AT_RECIPIENT_CITY = 7
    IN_RECIPIENT_CITY_AWAITING_DELIVERY = 8
    RECEIVED = 9
    RECEIVED_AWAITING_MONEY_TRANSFER = 10
    RECEIVED_AND_MONEY_TRANSFERRED = 11


AT_WAREHOUSE_STATUSES = frozenset({
    DeliveryStatus.ARRIVED_AT_WAREHOUSE,
    DeliveryStatus.ARRIVED_AT_POSTOMAT,
    DeliveryStatus.IN_RECIPIENT_CITY_AWAITING_DELIVERY,
})

DELIVERED_STATUSES = frozenset({
    DeliveryStatus.RECEIVED,
    DeliveryStatus.RECEIVED_AWAITING_MONEY_TRANSFER,
    DeliveryStatus.RECEIVED_AND_MONEY_TRANSFERRED,
})


class StatusClass(str, Enum):
    """Lifecycle bucket a tracked document falls into."""

    AT_WAREHOUSE = "at_warehouse"
    DELIVERED = "delivered"
    IN_TRANSIT = "in_transit"
    UNKNOWN = "unknown"


STATUS_DESCRIPTIONS: dict[str, dict[int, str]] = {
    "ua": {
        1: "Відправник самостійно створив цю накладну, але ще не надав до відправки",
        2: "Видалено",
        3: "Номер не знайдено",
        4: "Відправлення у місті відправника",
        5: "Відправлення прямує до поштомату",
        6: "Відправлення прямує до міста отримувача",
        7: "Прибуває до міста отримувача",
        8: "Прибув на відділення",
        9: "Відправлення отримано",
        10: "Відправлення отримано, очікується переказ коштів",
        11: "Відправлення отримано, грошовий переказ видано одержувачу",
    },
    "ru": {
        1: "Отправитель самостоятельно создал эту накладную, но ещё не предоставил к отправке",
        2: "Удалено",
        3: "Номер не найден",
        4: "Отправление в городе отправителя",
        5: "Отправление следует в почтомат",
        6: "Отправление следует в город получателя",
        7: "Прибывает в город получателя",
        8: "Прибыл на отделение",
        9: "Отправление получено",
        10: "Отправление получено, ожидается денежный перевод",
        11: "Отправление получено, денежный перевод выдан получателю",
    },
    "en": {
        1: "Created by the sender but not yet handed over for shipping",
        2: "Deleted",
        3: "Tracking number not found",
        4: "Arrived at a warehouse in the sender's city",
        5: "On the way to a postomat",
        6: "On the way to the recipient's city",
        7: "Arriving at the recipient's city",
        8: "Arrived at the recipient's warehouse",
        9: "Received",
        10: "Received, awaiting money transfer",
        11: "Received, money transfer paid out",
    },
}

DEFAULT_LOCALE = "ua"


def parse_status_code(value: Any) -> int | None:
    """Parse a ``StatusCode`` field, which the API sends as a string.

    Returns:
        The integer code, or None when absent or not numeric.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def classify_status(status_code: Any) -> StatusClass:
    """Classify a status code into a lifecycle bucket.

    Codes 4, 5 and 8 are at a pickup point, 9 to 11 are delivered, any other
    known code (1 to 11) is in transit, and anything else is unknown.
    """
    code = parse_status_code(status_code)
    if code is None:
        return StatusClass.UNKNOWN
    if code in AT_WAREHOUSE_STATUSES:
        return StatusClass.AT_WAREHOUSE
    if code in DELIVERED_STATUSES:
        return StatusClass.DELIVERED
    if DeliveryStatus.CREATED <= code <= DeliveryStatus.RECEIVED_AND_MONEY_TRANSFERRED:
        return StatusClass.IN_TRANSIT
    return StatusClass.UNKNOWN


def status_description(status_code: Any, locale: str = DEFAULT_LOCALE) -> str | None:
    """Human-readable description of a status code.

    Unknown locales fall back to Ukrainian. Returns None for unknown codes.
    """
    code = parse_status_code(status_code)
    if code is None:
        return None
    descriptions = STATUS_DESCRIPTIONS.get(locale.lower(), STATUS_DESCRIPTIONS[DEFAULT_LOCALE])
    return descriptions.get(code)


class TrackingStatistics(BaseModel):
    """Counters derived from a batch tracking run."""

    total_tracked: int = Field(default=0, description="Number of identifiers submitted")
    delivered: int = 0
    in_transit: int = 0
    at_warehouse: int = 0
    failed: int = Field(default=0, description="Identifiers absent from the result set")
    unknown: int = Field(default=0, description="Found, but with an unrecognized status code")


class BatchTrackingResult(BaseModel):
    """Outcome of ``track_multiple``.

    ``successful`` holds the raw tracking records in input order and
    ``failed`` the identifiers that came back without a record. ``errors``
    keeps the API messages of rejected chunks so a bad key or a malformed
    number is not mistaken for a plain miss.
    """

    successful: list[dict[str, Any]] = Field(default_factory=list)
    failed: list[str] = Field(default_factory=list)
    statistics: TrackingStatistics = Field(default_factory=TrackingStatistics)
    errors: list[str] = Field(default_factory=list, description="Error messages of chunks the API rejected")
    cancelled: bool = Field(default=False, description="True if the run was cancelled before completion")
