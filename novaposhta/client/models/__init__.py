"""Request models and response helpers for the Nova Poshta services."""

from novaposhta.client.models.counterparty import (
    ContactPersonDeleteRequest,
    ContactPersonSaveRequest,
    ContactPersonUpdateRequest,
    CounterpartyProperty,
    CounterpartySaveRequest,
    CounterpartyType,
    CounterpartyUpdateRequest,
    OrganizationCounterparty,
    PrivatePersonCounterparty,
)
from novaposhta.client.models.returns import (
    PaymentMethod,
    ReturnOrderListRequest,
    ReturnOrderRequest,
    ReturnOrderStatus,
    ReturnOrderType,
    ReturnToNewAddress,
    ReturnToSenderAddress,
    ReturnToWarehouse,
    ReturnUpdateRequest,
    is_return_order_editable,
)
from novaposhta.client.models.scan_sheet import (
    has_delete_error,
    has_insert_errors,
    has_remove_errors,
    is_scan_sheet_empty,
    is_scan_sheet_printed,
)
from novaposhta.client.models.tracking import (
    BatchTrackingResult,
    DeliveryStatus,
    StatusClass,
    TrackingStatistics,
    classify_status,
)
from novaposhta.client.models.waybill import (
    DeliveryDateRequest,
    OptionsSeat,
    PostomatWaybillRequest,
    PriceRequest,
    WaybillDeleteRequest,
    WaybillRequest,
    WaybillUpdateRequest,
    WaybillWithOptionsRequest,
)

__all__ = [
    # Counterparty
    "CounterpartyProperty",
    "CounterpartyType",
    "PrivatePersonCounterparty",
    "OrganizationCounterparty",
    "CounterpartySaveRequest",
    "CounterpartyUpdateRequest",
    "ContactPersonSaveRequest",
    "ContactPersonUpdateRequest",
    "ContactPersonDeleteRequest",
    # Returns
    "PaymentMethod",
    "ReturnOrderType",
    "ReturnOrderStatus",
    "ReturnOrderListRequest",
    "ReturnToSenderAddress",
    "ReturnToNewAddress",
    "ReturnToWarehouse",
    "ReturnOrderRequest",
    "ReturnUpdateRequest",
    "is_return_order_editable",
    # Scan sheet
    "has_insert_errors",
    "has_delete_error",
    "has_remove_errors",
    "is_scan_sheet_empty",
    "is_scan_sheet_printed",
    # Tracking
    "DeliveryStatus",
    "StatusClass",
    "TrackingStatistics",
    "BatchTrackingResult",
    "classify_status",
    # Waybill
    "PriceRequest",
    "DeliveryDateRequest",
    "OptionsSeat",
    "WaybillRequest",
    "WaybillWithOptionsRequest",
    "PostomatWaybillRequest",
    "WaybillUpdateRequest",
    "WaybillDeleteRequest",
]
