"""Return order models (AdditionalServiceGeneral).

A return order is always created through the generic ``save`` method with
``OrderType=orderCargoReturn``. The three variants differ only in where the
parcel goes back to: the sender's known address, a new street address, or a
warehouse.
"""

from enum import Enum

from pydantic import Field

from novaposhta.client.models.base import MethodProperties


class ReturnOrderType(str, Enum):
    """Discriminator for return orders."""

    CARGO_RETURN = "orderCargoReturn"


class ReturnOrderStatus(str, Enum):
    """``OrderStatus`` values reported by ``getReturnOrdersList``."""

    ACCEPTED = "Прийняте"
    IN_PROGRESS = "В обробці"
    COMPLETED = "Виконано"
    CANCELLED = "Скасовано"


class PaymentMethod(str, Enum):
    CASH = "Cash"
    NON_CASH = "NonCash"


class ReturnOrderListRequest(MethodProperties):
    """Filters for ``getReturnOrdersList``; all optional, all sent as strings."""

    number: str | None = Field(None, alias="Number", description="Return order number, e.g. 102-00003168")
    ref: str | None = Field(None, alias="Ref")
    begin_date: str | None = Field(None, alias="BeginDate", description="dd.mm.yyyy")
    end_date: str | None = Field(None, alias="EndDate", description="dd.mm.yyyy")
    page: str | None = Field(None, alias="Page")
    limit: str | None = Field(None, alias="Limit")


class _ReturnOrderBase(MethodProperties):
    int_doc_number: str = Field(..., alias="IntDocNumber", description="Original waybill number")
    payment_method: PaymentMethod = Field(..., alias="PaymentMethod")
    reason: str = Field(..., alias="Reason", description="Return reason ref")
    subtype_reason: str = Field(..., alias="SubtypeReason", description="Return reason subtype ref")
    note: str | None = Field(None, alias="Note")


class ReturnToSenderAddress(_ReturnOrderBase):
    """Return to an address offered by ``CheckPossibilityCreateReturn``."""

    return_address_ref: str = Field(..., alias="ReturnAddressRef")


class ReturnToNewAddress(_ReturnOrderBase):
    """Return to a street address not previously on file."""

    recipient_settlement: str = Field(..., alias="RecipientSettlement")
    recipient_settlement_street: str = Field(..., alias="RecipientSettlementStreet")
    building_number: str = Field(..., alias="BuildingNumber")
    note_address_recipient: str | None = Field(None, alias="NoteAddressRecipient")


class ReturnToWarehouse(_ReturnOrderBase):
    """Return to a Nova Poshta warehouse."""

    recipient_warehouse: str = Field(..., alias="RecipientWarehouse")


ReturnOrderVariant = ReturnToSenderAddress | ReturnToNewAddress | ReturnToWarehouse


class ReturnOrderRequest(_ReturnOrderBase):
    """Canonical ``save`` request: the union of every variant's fields."""

    order_type: ReturnOrderType = Field(ReturnOrderType.CARGO_RETURN, alias="OrderType")
    return_address_ref: str | None = Field(None, alias="ReturnAddressRef")
    recipient_settlement: str | None = Field(None, alias="RecipientSettlement")
    recipient_settlement_street: str | None = Field(None, alias="RecipientSettlementStreet")
    building_number: str | None = Field(None, alias="BuildingNumber")
    note_address_recipient: str | None = Field(None, alias="NoteAddressRecipient")
    recipient_warehouse: str | None = Field(None, alias="RecipientWarehouse")

    @classmethod
    def from_variant(cls, variant: ReturnOrderVariant) -> "ReturnOrderRequest":
        """Widen a variant into the canonical request, fixing ``OrderType``."""
        fields = variant.model_dump(exclude_none=True)
        return cls(**fields, order_type=ReturnOrderType.CARGO_RETURN)


class ReturnUpdateRequest(_ReturnOrderBase):
    """``update`` request; only editable while the order is Accepted."""

    ref: str = Field(..., alias="Ref")
    order_type: ReturnOrderType = Field(ReturnOrderType.CARGO_RETURN, alias="OrderType")
    only_get_pricing: bool | None = Field(None, alias="OnlyGetPricing")
    recipient_settlement: str | None = Field(None, alias="RecipientSettlement")
    recipient_warehouse: str | None = Field(None, alias="RecipientWarehouse")
    recipient_settlement_street: str | None = Field(None, alias="RecipientSettlementStreet")
    building_number: str | None = Field(None, alias="BuildingNumber")
    note_address_recipient: str | None = Field(None, alias="NoteAddressRecipient")


def is_return_order_editable(status: str | None) -> bool:
    """Return orders can be edited only in the Accepted state."""
    return status == ReturnOrderStatus.ACCEPTED.value
