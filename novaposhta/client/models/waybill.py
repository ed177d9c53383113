"""Waybill (InternetDocument) request models.

Every create variant ends up in ``InternetDocument.save``; the variants only
narrow which fields are required and which checks run locally first.
"""

from typing import Any

from pydantic import ConfigDict, Field

from novaposhta.client.models.base import MethodProperties

POSTOMAT_MAX_WEIGHT_KG = 30.0
# width x length x height, centimetres
POSTOMAT_MAX_DIMENSIONS_CM = (40.0, 60.0, 30.0)
POSTOMAT_MAX_DECLARED_COST = 10000.0


class PriceRequest(MethodProperties):
    """``getDocumentPrice`` arguments."""

    city_sender: str = Field(..., alias="CitySender")
    city_recipient: str = Field(..., alias="CityRecipient")
    service_type: str = Field(..., alias="ServiceType", description="e.g. WarehouseWarehouse")
    cargo_type: str = Field(..., alias="CargoType", description="e.g. Parcel, Documents")
    cost: float = Field(..., alias="Cost", ge=0, description="Declared value, UAH")
    weight: float = Field(..., alias="Weight", gt=0, description="Kilograms")
    seats_amount: int = Field(1, alias="SeatsAmount", ge=1)
    date_time: str | None = Field(None, alias="DateTime", description="dd.mm.yyyy")
    redelivery_calculate: dict[str, Any] | None = Field(None, alias="RedeliveryCalculate")
    pack_count: int | None = Field(None, alias="PackCount")
    pack_ref: str | None = Field(None, alias="PackRef")
    amount: float | None = Field(None, alias="Amount")
    cargo_details: list[dict[str, Any]] | None = Field(None, alias="CargoDetails")


class DeliveryDateRequest(MethodProperties):
    """``getDocumentDeliveryDate`` arguments."""

    city_sender: str = Field(..., alias="CitySender")
    city_recipient: str = Field(..., alias="CityRecipient")
    service_type: str = Field(..., alias="ServiceType")
    date_time: str | None = Field(None, alias="DateTime", description="dd.mm.yyyy")


class OptionsSeat(MethodProperties):
    """Per-seat dimensions; required for postomat delivery."""

    volumetric_width: float = Field(..., alias="volumetricWidth", gt=0)
    volumetric_length: float = Field(..., alias="volumetricLength", gt=0)
    volumetric_height: float = Field(..., alias="volumetricHeight", gt=0)
    weight: float = Field(..., alias="weight", gt=0)
    volumetric_volume: float | None = Field(None, alias="volumetricVolume")


class WaybillRequest(MethodProperties):
    """Standard ``InternetDocument.save`` payload.

    Unknown keys are kept and forwarded verbatim so less common API fields
    need no model change.
    """

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True, extra="allow")

    payer_type: str = Field(..., alias="PayerType", description="Sender, Recipient or ThirdPerson")
    payment_method: str = Field(..., alias="PaymentMethod", description="Cash or NonCash")
    date_time: str = Field(..., alias="DateTime", description="dd.mm.yyyy")
    cargo_type: str = Field(..., alias="CargoType")
    weight: float = Field(..., alias="Weight", gt=0)
    service_type: str = Field(..., alias="ServiceType")
    seats_amount: int = Field(..., alias="SeatsAmount", ge=1)
    description: str = Field(..., alias="Description")
    cost: float = Field(..., alias="Cost", ge=0)
    city_sender: str = Field(..., alias="CitySender")
    sender: str = Field(..., alias="Sender")
    sender_address: str = Field(..., alias="SenderAddress")
    contact_sender: str = Field(..., alias="ContactSender")
    senders_phone: str = Field(..., alias="SendersPhone")
    city_recipient: str = Field(..., alias="CityRecipient")
    recipient: str = Field(..., alias="Recipient")
    recipient_address: str = Field(..., alias="RecipientAddress")
    contact_recipient: str = Field(..., alias="ContactRecipient")
    recipients_phone: str = Field(..., alias="RecipientsPhone")
    volume_general: float | None = Field(None, alias="VolumeGeneral")
    options_seat: list[OptionsSeat] | None = Field(None, alias="OptionsSeat")


class WaybillWithOptionsRequest(WaybillRequest):
    """Waybill with cash-on-delivery, third-party payer or RedBox options."""

    backward_delivery_data: list[dict[str, Any]] | None = Field(None, alias="BackwardDeliveryData")
    afterpayment_on_goods_cost: float | None = Field(None, alias="AfterpaymentOnGoodsCost")
    third_person: str | None = Field(None, alias="ThirdPerson")
    red_box_barcode: str | None = Field(None, alias="RedBoxBarcode")
    info_reg_client_barcodes: str | None = Field(None, alias="InfoRegClientBarcodes")


class PostomatWaybillRequest(WaybillRequest):
    """Waybill addressed to a postomat; seat dimensions are mandatory."""

    options_seat: list[OptionsSeat] = Field(..., alias="OptionsSeat", min_length=1)


class WaybillUpdateRequest(MethodProperties):
    """``InternetDocument.update``: ``Ref`` plus whatever fields change."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True, extra="allow")

    ref: str = Field(..., alias="Ref", min_length=1)


class WaybillDeleteRequest(MethodProperties):
    """``InternetDocument.delete`` arguments."""

    document_refs: list[str] = Field(..., alias="DocumentRefs", min_length=1)


def postomat_violations(request: PostomatWaybillRequest) -> list[str]:
    """List the postomat size and weight limits a request breaks."""
    violations = []
    if request.weight > POSTOMAT_MAX_WEIGHT_KG:
        violations.append(
            f"weight {request.weight} kg exceeds {POSTOMAT_MAX_WEIGHT_KG:g} kg"
        )

    if request.cost > POSTOMAT_MAX_DECLARED_COST:
        violations.append(
            f"declared cost {request.cost:g} UAH exceeds {POSTOMAT_MAX_DECLARED_COST:g} UAH"
        )

    max_width, max_length, max_height = POSTOMAT_MAX_DIMENSIONS_CM
    for index, seat in enumerate(request.options_seat, start=1):
        if seat.weight > POSTOMAT_MAX_WEIGHT_KG:
            violations.append(
                f"seat {index} weight {seat.weight} kg exceeds {POSTOMAT_MAX_WEIGHT_KG:g} kg"
            )
        if (
            seat.volumetric_width > max_width
            or seat.volumetric_length > max_length
            or seat.volumetric_height > max_height
        ):
            violations.append(
                f"seat {index} is {seat.volumetric_width:g}x{seat.volumetric_length:g}x"
                f"{seat.volumetric_height:g} cm, limit is "
                f"{max_width:g}x{max_length:g}x{max_height:g} cm"
            )
    return violations
