"""Counterparty and contact person request models."""

from enum import Enum
from typing import Literal

from pydantic import Field

from novaposhta.client.models.base import MethodProperties


class CounterpartyProperty(str, Enum):
    SENDER = "Sender"
    RECIPIENT = "Recipient"
    THIRD_PERSON = "ThirdPerson"


class CounterpartyType(str, Enum):
    PRIVATE_PERSON = "PrivatePerson"
    ORGANIZATION = "Organization"


class PrivatePersonCounterparty(MethodProperties):
    """``Counterparty.save`` for a private person."""

    counterparty_type: Literal["PrivatePerson"] = Field("PrivatePerson", alias="CounterpartyType")
    counterparty_property: CounterpartyProperty = Field(..., alias="CounterpartyProperty")
    first_name: str = Field(..., alias="FirstName", min_length=1)
    last_name: str = Field(..., alias="LastName", min_length=1)
    middle_name: str | None = Field(None, alias="MiddleName")
    phone: str = Field(..., alias="Phone", min_length=1)
    email: str | None = Field(None, alias="Email")
    city_ref: str | None = Field(None, alias="CityRef")


class OrganizationCounterparty(MethodProperties):
    """``Counterparty.save`` for a legal entity."""

    counterparty_type: Literal["Organization"] = Field("Organization", alias="CounterpartyType")
    counterparty_property: CounterpartyProperty = Field(..., alias="CounterpartyProperty")
    ownership_form: str = Field(..., alias="OwnershipForm", min_length=1)
    edrpou: str = Field(..., alias="EDRPOU", min_length=1)
    first_name: str | None = Field(None, alias="FirstName")
    last_name: str | None = Field(None, alias="LastName")
    middle_name: str | None = Field(None, alias="MiddleName")
    phone: str | None = Field(None, alias="Phone")
    email: str | None = Field(None, alias="Email")
    city_ref: str | None = Field(None, alias="CityRef")


CounterpartySaveRequest = PrivatePersonCounterparty | OrganizationCounterparty


class CounterpartyUpdateRequest(MethodProperties):
    ref: str = Field(..., alias="Ref", min_length=1)
    counterparty_property: CounterpartyProperty = Field(..., alias="CounterpartyProperty")
    first_name: str | None = Field(None, alias="FirstName")
    middle_name: str | None = Field(None, alias="MiddleName")
    last_name: str | None = Field(None, alias="LastName")
    phone: str | None = Field(None, alias="Phone")
    email: str | None = Field(None, alias="Email")
    city_ref: str | None = Field(None, alias="CityRef")


class ContactPersonSaveRequest(MethodProperties):
    counterparty_ref: str = Field(..., alias="CounterpartyRef", min_length=1)
    first_name: str = Field(..., alias="FirstName", min_length=1)
    last_name: str = Field(..., alias="LastName", min_length=1)
    phone: str = Field(..., alias="Phone", min_length=1)
    middle_name: str | None = Field(None, alias="MiddleName")
    email: str | None = Field(None, alias="Email")


class ContactPersonUpdateRequest(MethodProperties):
    ref: str = Field(..., alias="Ref", min_length=1)
    counterparty_ref: str = Field(..., alias="CounterpartyRef", min_length=1)
    first_name: str | None = Field(None, alias="FirstName")
    last_name: str | None = Field(None, alias="LastName")
    phone: str | None = Field(None, alias="Phone")
    middle_name: str | None = Field(None, alias="MiddleName")
    email: str | None = Field(None, alias="Email")


class ContactPersonDeleteRequest(MethodProperties):
    ref: str = Field(..., alias="Ref", min_length=1)
    counterparty_ref: str = Field(..., alias="CounterpartyRef", min_length=1)
