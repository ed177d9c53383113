"""Domain services and a helper that registers all of them."""

from novaposhta.client.core import Client, ClientContext, create_client
from novaposhta.client.services.address import AddressService
from novaposhta.client.services.contact_person import ContactPersonService
from novaposhta.client.services.counterparty import CounterpartyService
from novaposhta.client.services.reference import ReferenceService
from novaposhta.client.services.returns import ReturnService
from novaposhta.client.services.scan_sheet import ScanSheetService
from novaposhta.client.services.tracking import TrackingService
from novaposhta.client.services.waybill import WaybillService

ALL_SERVICES = (
    AddressService,
    ReferenceService,
    TrackingService,
    WaybillService,
    ScanSheetService,
    ReturnService,
    CounterpartyService,
    ContactPersonService,
)


def build_client(context: ClientContext) -> Client:
    """Create a client with a fresh instance of every service registered."""
    client = create_client(context)
    for service_cls in ALL_SERVICES:
        client.use(service_cls())
    return client


__all__ = [
    "ALL_SERVICES",
    "AddressService",
    "ContactPersonService",
    "CounterpartyService",
    "ReferenceService",
    "ReturnService",
    "ScanSheetService",
    "TrackingService",
    "WaybillService",
    "build_client",
]
