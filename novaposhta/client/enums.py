"""Model and method names understood by the Nova Poshta JSON API."""

from enum import Enum


class NovaPoshtaModel(str, Enum):
    """Remote ``modelName`` values."""

    ADDRESS = "Address"
    ADDRESS_GENERAL = "AddressGeneral"
    COMMON = "Common"
    COMMON_GENERAL = "CommonGeneral"
    TRACKING_DOCUMENT = "TrackingDocument"
    INTERNET_DOCUMENT = "InternetDocument"
    SCAN_SHEET = "ScanSheetGeneral"
    ADDITIONAL_SERVICE = "AdditionalServiceGeneral"
    COUNTERPARTY = "Counterparty"
    CONTACT_PERSON = "ContactPerson"


class NovaPoshtaMethod(str, Enum):
    """Remote ``calledMethod`` values."""

    # Shared CRUD
    SAVE = "save"
    UPDATE = "update"
    DELETE = "delete"

    # Address
    SEARCH_SETTLEMENTS = "searchSettlements"
    SEARCH_SETTLEMENT_STREETS = "searchSettlementStreets"
    GET_SETTLEMENTS = "getSettlementAreas"
    GET_SETTLEMENT_COUNTRY_REGION = "getSettlementCountryRegion"
    GET_CITIES = "getCities"
    GET_WAREHOUSES = "getWarehouses"
    GET_STREET = "getStreet"

    # Reference
    GET_CARGO_TYPES = "getCargoTypes"
    GET_SERVICE_TYPES = "getServiceTypes"
    GET_PALLETS_LIST = "getPalletsList"
    GET_OWNERSHIP_FORMS_LIST = "getOwnershipFormsList"
    GET_PACK_LIST = "getPackList"
    GET_TIRES_WHEELS_LIST = "getTiresWheelsList"
    GET_CARGO_DESCRIPTION_LIST = "getCargoDescriptionList"
    GET_BACKWARD_DELIVERY_CARGO_TYPES = "getBackwardDeliveryCargoTypes"
    GET_TYPES_OF_PAYERS = "getTypesOfPayers"
    GET_TYPES_OF_PAYERS_FOR_REDELIVERY = "getTypesOfPayersForRedelivery"
    GET_PAYMENT_FORMS = "getPaymentForms"
    GET_TYPES_OF_COUNTERPARTIES = "getTypesOfCounterparties"
    GET_TIME_INTERVALS = "getTimeIntervals"
    GET_PICKUP_TIME_INTERVALS = "getPickupTimeIntervals"
    GET_MESSAGE_CODE_TEXT = "getMessageCodeText"

    # Tracking
    GET_STATUS_DOCUMENTS = "getStatusDocuments"
    GET_DOCUMENT_MOVEMENT = "getMovementOfDocuments"
    GET_DOCUMENT_LIST = "getDocumentList"

    # Waybill
    GET_DOCUMENT_PRICE = "getDocumentPrice"
    GET_DOCUMENT_DELIVERY_DATE = "getDocumentDeliveryDate"

    # Scan sheet
    INSERT_DOCUMENTS = "insertDocuments"
    GET_SCAN_SHEET = "getScanSheet"
    GET_SCAN_SHEET_LIST = "getScanSheetList"
    DELETE_SCAN_SHEET = "deleteScanSheet"
    REMOVE_DOCUMENTS = "removeDocuments"
    PRINT_SCAN_SHEET = "printScanSheet"

    # Returns
    GET_RETURN_ORDERS_LIST = "getReturnOrdersList"
    CHECK_POSSIBILITY_CREATE_RETURN = "CheckPossibilityCreateReturn"

    # Counterparty
    GET_COUNTERPARTIES = "getCounterparties"
    GET_COUNTERPARTY_ADDRESSES = "getCounterpartyAddresses"
    GET_COUNTERPARTY_CONTACT_PERSONS = "getCounterpartyContactPersons"
    GET_COUNTERPARTY_OPTIONS = "getCounterpartyOptions"
