"""FastMCP server for Nova Poshta.

Exposes tracking, address lookup, waybill, reference, counterparty,
contact person, return and scan sheet operations as MCP tools.

The lifespan loads configuration, sets up logging and builds one client
with every service registered. Tools reach it through
ctx.request_context.lifespan_context["client"]. Logging goes to stderr
so stdout stays free for the stdio transport.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any

from fastmcp import FastMCP

from novaposhta.client import ClientContext, HttpxTransport, build_client
from novaposhta.config import configure_logging, load_config

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: Any):
    """Build the shared client and close its HTTP transport on shutdown.

    Resources yielded are available to all tools via the lifespan context:
    - client: Client with every service registered
    - config: the loaded ServerConfig
    """
    config = load_config()
    configure_logging(config.log_level)

    transport = HttpxTransport(timeout=config.timeout)
    client = build_client(
        ClientContext(transport=transport, base_url=config.base_url, api_key=config.api_key)
    )
    if config.api_key is None:
        logger.warning("NOVA_POSHTA_API_KEY is not set; only keyless lookups will succeed")
    logger.info(f"Nova Poshta MCP server started with services: {', '.join(client.namespaces)}")

    try:
        yield {"client": client, "config": config}
    finally:
        await transport.aclose()
        logger.info("Nova Poshta MCP server stopped")


mcp = FastMCP(name="NovaPoshta", lifespan=lifespan)


from novaposhta.mcp.tools.address import (  # noqa: E402
    address_delete,
    address_get_settlement_country_region,
    address_get_settlements,
    address_get_warehouses,
    address_save,
    address_search_cities,
    address_search_settlements,
    address_search_streets,
    address_update,
)
from novaposhta.mcp.tools.contact_person import (  # noqa: E402
    contact_person_delete,
    contact_person_save,
    contact_person_update,
)
from novaposhta.mcp.tools.counterparty import (  # noqa: E402
    counterparty_delete,
    counterparty_get_addresses,
    counterparty_get_contact_persons,
    counterparty_get_counterparties,
    counterparty_get_options,
    counterparty_save,
    counterparty_update,
)
from novaposhta.mcp.tools.reference import (  # noqa: E402
    reference_decode_message,
    reference_get_cargo_types,
    reference_get_ownership_forms,
    reference_get_pallet_types,
    reference_get_payment_forms,
    reference_get_payment_methods,
    reference_get_service_types,
    reference_get_time_intervals,
    reference_get_types_of_counterparties,
    reference_get_types_of_payers,
)
from novaposhta.mcp.tools.returns import (  # noqa: E402
    return_check_possibility,
    return_create_to_new_address,
    return_create_to_sender_address,
    return_create_to_warehouse,
    return_get_list,
    return_get_pricing,
    return_update,
)
from novaposhta.mcp.tools.scan_sheet import (  # noqa: E402
    scan_sheet_delete,
    scan_sheet_get,
    scan_sheet_insert_documents,
    scan_sheet_list,
    scan_sheet_print,
    scan_sheet_remove_documents,
)
from novaposhta.mcp.tools.tracking import (  # noqa: E402
    get_document_list,
    get_document_movement,
    track_document,
    track_multiple,
    track_multiple_documents,
)
from novaposhta.mcp.tools.waybill import (  # noqa: E402
    waybill_calculate_cost,
    waybill_create,
    waybill_create_batch,
    waybill_create_for_postomat,
    waybill_create_with_options,
    waybill_delete,
    waybill_delete_batch,
    waybill_get_delivery_date,
    waybill_get_estimate,
    waybill_update,
)

# Tracking
mcp.tool()(track_document)
mcp.tool()(track_multiple_documents)
mcp.tool()(track_multiple)
mcp.tool()(get_document_movement)
mcp.tool()(get_document_list)

# Address
mcp.tool()(address_get_settlements)
mcp.tool()(address_get_settlement_country_region)
mcp.tool()(address_search_cities)
mcp.tool()(address_search_settlements)
mcp.tool()(address_search_streets)
mcp.tool()(address_get_warehouses)
mcp.tool()(address_save)
mcp.tool()(address_update)
mcp.tool()(address_delete)

# Waybill
mcp.tool()(waybill_calculate_cost)
mcp.tool()(waybill_get_estimate)
mcp.tool()(waybill_get_delivery_date)
mcp.tool()(waybill_create)
mcp.tool()(waybill_create_with_options)
mcp.tool()(waybill_create_for_postomat)
mcp.tool()(waybill_create_batch)
mcp.tool()(waybill_update)
mcp.tool()(waybill_delete)
mcp.tool()(waybill_delete_batch)

# Reference
mcp.tool()(reference_get_cargo_types)
mcp.tool()(reference_get_service_types)
mcp.tool()(reference_get_payment_methods)
mcp.tool()(reference_get_pallet_types)
mcp.tool()(reference_get_time_intervals)
mcp.tool()(reference_get_ownership_forms)
mcp.tool()(reference_decode_message)
mcp.tool()(reference_get_types_of_payers)
mcp.tool()(reference_get_payment_forms)
mcp.tool()(reference_get_types_of_counterparties)

# Counterparty
mcp.tool()(counterparty_get_counterparties)
mcp.tool()(counterparty_get_addresses)
mcp.tool()(counterparty_get_contact_persons)
mcp.tool()(counterparty_save)
mcp.tool()(counterparty_update)
mcp.tool()(counterparty_delete)
mcp.tool()(counterparty_get_options)

# Contact person
mcp.tool()(contact_person_save)
mcp.tool()(contact_person_update)
mcp.tool()(contact_person_delete)

# Return
mcp.tool()(return_get_list)
mcp.tool()(return_check_possibility)
mcp.tool()(return_create_to_sender_address)
mcp.tool()(return_create_to_new_address)
mcp.tool()(return_create_to_warehouse)
mcp.tool()(return_update)
mcp.tool()(return_get_pricing)

# Scan sheet
mcp.tool()(scan_sheet_insert_documents)
mcp.tool()(scan_sheet_get)
mcp.tool()(scan_sheet_list)
mcp.tool()(scan_sheet_delete)
mcp.tool()(scan_sheet_remove_documents)
mcp.tool()(scan_sheet_print)


if __name__ == "__main__":
    mcp.run(transport="stdio")
