"""Address tools: settlements, cities, streets, warehouses, sender addresses."""

from fastmcp import Context

from novaposhta.mcp.utils import first_record, get_client, raise_for_response, tool_errors
from novaposhta.mcp.validation import require_string


async def address_get_settlements(ctx: Context, ref: str | None = None) -> dict:
    """List administrative areas (oblasts), or one area by ref."""
    with tool_errors("Address", "address_get_settlements"):
        response = await get_client(ctx).address.get_settlements(ref=ref or None)
        raise_for_response(response, "Failed to get settlements")

        settlements = [
            {
                "ref": item.get("Ref"),
                "description": item.get("Description"),
                "areas_center": item.get("AreasCenter"),
            }
            for item in response.data
        ]
        return {"total": len(settlements), "settlements": settlements}


async def address_get_settlement_country_region(
    area_ref: str, ctx: Context, ref: str | None = None
) -> dict:
    """List regions (raions) within an area."""
    with tool_errors("Address", "address_get_settlement_country_region"):
        area_ref = require_string(area_ref, "area_ref")
        response = await get_client(ctx).address.get_settlement_country_region(area_ref, ref=ref or None)
        raise_for_response(response, "Failed to get settlement country regions")

        regions = [
            {
                "ref": item.get("Ref"),
                "description": item.get("Description"),
                "region_type": item.get("RegionType"),
                "areas_center": item.get("AreasCenter"),
            }
            for item in response.data
        ]
        return {"total": len(regions), "regions": regions}


async def address_search_cities(
    find_by_string: str, ctx: Context, page: int = 1, limit: int = 10
) -> dict:
    """Search cities served by Nova Poshta warehouses."""
    with tool_errors("Address", "address_search_cities"):
        query = require_string(find_by_string, "find_by_string")
        response = await get_client(ctx).address.get_cities(find_by_string=query, page=page, limit=limit)
        raise_for_response(response, "Failed to search cities")

        cities = [
            {
                "description": city.get("Description"),
                "ref": city.get("Ref"),
                "area": city.get("Area"),
                "warehouses": int(city.get("Warehouses") or 0),
            }
            for city in response.data
        ]
        return {"total": len(cities), "cities": cities}


async def address_search_settlements(
    city_name: str, ctx: Context, page: int = 1, limit: int = 10
) -> dict:
    """Search any settlement by name or postal code (online search)."""
    with tool_errors("Address", "address_search_settlements"):
        city_name = require_string(city_name, "city_name")
        response = await get_client(ctx).address.search_settlements(city_name, page=page, limit=limit)
        raise_for_response(response, "Failed to search settlements")

        settlements = [
            {
                "name": address.get("MainDescription"),
                "area": address.get("Area"),
                "region": address.get("Region"),
                "warehouses": address.get("Warehouses"),
                "settlement_ref": address.get("Ref"),
                "delivery_city": address.get("DeliveryCity"),
            }
            for address in first_record(response).get("Addresses", [])
        ]
        return {"total": len(settlements), "settlements": settlements}


async def address_search_streets(
    settlement_ref: str, street_name: str, ctx: Context, limit: int = 10
) -> dict:
    """Search streets within a settlement."""
    with tool_errors("Address", "address_search_streets"):
        settlement_ref = require_string(settlement_ref, "settlement_ref")
        street_name = require_string(street_name, "street_name")
        response = await get_client(ctx).address.search_settlement_streets(
            settlement_ref, street_name, limit=limit
        )
        raise_for_response(response, "Failed to search streets")

        streets = [
            {
                "name": street.get("SettlementStreetDescription"),
                "ref": street.get("SettlementStreetRef"),
                "present": street.get("Present"),
                "streets_type": street.get("StreetsType"),
                "streets_type_description": street.get("StreetsTypeDescription"),
            }
            for street in first_record(response).get("Addresses", [])
        ]
        return {"total": len(streets), "streets": streets}


async def address_get_warehouses(
    ctx: Context,
    ref: str | None = None,
    city_ref: str | None = None,
    settlement_ref: str | None = None,
    city_name: str | None = None,
    find_by_string: str | None = None,
    type_of_warehouse_ref: str | None = None,
    warehouse_id: str | None = None,
    page: int = 1,
    limit: int = 10,
) -> dict:
    """List warehouses and postomats.

    One of ``ref``, ``city_ref`` or ``settlement_ref`` is required.
    """
    with tool_errors("Address", "address_get_warehouses"):
        if not (ref or city_ref or settlement_ref):
            raise ValueError("ref, city_ref, or settlement_ref is required to list warehouses")

        response = await get_client(ctx).address.get_warehouses(
            Ref=ref or None,
            CityRef=city_ref or None,
            SettlementRef=settlement_ref or None,
            CityName=city_name or None,
            FindByString=find_by_string or None,
            TypeOfWarehouseRef=type_of_warehouse_ref or None,
            WarehouseId=warehouse_id or None,
            Page=page,
            Limit=limit,
        )
        raise_for_response(response, "Nova Poshta API returned an error")

        return {"total": len(response.data), "warehouses": response.data}


async def address_save(
    counterparty_ref: str,
    street_ref: str,
    building_number: str,
    ctx: Context,
    flat: str | None = None,
    note: str | None = None,
) -> dict:
    """Create an address for a counterparty. Needs an API key."""
    with tool_errors("Address", "address_save"):
        response = await get_client(ctx).address.save(
            require_string(counterparty_ref, "counterparty_ref"),
            require_string(street_ref, "street_ref"),
            require_string(building_number, "building_number"),
            flat=flat,
            note=note,
        )
        raise_for_response(response, "Failed to save address")

        record = first_record(response)
        return {"success": True, "ref": record.get("Ref"), "description": record.get("Description")}


async def address_update(
    ref: str,
    counterparty_ref: str,
    street_ref: str,
    building_number: str,
    ctx: Context,
    flat: str | None = None,
    note: str | None = None,
) -> dict:
    """Edit a counterparty address. Needs an API key."""
    with tool_errors("Address", "address_update"):
        response = await get_client(ctx).address.update(
            require_string(ref, "ref"),
            require_string(counterparty_ref, "counterparty_ref"),
            street_ref=require_string(street_ref, "street_ref"),
            building_number=require_string(building_number, "building_number"),
            flat=flat,
            note=note,
        )
        raise_for_response(response, "Failed to update address")

        record = first_record(response)
        return {"success": True, "ref": record.get("Ref"), "description": record.get("Description")}


async def address_delete(ref: str, ctx: Context) -> dict:
    """Delete a counterparty address. Needs an API key."""
    with tool_errors("Address", "address_delete"):
        response = await get_client(ctx).address.delete(require_string(ref, "ref"))
        raise_for_response(response, "Failed to delete address")

        return {"success": True, "message": "Address deleted successfully"}
