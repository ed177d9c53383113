"""Address service: settlements, cities, streets, warehouses and sender addresses."""

from typing import Any

from novaposhta.client.core import Service
from novaposhta.client.enums import NovaPoshtaMethod, NovaPoshtaModel
from novaposhta.client.pagination import DEFAULT_PAGE_LIMIT, fetch_all_pages
from novaposhta.client.response import ResponseEnvelope

WAREHOUSE_FILTERS = (
    "Ref",
    "CityName",
    "CityRef",
    "SettlementRef",
    "WarehouseId",
    "FindByString",
    "TypeOfWarehouseRef",
    "BicycleParking",
    "PostFinance",
    "POSTerminal",
    "Language",
)


def _compact(**properties: Any) -> dict[str, Any]:
    return {key: value for key, value in properties.items() if value is not None}


class AddressService(Service):
    """Address directory lookups and counterparty address management."""

    namespace = "address"

    async def search_settlements(
        self, city_name: str, page: int = 1, limit: int = 50
    ) -> ResponseEnvelope:
        """Online settlement search by name or postal code.

        Matches are nested under ``data[0]["Addresses"]``.
        """
        return await self._request(
            NovaPoshtaModel.ADDRESS,
            NovaPoshtaMethod.SEARCH_SETTLEMENTS,
            {"CityName": city_name, "Page": page, "Limit": limit},
        )

    async def search_settlement_streets(
        self, settlement_ref: str, street_name: str, limit: int | None = None
    ) -> ResponseEnvelope:
        """Online street search within a settlement."""
        return await self._request(
            NovaPoshtaModel.ADDRESS,
            NovaPoshtaMethod.SEARCH_SETTLEMENT_STREETS,
            _compact(SettlementRef=settlement_ref, StreetName=street_name, Limit=limit),
        )

    async def get_settlements(self, ref: str | None = None) -> ResponseEnvelope:
        """Administrative areas (oblasts)."""
        return await self._request(
            NovaPoshtaModel.ADDRESS,
            NovaPoshtaMethod.GET_SETTLEMENTS,
            _compact(Ref=ref),
        )

    async def get_settlement_country_region(
        self, area_ref: str, ref: str | None = None
    ) -> ResponseEnvelope:
        """Regions (raions) within an area."""
        return await self._request(
            NovaPoshtaModel.ADDRESS,
            NovaPoshtaMethod.GET_SETTLEMENT_COUNTRY_REGION,
            _compact(AreaRef=area_ref, Ref=ref),
        )

    async def get_cities(
        self,
        find_by_string: str | None = None,
        ref: str | None = None,
        page: int | None = None,
        limit: int | None = None,
    ) -> ResponseEnvelope:
        """Cities served by Nova Poshta warehouses."""
        return await self._request(
            NovaPoshtaModel.ADDRESS,
            NovaPoshtaMethod.GET_CITIES,
            _compact(FindByString=find_by_string, Ref=ref, Page=page, Limit=limit),
        )

    async def get_warehouses(self, **filters: Any) -> ResponseEnvelope:
        """Warehouses and postomats.

        Accepts the API's filter names as keyword arguments (``CityRef``,
        ``SettlementRef``, ``TypeOfWarehouseRef``, ...) plus ``Page`` and
        ``Limit``. None values are dropped.

        Raises:
            TypeError: On a filter name the API does not know.
        """
        unknown = set(filters) - set(WAREHOUSE_FILTERS) - {"Page", "Limit"}
        if unknown:
            raise TypeError(f"Unknown warehouse filters: {', '.join(sorted(unknown))}")
        return await self._request(
            NovaPoshtaModel.ADDRESS,
            NovaPoshtaMethod.GET_WAREHOUSES,
            _compact(**filters),
        )

    async def get_all_warehouses(
        self, city_ref: str, limit: int = DEFAULT_PAGE_LIMIT, **filters: Any
    ) -> ResponseEnvelope:
        """Every warehouse of a city, fetched page by page.

        Raises:
            TypeError: If ``filters`` sets ``CityRef``, ``Page`` or ``Limit``;
                the walk owns those, use ``city_ref`` and ``limit`` instead.
        """
        reserved = {"CityRef", "Page", "Limit"} & set(filters)
        if reserved:
            raise TypeError(
                f"get_all_warehouses sets {', '.join(sorted(reserved))} itself; "
                "use city_ref and limit instead"
            )

        async def fetch_page(page: int, page_limit: int) -> ResponseEnvelope:
            return await self.get_warehouses(CityRef=city_ref, Page=page, Limit=page_limit, **filters)

        return await fetch_all_pages(fetch_page, limit=limit)

    async def get_street(
        self,
        city_ref: str,
        find_by_string: str | None = None,
        page: int | None = None,
        limit: int | None = None,
    ) -> ResponseEnvelope:
        """Streets of a city from the directory."""
        return await self._request(
            NovaPoshtaModel.ADDRESS,
            NovaPoshtaMethod.GET_STREET,
            _compact(CityRef=city_ref, FindByString=find_by_string, Page=page, Limit=limit),
        )

    async def save(
        self,
        counterparty_ref: str,
        street_ref: str,
        building_number: str,
        flat: str | None = None,
        note: str | None = None,
    ) -> ResponseEnvelope:
        """Create a counterparty address. Needs an API key."""
        return await self._request(
            NovaPoshtaModel.ADDRESS,
            NovaPoshtaMethod.SAVE,
            _compact(
                CounterpartyRef=counterparty_ref,
                StreetRef=street_ref,
                BuildingNumber=building_number,
                Flat=flat,
                Note=note,
            ),
        )

    async def update(
        self,
        ref: str,
        counterparty_ref: str,
        street_ref: str | None = None,
        building_number: str | None = None,
        flat: str | None = None,
        note: str | None = None,
    ) -> ResponseEnvelope:
        """Edit a counterparty address. Needs an API key."""
        return await self._request(
            NovaPoshtaModel.ADDRESS,
            NovaPoshtaMethod.UPDATE,
            _compact(
                Ref=ref,
                CounterpartyRef=counterparty_ref,
                StreetRef=street_ref,
                BuildingNumber=building_number,
                Flat=flat,
                Note=note,
            ),
        )

    async def delete(self, ref: str) -> ResponseEnvelope:
        """Delete a counterparty address. Needs an API key."""
        return await self._request(NovaPoshtaModel.ADDRESS, NovaPoshtaMethod.DELETE, {"Ref": ref})
