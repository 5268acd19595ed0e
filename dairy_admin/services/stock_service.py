import logging
from typing import Any, Dict, List, Optional

from dairy_admin.core.errors import ApiError, ValidationFailed
from dairy_admin.schemas.stock import (
    CategoryStock,
    StockEntry,
    StockEntryCreate,
    StockFilters,
    StockOverview,
    StockValidation,
)
from dairy_admin.services.stock_validation import validate_stock_availability
from dairy_admin.services.upstream import UpstreamService

logger = logging.getLogger(__name__)


class StockService(UpstreamService):
    """Stock entries and the per-category balances used to pre-check stock-outs.

    The last loaded per-category summary is kept and refreshed whenever
    entries or balances are reloaded; stock-out checks read from it.
    """

    def __init__(self, api):
        super().__init__(api)
        self.category_stock: Optional[List[CategoryStock]] = None

    async def list_entries(self, filters: Optional[StockFilters] = None) -> List[StockEntry]:
        payload = await self.api.get("/stock", params=self._params(filters))
        return [StockEntry.model_validate(row) for row in self._items(payload, "entries")]

    async def get_entry(self, entry_id: str) -> StockEntry:
        payload = await self.api.get(f"/stock/{entry_id}")
        return StockEntry.model_validate(self._document(payload))

    async def get_summary(self, filters: Optional[StockFilters] = None) -> Dict[str, Any]:
        return await self.api.get("/stock/summary", params=self._params(filters)) or {}

    async def get_category_stock(self, filters: Optional[StockFilters] = None) -> List[CategoryStock]:
        payload = await self.api.get("/stock/categories", params=self._params(filters))
        self.category_stock = [CategoryStock.model_validate(row) for row in self._items(payload, "categories")]
        return self.category_stock

    async def overview(self, filters: Optional[StockFilters] = None) -> StockOverview:
        entries = await self.list_entries(filters)
        summary = await self.get_summary(filters)
        try:
            category_stock = await self.get_category_stock(filters)
        except ApiError as e:
            logger.warning(f"Failed to load category stock data: {e.message}")
            category_stock = []
        return StockOverview(entries=entries, summary=summary, categoryStock=category_stock)

    async def create_entry(self, data: StockEntryCreate) -> StockEntry:
        await self._check_availability(data)
        payload = await self.api.post("/stock", json=data.model_dump(mode="json", exclude_none=True))
        self.category_stock = None
        logger.info(f"Stock {data.entryType} of {data.quantity} recorded for category {data.category}")
        return StockEntry.model_validate(self._document(payload))

    async def update_entry(self, entry_id: str, data: StockEntryCreate) -> StockEntry:
        await self._check_availability(data)
        payload = await self.api.put(f"/stock/{entry_id}", json=data.model_dump(mode="json", exclude_none=True))
        self.category_stock = None
        return StockEntry.model_validate(self._document(payload))

    async def delete_entry(self, entry_id: str) -> Dict[str, Any]:
        payload = await self.api.delete(f"/stock/{entry_id}")
        self.category_stock = None
        return payload or {}

    async def validate_entry(self, data: StockEntryCreate) -> StockValidation:
        if data.entryType == "out" and self.category_stock is None:
            await self.get_category_stock()
        return validate_stock_availability(data.entryType, data.quantity, data.category, self.category_stock or [])

    async def _check_availability(self, data: StockEntryCreate) -> None:
        validation = await self.validate_entry(data)
        if not validation.isValid:
            raise ValidationFailed(validation.error, field="quantity")

    @staticmethod
    def _params(filters: Optional[StockFilters]) -> Dict[str, Any]:
        return filters.model_dump(exclude_none=True) if filters else {}
