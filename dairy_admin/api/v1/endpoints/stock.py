from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends

from dairy_admin.api.deps import get_stock_service
from dairy_admin.schemas.stock import StockEntry, StockEntryCreate, StockFilters, StockOverview, StockValidation
from dairy_admin.services.stock_service import StockService

router = APIRouter()


@router.get("", response_model=StockOverview)
async def stock_overview(
    startDate: Optional[str] = None,
    endDate: Optional[str] = None,
    category: Optional[str] = None,
    service: StockService = Depends(get_stock_service),
):
    """Entries, summary and per-category balances in one payload."""
    filters = StockFilters(startDate=startDate, endDate=endDate, category=category)
    return await service.overview(filters)


@router.post("/validate", response_model=StockValidation)
async def validate_stock_entry(data: StockEntryCreate, service: StockService = Depends(get_stock_service)):
    return await service.validate_entry(data)


@router.post("", response_model=StockEntry)
async def create_stock_entry(data: StockEntryCreate, service: StockService = Depends(get_stock_service)):
    return await service.create_entry(data)


@router.get("/{entry_id}", response_model=StockEntry)
async def get_stock_entry(entry_id: str, service: StockService = Depends(get_stock_service)):
    return await service.get_entry(entry_id)


@router.put("/{entry_id}", response_model=StockEntry)
async def update_stock_entry(
    entry_id: str,
    data: StockEntryCreate,
    service: StockService = Depends(get_stock_service),
):
    return await service.update_entry(entry_id, data)


@router.delete("/{entry_id}", response_model=Dict[str, Any])
async def delete_stock_entry(entry_id: str, service: StockService = Depends(get_stock_service)):
    return await service.delete_entry(entry_id)
