import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query

from dairy_admin.api.deps import get_record_service
from dairy_admin.schemas.record import Record, RecordEdit, RecordFilters, RecordPage
from dairy_admin.services.record_editor import apply_edits
from dairy_admin.services.record_service import RecordService

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("", response_model=RecordPage)
async def list_records(
    page: int = Query(1, ge=1),
    limit: Optional[int] = Query(None, ge=1),
    startDate: Optional[str] = None,
    endDate: Optional[str] = None,
    customerId: Optional[str] = None,
    customerNo: Optional[str] = None,
    searchTerm: Optional[str] = None,
    service: RecordService = Depends(get_record_service),
):
    filters = RecordFilters(
        startDate=startDate,
        endDate=endDate,
        customerId=customerId,
        customerNo=customerNo,
        searchTerm=searchTerm,
    )
    return await service.list_records(page=page, limit=limit, filters=filters)


@router.get("/summary", response_model=Dict[str, Any])
async def records_summary(
    startDate: str,
    endDate: str,
    customerId: Optional[str] = None,
    service: RecordService = Depends(get_record_service),
):
    return await service.get_summary(startDate, endDate, customer_id=customerId)


@router.post("/daily", response_model=Dict[str, Any])
async def create_daily_records(service: RecordService = Depends(get_record_service)):
    """Generate today's records from every active customer's standing order."""
    return await service.create_daily_records()


@router.get("/{record_id}", response_model=Record)
async def get_record(record_id: str, service: RecordService = Depends(get_record_service)):
    return await service.get_record(record_id)


@router.post("/{record_id}/preview", response_model=Record)
async def preview_record_edits(
    record_id: str,
    edits: List[RecordEdit],
    service: RecordService = Depends(get_record_service),
):
    """Recomputed totals for a set of edits, nothing is saved."""
    record = await service.get_record(record_id)
    return apply_edits(record, edits)


@router.put("/{record_id}", response_model=Record)
async def edit_record(
    record_id: str,
    edits: List[RecordEdit],
    service: RecordService = Depends(get_record_service),
):
    return await service.edit_record(record_id, edits)


@router.delete("/{record_id}", response_model=Dict[str, Any])
async def delete_record(record_id: str, service: RecordService = Depends(get_record_service)):
    return await service.delete_record(record_id)
