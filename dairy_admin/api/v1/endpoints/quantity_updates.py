from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends

from dairy_admin.api.deps import get_quantity_update_service
from dairy_admin.schemas.quantity_update import (
    QuantityUpdate,
    QuantityUpdateAccept,
    QuantityUpdateCreate,
    QuantityUpdateReject,
)
from dairy_admin.services.quantity_update_service import QuantityUpdateService

router = APIRouter()


@router.get("", response_model=List[QuantityUpdate])
async def list_quantity_updates(
    startDate: Optional[str] = None,
    endDate: Optional[str] = None,
    customerId: Optional[str] = None,
    service: QuantityUpdateService = Depends(get_quantity_update_service),
):
    return await service.list_updates(startDate, endDate, customerId)


@router.post("", response_model=QuantityUpdate)
async def create_quantity_update(
    data: QuantityUpdateCreate,
    service: QuantityUpdateService = Depends(get_quantity_update_service),
):
    return await service.create_update(data)


@router.patch("/{update_id}/accept", response_model=Dict[str, Any])
async def accept_quantity_update(
    update_id: str,
    data: QuantityUpdateAccept,
    service: QuantityUpdateService = Depends(get_quantity_update_service),
):
    """Accept a request; ``lastUpdated`` is the quantity being approved."""
    return await service.accept_update(update_id, data.lastUpdated)


@router.patch("/{update_id}/reject", response_model=Dict[str, Any])
async def reject_quantity_update(
    update_id: str,
    data: QuantityUpdateReject,
    service: QuantityUpdateService = Depends(get_quantity_update_service),
):
    return await service.reject_update(update_id, data.reason)
