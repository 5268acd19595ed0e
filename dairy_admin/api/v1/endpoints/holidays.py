from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends

from dairy_admin.api.deps import get_holiday_service
from dairy_admin.schemas.holiday import Holiday, HolidayCreate
from dairy_admin.services.holiday_service import HolidayService

router = APIRouter()


@router.get("", response_model=List[Holiday])
async def list_holidays(
    startDate: Optional[str] = None,
    endDate: Optional[str] = None,
    service: HolidayService = Depends(get_holiday_service),
):
    return await service.list_holidays({"startDate": startDate, "endDate": endDate})


@router.get("/upcoming", response_model=List[Holiday])
async def upcoming_holidays(service: HolidayService = Depends(get_holiday_service)):
    return await service.upcoming()


@router.get("/year/{year}", response_model=List[Holiday])
async def holidays_by_year(year: int, service: HolidayService = Depends(get_holiday_service)):
    return await service.by_year(year)


@router.post("", response_model=Holiday)
async def create_holiday(data: HolidayCreate, service: HolidayService = Depends(get_holiday_service)):
    return await service.create_holiday(data)


@router.get("/{holiday_id}", response_model=Holiday)
async def get_holiday(holiday_id: str, service: HolidayService = Depends(get_holiday_service)):
    return await service.get_holiday(holiday_id)


@router.put("/{holiday_id}", response_model=Holiday)
async def update_holiday(
    holiday_id: str,
    data: HolidayCreate,
    service: HolidayService = Depends(get_holiday_service),
):
    return await service.update_holiday(holiday_id, data)


@router.delete("/{holiday_id}", response_model=Dict[str, Any])
async def delete_holiday(holiday_id: str, service: HolidayService = Depends(get_holiday_service)):
    return await service.delete_holiday(holiday_id)
