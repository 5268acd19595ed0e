from typing import Optional

from pydantic import BaseModel

from dairy_admin.schemas.common import id_field


class Holiday(BaseModel):
    id: Optional[str] = id_field()
    date: Optional[str] = None
    name: str = ""
    reason: Optional[str] = None
    isRecurringYearly: bool = False


class HolidayCreate(BaseModel):
    date: str
    name: str
    reason: Optional[str] = None
    isRecurringYearly: bool = False
