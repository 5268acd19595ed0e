from typing import Any, Dict, List, Optional

from dairy_admin.schemas.holiday import Holiday, HolidayCreate
from dairy_admin.services.upstream import UpstreamService


class HolidayService(UpstreamService):
    """Days with no delivery."""

    async def list_holidays(self, params: Optional[Dict[str, Any]] = None) -> List[Holiday]:
        payload = await self.api.get("/holidays", params=params or {})
        return [Holiday.model_validate(row) for row in self._items(payload, "holidays")]

    async def get_holiday(self, holiday_id: str) -> Holiday:
        payload = await self.api.get(f"/holidays/{holiday_id}")
        return Holiday.model_validate(self._document(payload))

    async def create_holiday(self, data: HolidayCreate) -> Holiday:
        payload = await self.api.post("/holidays", json=data.model_dump())
        return Holiday.model_validate(self._document(payload))

    async def update_holiday(self, holiday_id: str, data: HolidayCreate) -> Holiday:
        payload = await self.api.put(f"/holidays/{holiday_id}", json=data.model_dump())
        return Holiday.model_validate(self._document(payload))

    async def delete_holiday(self, holiday_id: str) -> Dict[str, Any]:
        return await self.api.delete(f"/holidays/{holiday_id}") or {}

    async def upcoming(self) -> List[Holiday]:
        payload = await self.api.get("/holidays/upcoming")
        return [Holiday.model_validate(row) for row in self._items(payload, "holidays")]

    async def by_year(self, year: int) -> List[Holiday]:
        payload = await self.api.get(f"/holidays/year/{year}")
        return [Holiday.model_validate(row) for row in self._items(payload, "holidays")]
