import logging
from typing import Any, Dict, List, Optional

from dairy_admin.core.config import settings
from dairy_admin.schemas.record import Record, RecordEdit, RecordFilters, RecordPage
from dairy_admin.services.record_editor import apply_edits, build_update_payload
from dairy_admin.services.upstream import UpstreamService

logger = logging.getLogger(__name__)


class RecordService(UpstreamService):
    """Daily delivery records."""

    async def list_records(self, page: int = 1, limit: Optional[int] = None, filters: Optional[RecordFilters] = None) -> RecordPage:
        filters = filters or RecordFilters()
        params: Dict[str, Any] = {"page": page, "limit": limit or settings.PAGE_SIZE}
        # A date window is only sent when both ends are known
        if filters.startDate and filters.endDate:
            params["startDate"] = filters.startDate
            params["endDate"] = filters.endDate
        params["customerId"] = filters.customerId
        params["customerNo"] = filters.customerNo
        params["searchTerm"] = filters.searchTerm

        payload = await self.api.get("/records", params=params) or {}
        pagination = payload.get("pagination") or {}
        return RecordPage(
            records=self._items(payload, "data"),
            currentPage=pagination.get("currentPage") or page,
            totalPages=pagination.get("totalPages") or 1,
            totalRecords=pagination.get("totalRecords") or 0,
        )

    async def get_record(self, record_id: str) -> Record:
        payload = await self.api.get(f"/records/{record_id}")
        return Record.model_validate(self._document(payload))

    async def edit_record(self, record_id: str, edits: List[RecordEdit]) -> Record:
        """Apply quantity/price corrections and send only the recomputed parts."""
        record = apply_edits(await self.get_record(record_id), edits)
        payload = build_update_payload(record)
        response = await self.api.put(f"/records/{record_id}", json=payload.model_dump(mode="json"))
        logger.info(f"Record {record_id} updated: {record.totalDailyQuantity} units, {record.totalDailyPrice} total")
        document = self._document(response)
        return Record.model_validate(document) if document else record

    async def delete_record(self, record_id: str) -> Dict[str, Any]:
        return await self.api.delete(f"/records/{record_id}") or {}

    async def create_daily_records(self) -> Dict[str, Any]:
        payload = await self.api.post("/records/daily") or {}
        logger.info(f"Created {payload.get('count', 0)} daily records")
        return payload

    async def get_summary(self, start_date: str, end_date: str, customer_id: Optional[str] = None) -> Dict[str, Any]:
        return await self.api.get(
            "/records/summary",
            params={"startDate": start_date, "endDate": end_date, "customerId": customer_id},
        ) or {}
