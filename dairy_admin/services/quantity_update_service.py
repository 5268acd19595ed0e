import logging
from typing import Any, Dict, List, Optional

from dairy_admin.core.errors import ValidationFailed
from dairy_admin.schemas.quantity_update import QuantityUpdate, QuantityUpdateCreate
from dairy_admin.services.upstream import UpstreamService

logger = logging.getLogger(__name__)

REJECT_REASON_REQUIRED = "Please enter a reason for rejection."


class QuantityUpdateService(UpstreamService):
    """Customer requests to change a delivery quantity, reviewed by an admin."""

    async def list_updates(
        self,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        customer_id: Optional[str] = None,
    ) -> List[QuantityUpdate]:
        payload = await self.api.get(
            "/updates/quantity",
            params={"startDate": start_date, "endDate": end_date, "customerId": customer_id},
        )
        return [QuantityUpdate.model_validate(row) for row in self._items(payload, "data")]

    async def create_update(self, data: QuantityUpdateCreate) -> QuantityUpdate:
        payload = await self.api.post("/updates/quantity", json=data.model_dump(exclude_none=True))
        update = QuantityUpdate.model_validate(self._document(payload))
        logger.info(f"Quantity update requested for customer {data.customerId} on {data.date}")
        return update

    async def accept_update(self, update_id: str, last_updated: float) -> Dict[str, Any]:
        payload = await self.api.patch("/updates/quantity/accept", json={"id": update_id, "lastUpdated": last_updated})
        logger.info(f"Quantity update {update_id} accepted ({last_updated})")
        return payload or {}

    async def reject_update(self, update_id: str, reason: str) -> Dict[str, Any]:
        reason = (reason or "").strip()
        if not reason:
            raise ValidationFailed(REJECT_REASON_REQUIRED, field="reason")
        payload = await self.api.patch(f"/updates/quantity/{update_id}/reject", json={"reason": reason})
        logger.info(f"Quantity update {update_id} rejected: {reason}")
        return payload or {}
