from typing import Any, Dict, List

from dairy_admin.schemas.system_config import Admin, AdminCreate, Milkman, MilkmanCreate, SystemConfig
from dairy_admin.services.upstream import UpstreamService


class SystemConfigService(UpstreamService):
    """Delivery timings, milkmen and admin accounts."""

    async def get_config(self) -> SystemConfig:
        payload = await self.api.get("/config")
        return SystemConfig.model_validate(self._document(payload))

    async def update_config(self, data: SystemConfig) -> SystemConfig:
        payload = await self.api.put("/config", json=data.model_dump(exclude_none=True))
        return SystemConfig.model_validate(self._document(payload))

    async def list_active_milkmen(self) -> List[Milkman]:
        payload = await self.api.get("/config/milkmen")
        return [Milkman.model_validate(row) for row in self._items(payload, "milkmen")]

    async def add_milkman(self, data: MilkmanCreate) -> Milkman:
        payload = await self.api.post("/config/milkman", json=data.model_dump())
        return Milkman.model_validate(self._document(payload))

    async def update_milkman(self, milkman_id: str, data: MilkmanCreate) -> Milkman:
        payload = await self.api.put(f"/config/milkman/{milkman_id}", json=data.model_dump())
        return Milkman.model_validate(self._document(payload))

    async def delete_milkman(self, milkman_id: str) -> Dict[str, Any]:
        return await self.api.delete(f"/config/milkman/{milkman_id}") or {}

    async def list_admins(self) -> List[Admin]:
        payload = await self.api.get("/auth/admins")
        return [Admin.model_validate(row) for row in self._items(payload, "admins")]

    async def create_admin(self, data: AdminCreate) -> Admin:
        payload = await self.api.post("/auth/admins", json=data.model_dump(exclude_none=True))
        return Admin.model_validate(self._document(payload))

    async def update_admin(self, admin_id: str, data: AdminCreate) -> Admin:
        # A blank password keeps the current one
        body = data.model_dump(exclude_none=True)
        if not body.get("password"):
            body.pop("password", None)
        payload = await self.api.put(f"/auth/admins/{admin_id}", json=body)
        return Admin.model_validate(self._document(payload))

    async def delete_admin(self, admin_id: str) -> Dict[str, Any]:
        return await self.api.delete(f"/auth/admins/{admin_id}") or {}
