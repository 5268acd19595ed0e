import asyncio
import logging
from typing import Any, Dict, List, Optional

from dairy_admin.core.errors import ServerError, ValidationFailed, is_duplicate_key
from dairy_admin.schemas.catalog import (
    CatalogOptions,
    Category,
    CategoryCreate,
    Subcategory,
    SubcategoryCreate,
)
from dairy_admin.services.upstream import UpstreamService

logger = logging.getLogger(__name__)

DUPLICATE_SUBCATEGORY_MESSAGE = "A subcategory with this name already exists in this category"


class CatalogService(UpstreamService):
    """Milk categories (milk types) and their priced subcategories."""

    async def list_categories(self) -> List[Category]:
        payload = await self.api.get("/categories")
        return [Category.model_validate(row) for row in self._items(payload, "categories")]

    async def get_category(self, category_id: str) -> Category:
        payload = await self.api.get(f"/categories/{category_id}")
        return Category.model_validate(self._document(payload))

    async def create_category(self, data: CategoryCreate) -> Category:
        payload = await self.api.post("/categories", json=data.model_dump())
        return Category.model_validate(self._document(payload))

    async def update_category(self, category_id: str, data: CategoryCreate) -> Category:
        payload = await self.api.put(f"/categories/{category_id}", json=data.model_dump())
        return Category.model_validate(self._document(payload))

    async def delete_category(self, category_id: str) -> Dict[str, Any]:
        return await self.api.delete(f"/categories/{category_id}") or {}

    async def get_category_with_subcategories(self, category_id: str) -> Dict[str, Any]:
        return await self.api.get(f"/categories/{category_id}/subcategories") or {}

    async def list_subcategories(self, category_id: Optional[str] = None) -> List[Subcategory]:
        payload = await self.api.get("/subcategories", params={"category": category_id})
        return [Subcategory.model_validate(row) for row in self._items(payload, "subcategories")]

    async def get_subcategory(self, subcategory_id: str) -> Subcategory:
        payload = await self.api.get(f"/subcategories/{subcategory_id}")
        return Subcategory.model_validate(self._document(payload))

    async def create_subcategory(self, data: SubcategoryCreate) -> Subcategory:
        return await self._save_subcategory("POST", "/subcategories", data)

    async def update_subcategory(self, subcategory_id: str, data: SubcategoryCreate) -> Subcategory:
        return await self._save_subcategory("PUT", f"/subcategories/{subcategory_id}", data)

    async def _save_subcategory(self, method: str, path: str, data: SubcategoryCreate) -> Subcategory:
        try:
            payload = await self.api.request(method, path, json=data.model_dump())
        except ServerError as e:
            if is_duplicate_key(e.message):
                raise ValidationFailed(DUPLICATE_SUBCATEGORY_MESSAGE, field="name") from e
            raise
        return Subcategory.model_validate(self._document(payload))

    async def delete_subcategory(self, subcategory_id: str) -> Dict[str, Any]:
        return await self.api.delete(f"/subcategories/{subcategory_id}") or {}

    async def form_options(self) -> CatalogOptions:
        """Reference data for delivery forms, fetched concurrently."""
        categories, subcategories = await asyncio.gather(self.list_categories(), self.list_subcategories())
        return CatalogOptions(categories=categories, subcategories=subcategories)
