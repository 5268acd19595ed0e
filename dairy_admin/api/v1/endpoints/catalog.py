from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends

from dairy_admin.api.deps import get_catalog_service
from dairy_admin.schemas.catalog import CatalogOptions, Category, CategoryCreate, Subcategory, SubcategoryCreate
from dairy_admin.services.catalog_service import CatalogService

router = APIRouter()


@router.get("/options", response_model=CatalogOptions)
async def catalog_options(service: CatalogService = Depends(get_catalog_service)):
    """Categories and subcategories for the record and stock forms."""
    return await service.form_options()


@router.get("/categories", response_model=List[Category])
async def list_categories(service: CatalogService = Depends(get_catalog_service)):
    return await service.list_categories()


@router.post("/categories", response_model=Category)
async def create_category(data: CategoryCreate, service: CatalogService = Depends(get_catalog_service)):
    return await service.create_category(data)


@router.get("/categories/{category_id}", response_model=Category)
async def get_category(category_id: str, service: CatalogService = Depends(get_catalog_service)):
    return await service.get_category(category_id)


@router.get("/categories/{category_id}/subcategories", response_model=Dict[str, Any])
async def category_with_subcategories(category_id: str, service: CatalogService = Depends(get_catalog_service)):
    return await service.get_category_with_subcategories(category_id)


@router.put("/categories/{category_id}", response_model=Category)
async def update_category(
    category_id: str,
    data: CategoryCreate,
    service: CatalogService = Depends(get_catalog_service),
):
    return await service.update_category(category_id, data)


@router.delete("/categories/{category_id}", response_model=Dict[str, Any])
async def delete_category(category_id: str, service: CatalogService = Depends(get_catalog_service)):
    return await service.delete_category(category_id)


@router.get("/subcategories", response_model=List[Subcategory])
async def list_subcategories(category: Optional[str] = None, service: CatalogService = Depends(get_catalog_service)):
    return await service.list_subcategories(category)


@router.post("/subcategories", response_model=Subcategory)
async def create_subcategory(data: SubcategoryCreate, service: CatalogService = Depends(get_catalog_service)):
    return await service.create_subcategory(data)


@router.get("/subcategories/{subcategory_id}", response_model=Subcategory)
async def get_subcategory(subcategory_id: str, service: CatalogService = Depends(get_catalog_service)):
    return await service.get_subcategory(subcategory_id)


@router.put("/subcategories/{subcategory_id}", response_model=Subcategory)
async def update_subcategory(
    subcategory_id: str,
    data: SubcategoryCreate,
    service: CatalogService = Depends(get_catalog_service),
):
    return await service.update_subcategory(subcategory_id, data)


@router.delete("/subcategories/{subcategory_id}", response_model=Dict[str, Any])
async def delete_subcategory(subcategory_id: str, service: CatalogService = Depends(get_catalog_service)):
    return await service.delete_subcategory(subcategory_id)
