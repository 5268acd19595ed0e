from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from dairy_admin.api.deps import get_system_config_service
from dairy_admin.core.config import settings
from dairy_admin.schemas.system_config import Admin, AdminCreate, Milkman, MilkmanCreate, SystemConfig
from dairy_admin.services.system_config_service import SystemConfigService

router = APIRouter()


@router.get("/client", response_model=Dict[str, Any])
async def client_settings():
    """Values the dashboard front end needs for paging, search and redirects."""
    return {
        "pageSize": settings.PAGE_SIZE,
        "searchDebounceMs": settings.SEARCH_DEBOUNCE_MS,
        "paymentRedirectDelaySeconds": settings.PAYMENT_REDIRECT_DELAY_SECONDS,
    }


@router.get("", response_model=SystemConfig)
async def get_config(service: SystemConfigService = Depends(get_system_config_service)):
    return await service.get_config()


@router.put("", response_model=SystemConfig)
async def update_config(data: SystemConfig, service: SystemConfigService = Depends(get_system_config_service)):
    return await service.update_config(data)


@router.get("/milkmen", response_model=List[Milkman])
async def list_milkmen(service: SystemConfigService = Depends(get_system_config_service)):
    return await service.list_active_milkmen()


@router.post("/milkmen", response_model=Milkman)
async def add_milkman(data: MilkmanCreate, service: SystemConfigService = Depends(get_system_config_service)):
    return await service.add_milkman(data)


@router.put("/milkmen/{milkman_id}", response_model=Milkman)
async def update_milkman(
    milkman_id: str,
    data: MilkmanCreate,
    service: SystemConfigService = Depends(get_system_config_service),
):
    return await service.update_milkman(milkman_id, data)


@router.delete("/milkmen/{milkman_id}", response_model=Dict[str, Any])
async def delete_milkman(milkman_id: str, service: SystemConfigService = Depends(get_system_config_service)):
    return await service.delete_milkman(milkman_id)


@router.get("/admins", response_model=List[Admin])
async def list_admins(service: SystemConfigService = Depends(get_system_config_service)):
    return await service.list_admins()


@router.post("/admins", response_model=Admin)
async def create_admin(data: AdminCreate, service: SystemConfigService = Depends(get_system_config_service)):
    return await service.create_admin(data)


@router.put("/admins/{admin_id}", response_model=Admin)
async def update_admin(
    admin_id: str,
    data: AdminCreate,
    service: SystemConfigService = Depends(get_system_config_service),
):
    return await service.update_admin(admin_id, data)


@router.delete("/admins/{admin_id}", response_model=Dict[str, Any])
async def delete_admin(admin_id: str, service: SystemConfigService = Depends(get_system_config_service)):
    return await service.delete_admin(admin_id)
