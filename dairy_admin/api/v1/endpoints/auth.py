from typing import Any, Dict

from fastapi import APIRouter, Depends

from dairy_admin.api.deps import get_auth_service
from dairy_admin.schemas.auth import LoginRequest, SessionInfo
from dairy_admin.schemas.common import MessageResponse
from dairy_admin.services.auth_service import AuthService

router = APIRouter()


@router.post("/login", response_model=Dict[str, Any])
async def login(credentials: LoginRequest, service: AuthService = Depends(get_auth_service)):
    """Authenticate against the dairy backend and persist the session token."""
    session = await service.login(credentials)
    session.pop("token", None)
    return {"success": True, "admin": session}


@router.post("/logout", response_model=MessageResponse)
async def logout(service: AuthService = Depends(get_auth_service)):
    service.logout()
    return MessageResponse(success=True, message="Logged out")


@router.get("/session", response_model=SessionInfo)
async def current_session(service: AuthService = Depends(get_auth_service)):
    return service.current()
