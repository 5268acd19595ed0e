import logging
from typing import Any, Dict

from dairy_admin.core.errors import ServerError, ValidationFailed, message_from_body
from dairy_admin.core.http_client import ApiClient
from dairy_admin.repositories.session_repository import SessionStore
from dairy_admin.schemas.auth import LoginRequest, SessionInfo

logger = logging.getLogger(__name__)


class AuthService:
    """Login and logout are the only writers of the session store."""

    def __init__(self, api: ApiClient, session_store: SessionStore):
        self.api = api
        self.session_store = session_store

    async def login(self, credentials: LoginRequest) -> Dict[str, Any]:
        if not credentials.username or not credentials.password:
            raise ValidationFailed("Please enter both username and password")

        try:
            data = await self.api.post(
                "/auth/login",
                json={"username": credentials.username, "password": credentials.password},
            )
        except ServerError as e:
            raise ServerError(message_from_body(e.data, "Login failed"), status=e.status, data=e.data) from e

        if not isinstance(data, dict) or not data.get("token"):
            raise ServerError("Failed to store authentication data")

        session = self.session_store.set_session(data)
        logger.info(f"Admin {session.get('username')} logged in")
        return session

    def logout(self) -> bool:
        cleared = self.session_store.clear_session()
        logger.info("Admin session cleared")
        return cleared

    def current(self) -> SessionInfo:
        session = self.session_store.get_session()
        if not session:
            return SessionInfo(authenticated=False)
        return SessionInfo(
            authenticated=True,
            username=session.get("username"),
            isAdmin=session.get("isAdmin"),
        )
