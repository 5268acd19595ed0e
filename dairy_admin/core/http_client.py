import logging
from typing import Any, Dict, Optional

import httpx

from dairy_admin.core.config import settings
from dairy_admin.core.errors import NetworkError, ServerError, message_from_body
from dairy_admin.repositories.session_repository import SessionStore

logger = logging.getLogger(__name__)


def _clean_params(params: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Drop unset query parameters instead of sending them empty."""
    if not params:
        return None
    return {key: value for key, value in params.items() if value is not None and value != ""}


class ApiClient:
    """Async client for the upstream dairy API.

    Every request carries the bearer token of the stored admin session and every
    failure is raised as one of the errors in ``dairy_admin.core.errors``.
    """

    def __init__(
        self,
        session_store: SessionStore,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.session_store = session_store
        self.client = httpx.AsyncClient(
            base_url=base_url or settings.BACKEND_BASE_URL,
            headers={"Content-Type": "application/json"},
            timeout=timeout or settings.REQUEST_TIMEOUT_SECONDS,
            transport=transport,
        )

    def _auth_headers(self) -> Dict[str, str]:
        token = self.session_store.get_token()
        if token:
            return {"Authorization": f"Bearer {token}"}
        return {}

    async def _send(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Any = None,
    ) -> httpx.Response:
        try:
            response = await self.client.request(
                method,
                path,
                params=_clean_params(params),
                json=json,
                headers=self._auth_headers(),
            )
        except httpx.RequestError as e:
            logger.error(f"No response from {method} {path}: {e}")
            raise NetworkError() from e

        if response.status_code >= 400:
            try:
                data = response.json()
            except ValueError:
                data = None
            message = message_from_body(data)
            logger.error(f"API error {response.status_code} on {method} {path}: {message}")
            raise ServerError(message, status=response.status_code, data=data)

        return response

    async def request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Any = None,
    ) -> Any:
        response = await self._send(method, path, params=params, json=json)
        if not response.content:
            return None
        return response.json()

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, json: Any = None) -> Any:
        return await self.request("POST", path, json=json)

    async def put(self, path: str, json: Any = None) -> Any:
        return await self.request("PUT", path, json=json)

    async def patch(self, path: str, json: Any = None) -> Any:
        return await self.request("PATCH", path, json=json)

    async def delete(self, path: str) -> Any:
        return await self.request("DELETE", path)

    async def get_bytes(self, path: str, params: Optional[Dict[str, Any]] = None) -> bytes:
        response = await self._send("GET", path, params=params)
        return response.content

    async def aclose(self) -> None:
        await self.client.aclose()
