from typing import Any, Dict, List

from dairy_admin.core.http_client import ApiClient


class UpstreamService:
    """Base for services that wrap one upstream resource.

    Response envelopes differ per endpoint; subclasses unwrap them here so the
    rest of the code only ever sees canonical schemas.
    """

    def __init__(self, api: ApiClient):
        self.api = api

    @staticmethod
    def _items(payload: Any, key: str = "data") -> List[Dict[str, Any]]:
        if payload is None:
            return []
        if isinstance(payload, list):
            return payload
        value = payload.get(key)
        if value is None and key != "data":
            value = payload.get("data")
        return value or []

    @staticmethod
    def _document(payload: Any) -> Dict[str, Any]:
        # Single documents sometimes come wrapped as {"data": {...}}
        if isinstance(payload, dict) and isinstance(payload.get("data"), dict):
            return payload["data"]
        return payload or {}
