from typing import Any, Optional

NETWORK_ERROR_MESSAGE = "No response received from server. Please check your connection."
SERVER_ERROR_MESSAGE = "Server error occurred"


class ApiError(Exception):
    """Failure talking to the upstream dairy API."""

    def __init__(self, message: str, status: Optional[int] = None, data: Any = None):
        super().__init__(message)
        self.message = message
        self.status = status
        self.data = data


class NetworkError(ApiError):
    """The request was sent but no response came back."""

    def __init__(self, message: str = NETWORK_ERROR_MESSAGE):
        super().__init__(message)


class ServerError(ApiError):
    """The upstream API answered with a 4xx/5xx status."""


class ValidationFailed(Exception):
    """A client-side check failed before any network call was made."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field


def message_from_body(data: Any, fallback: str = SERVER_ERROR_MESSAGE) -> str:
    if isinstance(data, dict):
        for key in ("message", "error"):
            value = data.get(key)
            if isinstance(value, str) and value:
                return value
    return fallback


def is_duplicate_key(message: str, *markers: str) -> bool:
    """Match the upstream's unique-index violation messages."""
    text = (message or "").lower()
    if "duplicate key" in text:
        return True
    return any(marker.lower() in text for marker in markers)
