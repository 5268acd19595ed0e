from typing import List

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # Upstream dairy REST API
    BACKEND_BASE_URL: str = "http://localhost:8000/api"
    REQUEST_TIMEOUT_SECONDS: float = 30.0

    # Local store for the admin session and dashboard preferences
    DATABASE_URL: str = "sqlite:///./dairy_admin.db"

    PAGE_SIZE: int = 10
    SEARCH_SUPERSET_LIMIT: int = 1000
    PAYMENT_REDIRECT_DELAY_SECONDS: float = 1.5
    SEARCH_DEBOUNCE_MS: int = 300

    LOG_LEVEL: str = "INFO"
    ALLOWED_ORIGINS: List[str] = ["*"]

    class Config:
        env_file = ".env"

settings = Settings()
