import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dairy_admin.api.deps import get_api_client
from dairy_admin.api.errors import api_error_handler, validation_failed_handler
from dairy_admin.core.config import settings
from dairy_admin.core.database import Base, engine
from dairy_admin.core.errors import ApiError, ValidationFailed
from dairy_admin.models.admin_session import AdminSession  # noqa: F401
from dairy_admin.models.preference import Preference  # noqa: F401

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Create tables
Base.metadata.create_all(bind=engine)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Proxying dairy backend at {settings.BACKEND_BASE_URL}")
    yield
    await get_api_client().aclose()


app = FastAPI(title="Dairy Admin Dashboard", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(ApiError, api_error_handler)
app.add_exception_handler(ValidationFailed, validation_failed_handler)

from dairy_admin.api.v1.router import api_router  # noqa: E402
app.include_router(api_router, prefix="/api/v1")


@app.get("/")
def read_root():
    return {"message": "Welcome to Dairy Admin Dashboard API"}
