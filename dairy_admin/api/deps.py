from functools import lru_cache

from dairy_admin.core.http_client import ApiClient
from dairy_admin.repositories.preference_repository import PreferenceRepository
from dairy_admin.repositories.session_repository import SessionStore
from dairy_admin.services.auth_service import AuthService
from dairy_admin.services.catalog_service import CatalogService
from dairy_admin.services.customer_service import CustomerService
from dairy_admin.services.holiday_service import HolidayService
from dairy_admin.services.invoice_service import InvoiceService
from dairy_admin.services.quantity_update_service import QuantityUpdateService
from dairy_admin.services.record_service import RecordService
from dairy_admin.services.stock_service import StockService
from dairy_admin.services.system_config_service import SystemConfigService


@lru_cache
def get_session_store() -> SessionStore:
    return SessionStore()


@lru_cache
def get_preferences() -> PreferenceRepository:
    return PreferenceRepository()


@lru_cache
def get_api_client() -> ApiClient:
    return ApiClient(get_session_store())


def get_auth_service() -> AuthService:
    return AuthService(get_api_client(), get_session_store())


def get_invoice_service() -> InvoiceService:
    return InvoiceService(get_api_client())


def get_customer_service() -> CustomerService:
    return CustomerService(get_api_client())


def get_catalog_service() -> CatalogService:
    return CatalogService(get_api_client())


def get_record_service() -> RecordService:
    return RecordService(get_api_client())


@lru_cache
def get_stock_service() -> StockService:
    # Kept for the app's lifetime so the category balance cache survives requests
    return StockService(get_api_client())


def get_holiday_service() -> HolidayService:
    return HolidayService(get_api_client())


def get_system_config_service() -> SystemConfigService:
    return SystemConfigService(get_api_client())


def get_quantity_update_service() -> QuantityUpdateService:
    return QuantityUpdateService(get_api_client())
