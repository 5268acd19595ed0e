from fastapi import APIRouter
from dairy_admin.api.v1.endpoints import (
    auth,
    catalog,
    customers,
    dashboard,
    holidays,
    invoices,
    quantity_updates,
    records,
    stock,
    system_config,
)

api_router = APIRouter()
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
api_router.include_router(invoices.router, prefix="/invoices", tags=["invoices"])
api_router.include_router(records.router, prefix="/records", tags=["records"])
api_router.include_router(quantity_updates.router, prefix="/updates/quantity", tags=["quantity updates"])
api_router.include_router(stock.router, prefix="/stock", tags=["stock"])
api_router.include_router(customers.router, prefix="/customers", tags=["customers"])
api_router.include_router(catalog.router, prefix="/catalog", tags=["catalog"])
api_router.include_router(holidays.router, prefix="/holidays", tags=["holidays"])
api_router.include_router(system_config.router, prefix="/config", tags=["config"])
