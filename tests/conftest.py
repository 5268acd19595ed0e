import os
import tempfile

# Settings are read at import time, keep the app database out of the working tree
os.environ.setdefault("DATABASE_URL", f"sqlite:///{os.path.join(tempfile.gettempdir(), 'dairy_admin_test.db')}")

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from dairy_admin.core.database import Base
from dairy_admin.models.admin_session import AdminSession  # noqa: F401
from dairy_admin.models.preference import Preference  # noqa: F401
from dairy_admin.schemas.invoice import Invoice


def make_invoice(invoice_id="inv1", number="INV-001", customer_name="Asha Patil", status="pending",
                 total=1000.0, due=1000.0, payments=None):
    return Invoice.model_validate(
        {
            "_id": invoice_id,
            "invoiceNumber": number,
            "customer": {"_id": f"cust-{invoice_id}", "name": customer_name, "customerNo": 7},
            "totalAmount": total,
            "amountPaid": total - due,
            "dueAmount": due,
            "status": status,
            "payments": payments,
        }
    )


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture
def api():
    """Upstream client double; each verb is an AsyncMock."""
    client = MagicMock()
    client.get = AsyncMock(return_value={})
    client.post = AsyncMock(return_value={})
    client.put = AsyncMock(return_value={})
    client.delete = AsyncMock(return_value={})
    client.patch = AsyncMock(return_value={})
    client.request = AsyncMock(return_value={})
    client.get_bytes = AsyncMock(return_value=b"")
    return client
