from typing import Callable, Optional, Tuple

from sqlalchemy.orm import Session

from dairy_admin.core.database import SessionLocal
from dairy_admin.models.preference import Preference

INVOICE_MONTH_KEY = "selectedInvoiceMonth"
INVOICE_YEAR_KEY = "selectedInvoiceYear"


class PreferenceRepository:
    def __init__(self, session_factory: Callable[[], Session] = SessionLocal):
        self._session_factory = session_factory

    def get(self, key: str) -> Optional[str]:
        db: Session = self._session_factory()
        try:
            row = db.query(Preference).filter(Preference.key == key).first()
            return row.value if row else None
        finally:
            db.close()

    def set(self, key: str, value: str) -> None:
        db: Session = self._session_factory()
        try:
            row = db.query(Preference).filter(Preference.key == key).first()
            if row:
                row.value = value
            else:
                db.add(Preference(key=key, value=value))
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def get_invoice_scope(self) -> Optional[Tuple[int, int]]:
        month = self.get(INVOICE_MONTH_KEY)
        year = self.get(INVOICE_YEAR_KEY)
        if not month or not year:
            return None
        try:
            return int(month), int(year)
        except ValueError:
            return None

    def set_invoice_scope(self, month: int, year: int) -> None:
        self.set(INVOICE_MONTH_KEY, str(month))
        self.set(INVOICE_YEAR_KEY, str(year))
