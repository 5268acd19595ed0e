from typing import Any, Callable, Dict, Optional

from sqlalchemy.orm import Session

from dairy_admin.core.database import SessionLocal
from dairy_admin.models.admin_session import AdminSession


class SessionStore:
    """Durable holder of the logged-in admin.

    Only login and logout write to it; the API client reads the bearer token
    from it on every request. One logical writer is assumed, so there is at most
    one stored session at a time.
    """

    def __init__(self, session_factory: Callable[[], Session] = SessionLocal):
        self._session_factory = session_factory

    def get_session(self) -> Optional[Dict[str, Any]]:
        db: Session = self._session_factory()
        try:
            row = db.query(AdminSession).order_by(AdminSession.id.desc()).first()
            if not row:
                return None
            data = dict(row.admin_info or {})
            data["token"] = row.token
            return data
        finally:
            db.close()

    def set_session(self, data: Dict[str, Any]) -> Dict[str, Any]:
        if not data.get("token"):
            raise ValueError("Session data must include a token")
        # The upstream admin id is never kept on the client side
        admin_info = {key: value for key, value in data.items() if key not in ("_id", "token")}
        db: Session = self._session_factory()
        try:
            db.query(AdminSession).delete()
            db.add(
                AdminSession(
                    username=admin_info.get("username"),
                    token=data["token"],
                    admin_info=admin_info,
                )
            )
            db.commit()
            return {**admin_info, "token": data["token"]}
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def clear_session(self) -> bool:
        db: Session = self._session_factory()
        try:
            count = db.query(AdminSession).delete()
            db.commit()
            return count > 0
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def get_token(self) -> Optional[str]:
        session = self.get_session()
        return session.get("token") if session else None
