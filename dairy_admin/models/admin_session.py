from datetime import datetime

from sqlalchemy import Column, DateTime, Integer, JSON, String

from dairy_admin.core.database import Base


class AdminSession(Base):
    __tablename__ = "admin_sessions"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, nullable=True)
    token = Column(String, nullable=False)
    admin_info = Column(JSON, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
