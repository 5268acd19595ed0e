from datetime import datetime

from sqlalchemy import Column, DateTime, String

from dairy_admin.core.database import Base


class Preference(Base):
    __tablename__ = "preferences"

    key = Column(String, primary_key=True, index=True)
    value = Column(String, nullable=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
