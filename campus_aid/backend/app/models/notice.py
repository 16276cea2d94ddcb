# campus_aid/backend/app/models/notice.py
import uuid

from sqlalchemy import JSON, Boolean, Column, DateTime, String, Text

from ..db import Base, utcnow


class Notice(Base):
    __tablename__ = "notices"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    category = Column(String(100), nullable=False)
    department = Column(String(255), nullable=True)
    target_roles = Column(JSON, nullable=False, default=list)
    priority = Column(String(50), nullable=False, default="normal")
    published_by = Column(String(36), nullable=False)
    published_at = Column(DateTime, default=utcnow, nullable=False, index=True)
    expires_at = Column(DateTime, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True, index=True)
