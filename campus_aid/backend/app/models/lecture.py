# campus_aid/backend/app/models/lecture.py
import uuid

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text

from ..db import Base, utcnow


class Lecture(Base):
    __tablename__ = "lectures"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    department = Column(String(255), nullable=False, index=True)
    course = Column(String(255), nullable=False)
    semester = Column(String(50), nullable=False)
    subject = Column(String(255), nullable=False)
    topic = Column(String(255), nullable=True)

    video_url = Column(String(1024), nullable=False)
    thumbnail_url = Column(String(1024), nullable=True)
    duration = Column(Integer, nullable=True)  # seconds

    uploaded_by = Column(String(36), nullable=False)
    uploaded_at = Column(DateTime, default=utcnow, nullable=False)
    is_published = Column(Boolean, nullable=False, default=False)
