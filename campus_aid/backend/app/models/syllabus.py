# campus_aid/backend/app/models/syllabus.py
import uuid

from sqlalchemy import Column, DateTime, String, Text

from ..db import Base, utcnow


class Syllabus(Base):
    __tablename__ = "syllabus"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    title = Column(String(255), nullable=False)
    department = Column(String(255), nullable=False, index=True)
    course = Column(String(255), nullable=False)
    semester = Column(String(50), nullable=False)
    subject = Column(String(255), nullable=False, index=True)
    file_url = Column(String(1024), nullable=False)
    extracted_content = Column(Text, nullable=True)
    uploaded_by = Column(String(36), nullable=False)
    uploaded_at = Column(DateTime, default=utcnow, nullable=False)
