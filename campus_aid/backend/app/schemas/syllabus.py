# campus_aid/backend/app/schemas/syllabus.py

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class SyllabusUpdate(BaseModel):
    title: Optional[str] = None
    department: Optional[str] = None
    course: Optional[str] = None
    semester: Optional[str] = None
    subject: Optional[str] = None
    extracted_content: Optional[str] = None


class SyllabusRead(BaseModel):
    id: str
    title: str
    department: str
    course: str
    semester: str
    subject: str
    file_url: str
    extracted_content: Optional[str] = None
    uploaded_by: str
    uploaded_at: datetime

    model_config = ConfigDict(from_attributes=True)
