# campus_aid/backend/app/schemas/lecture.py

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class LectureUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    department: Optional[str] = None
    course: Optional[str] = None
    semester: Optional[str] = None
    subject: Optional[str] = None
    topic: Optional[str] = None
    thumbnail_url: Optional[str] = None
    duration: Optional[int] = None


class LectureRead(BaseModel):
    id: str
    title: str
    description: Optional[str] = None
    department: str
    course: str
    semester: str
    subject: str
    topic: Optional[str] = None
    video_url: str
    thumbnail_url: Optional[str] = None
    duration: Optional[int] = None
    uploaded_by: str
    uploaded_at: datetime
    is_published: bool

    model_config = ConfigDict(from_attributes=True)
