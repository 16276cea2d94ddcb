# campus_aid/backend/app/schemas/assistant.py

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class AssistantQuery(BaseModel):
    query: str = Field(min_length=1)
    # AI teacher only; defaults to the caller's department
    department: Optional[str] = None
    semester: Optional[str] = None
    subject: Optional[str] = None


class CampusAnswer(BaseModel):
    message: str
    type: str
    suggested_actions: List[str] = []

    model_config = ConfigDict(from_attributes=True)


class TeacherAnswer(BaseModel):
    message: str
    mode: str
    confidence: float
    suggested_questions: List[str] = []

    model_config = ConfigDict(from_attributes=True)


class FAQRead(BaseModel):
    question: str
    answer: str


class ChatMessageRead(BaseModel):
    id: str
    assistant: str
    query: str
    response: str
    timestamp: datetime

    model_config = ConfigDict(from_attributes=True)
