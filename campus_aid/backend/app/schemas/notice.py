# campus_aid/backend/app/schemas/notice.py

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..models.enums import NoticePriority, UserRole


class NoticeCreate(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    content: str = Field(min_length=1)
    category: str = Field(min_length=1)
    department: Optional[str] = None
    target_roles: List[UserRole] = Field(min_length=1)
    priority: NoticePriority = NoticePriority.NORMAL
    expires_at: Optional[datetime] = None

    model_config = ConfigDict(use_enum_values=True)


class NoticeUpdate(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None
    category: Optional[str] = None
    department: Optional[str] = None
    target_roles: Optional[List[UserRole]] = None
    priority: Optional[NoticePriority] = None
    expires_at: Optional[datetime] = None

    model_config = ConfigDict(use_enum_values=True)


class NoticeRead(BaseModel):
    id: str
    title: str
    content: str
    category: str
    department: Optional[str] = None
    target_roles: List[UserRole]
    priority: NoticePriority
    published_by: str
    published_at: datetime
    expires_at: Optional[datetime] = None
    is_active: bool

    model_config = ConfigDict(from_attributes=True)
