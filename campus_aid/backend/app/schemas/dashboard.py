# campus_aid/backend/app/schemas/dashboard.py

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict

from ..models.enums import UserRole


class DashboardModuleRead(BaseModel):
    id: str
    title: str
    description: str
    icon: str
    path: Optional[str] = None
    count: Optional[int] = None
    priority: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class DashboardInsightRead(BaseModel):
    label: str
    value: Union[int, str]
    trend: Optional[str] = None
    color: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class DashboardRead(BaseModel):
    role: UserRole
    modules: List[DashboardModuleRead]
    insights: List[DashboardInsightRead]
