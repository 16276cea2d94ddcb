# campus_aid/backend/app/schemas/routing.py

from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from ..models.enums import Department, TicketPriority, UserRole


class RoutingPreviewRequest(BaseModel):
    category: str
    issue_type: Optional[str] = None


class RoutingPreviewRead(BaseModel):
    department: Department
    assignable_roles: List[UserRole]
    priority: TicketPriority
    estimated_resolution_hours: float
    assigned_role: UserRole
    escalation_hours: int
    escalation_role: UserRole
    category_priority: Optional[TicketPriority] = None
    notes: List[str] = []

    model_config = ConfigDict(from_attributes=True)
