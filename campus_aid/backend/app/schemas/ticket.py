# campus_aid/backend/app/schemas/ticket.py

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from ..models.enums import TicketCategory, TicketPriority, TicketStatus, UserRole


class TicketLocation(BaseModel):
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    accuracy: Optional[float] = None
    address: Optional[str] = None
    campus_zone: Optional[str] = None
    timestamp: datetime


class TicketCreate(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    description: str = Field(min_length=1)
    category: TicketCategory
    # Free text the routing table reads keywords from
    issue_type: Optional[str] = None
    # Routed from category/issue_type when not given
    department: Optional[str] = None
    priority: Optional[TicketPriority] = None
    location: Optional[TicketLocation] = None
    attachments: Optional[List[str]] = None


class TicketStatusUpdate(BaseModel):
    status: TicketStatus
    notes: Optional[str] = None


class TicketActivityRead(BaseModel):
    id: str
    ticket_id: str
    action: str
    performed_by: str
    performed_by_role: UserRole
    timestamp: datetime
    notes: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class TicketRead(BaseModel):
    id: str
    ticket_number: str
    title: str
    description: str
    category: TicketCategory
    issue_type: Optional[str] = None
    status: TicketStatus
    priority: TicketPriority
    department: str
    routing_department: str

    submitted_by: str
    submitter_name: str
    submitter_email: EmailStr
    submitter_roll_number: Optional[str] = None

    assigned_to: Optional[str] = None
    assigned_role: Optional[UserRole] = None

    location: Optional[TicketLocation] = None
    attachments: Optional[List[str]] = None
    activity_log: List[TicketActivityRead]

    created_at: datetime
    updated_at: datetime
    resolved_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class TicketActions(BaseModel):
    ticket_id: str
    status: TicketStatus
    can_handle: bool
    available_actions: List[TicketStatus]
    overdue: bool


class AttachmentRead(BaseModel):
    url: str
