# campus_aid/backend/app/models/ticket.py
import uuid

from sqlalchemy import (
    JSON,
    Column,
    DateTime,
    String,
    Text,
)
from sqlalchemy.orm import relationship

from ..db import Base, utcnow


class Ticket(Base):
    __tablename__ = "tickets"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    ticket_number = Column(String(20), unique=True, nullable=False, index=True)

    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    category = Column(String(50), nullable=False, index=True)
    issue_type = Column(String(255), nullable=True)

    status = Column(String(50), nullable=False, default="pending", index=True)
    priority = Column(String(50), nullable=False, default="medium")

    department = Column(String(255), nullable=False, index=True)  # as shown to people
    routing_department = Column(String(50), nullable=False)  # Department tag

    # Submitter identity, denormalized at creation time
    submitted_by = Column(String(36), nullable=False, index=True)
    submitter_name = Column(String(255), nullable=False)
    submitter_email = Column(String(255), nullable=False)
    submitter_roll_number = Column(String(50), nullable=True)

    assigned_to = Column(String(36), nullable=True)
    assigned_role = Column(String(50), nullable=True)

    location = Column(JSON, nullable=True)
    attachments = Column(JSON, nullable=True)

    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, nullable=False)
    resolved_at = Column(DateTime, nullable=True)

    activity_log = relationship(
        "TicketActivity",
        back_populates="ticket",
        order_by="TicketActivity.position",
        cascade="all, delete-orphan",
    )
