# campus_aid/backend/app/models/ticket_activity.py
import uuid

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import relationship

from ..db import Base, utcnow


class TicketActivity(Base):
    """
    One entry in a ticket's activity log.
    Entries are only ever appended; `position` is the append order.
    """
    __tablename__ = "ticket_activity"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    ticket_id = Column(String(36), ForeignKey("tickets.id"), nullable=False, index=True)
    position = Column(Integer, nullable=False)
    action = Column(Text, nullable=False)
    performed_by = Column(String(36), nullable=False)
    performed_by_role = Column(String(50), nullable=False)
    notes = Column(Text, nullable=True)

    timestamp = Column(DateTime, default=utcnow, nullable=False)

    ticket = relationship("Ticket", back_populates="activity_log")
