# campus_aid/backend/app/models/__init__.py

from .user import User
from .ticket import Ticket
from .ticket_activity import TicketActivity
from .notice import Notice
from .lecture import Lecture
from .syllabus import Syllabus
from .location import CampusLocation, QRCode
from .chat_message import ChatMessage

__all__ = [
    "User",
    "Ticket",
    "TicketActivity",
    "Notice",
    "Lecture",
    "Syllabus",
    "CampusLocation",
    "QRCode",
    "ChatMessage",
]
