# campus_aid/backend/app/models/enums.py
from enum import Enum


class UserRole(str, Enum):
    STUDENT = "student"
    TEACHING_STAFF = "teaching_staff"
    TUTOR = "tutor"
    DEPARTMENT_STAFF = "department_staff"
    HOD = "hod"
    ADMIN = "admin"
    HOSTEL_WARDEN = "hostel_warden"
    SECURITY_STAFF = "security_staff"
    MAINTENANCE = "maintenance"
    TRANSPORT_OFFICER = "transport_officer"
    LAB_ASSISTANT = "lab_assistant"
    SUPPORTING_STAFF = "supporting_staff"


class TicketCategory(str, Enum):
    COMPLAINT = "complaint"
    SERVICE_REQUEST = "service_request"
    FACILITY_ISSUE = "facility_issue"
    ACADEMIC_QUERY = "academic_query"
    HOSTEL_ISSUE = "hostel_issue"
    TRANSPORT_ISSUE = "transport_issue"
    SECURITY_ISSUE = "security_issue"
    MAINTENANCE = "maintenance"
    OTHER = "other"


class TicketStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    RESOLVED = "resolved"
    ESCALATED = "escalated"
    REJECTED = "rejected"


class TicketPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class Department(str, Enum):
    """Routing tags. Tickets also carry a free-text department for display."""

    ACADEMIC = "academic"
    HOSTEL = "hostel"
    TRANSPORT = "transport"
    MAINTENANCE = "maintenance"
    SECURITY = "security"
    LAB = "lab"
    LIBRARY = "library"
    ADMINISTRATION = "administration"
    IT = "it"
    GENERAL = "general"


class LocationType(str, Enum):
    ACADEMIC = "academic"
    HOSTEL = "hostel"
    FACILITY = "facility"
    ADMIN = "admin"
    TRANSPORT = "transport"
    OTHER = "other"


class NoticePriority(str, Enum):
    NORMAL = "normal"
    IMPORTANT = "important"
    URGENT = "urgent"
