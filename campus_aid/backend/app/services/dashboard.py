# campus_aid/backend/app/services/dashboard.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Union

from ..models.enums import TicketCategory, TicketPriority, TicketStatus, UserRole


@dataclass
class DashboardModule:
    id: str
    title: str
    description: str
    icon: str
    path: Optional[str] = None
    count: Optional[int] = None
    priority: Optional[str] = None


@dataclass
class DashboardInsight:
    label: str
    value: Union[int, str]
    trend: Optional[str] = None
    color: Optional[str] = None


def _count(tickets, **match) -> int:
    return sum(1 for t in tickets if all(getattr(t, k) == v for k, v in match.items()))


def _categories(*categories: TicketCategory):
    wanted = {c.value for c in categories}
    return lambda tickets: [t for t in tickets if t.category in wanted]


def _everything(tickets):
    return list(tickets)


# Which tickets each role's dashboard counts
TICKET_FILTERS: Dict[UserRole, Callable] = {
    # Students are handed their own tickets already
    UserRole.STUDENT: _everything,
    UserRole.TEACHING_STAFF: _categories(TicketCategory.ACADEMIC_QUERY),
    UserRole.TUTOR: _categories(TicketCategory.ACADEMIC_QUERY),
    UserRole.DEPARTMENT_STAFF: _everything,
    UserRole.HOD: _everything,
    UserRole.ADMIN: _everything,
    UserRole.HOSTEL_WARDEN: _categories(TicketCategory.HOSTEL_ISSUE),
    UserRole.MAINTENANCE: _categories(TicketCategory.FACILITY_ISSUE, TicketCategory.MAINTENANCE),
    UserRole.SECURITY_STAFF: _categories(TicketCategory.SECURITY_ISSUE),
    UserRole.TRANSPORT_OFFICER: _categories(TicketCategory.TRANSPORT_ISSUE),
    UserRole.LAB_ASSISTANT: _everything,
    UserRole.SUPPORTING_STAFF: _everything,
}


def get_filtered_tickets(role, tickets: Sequence) -> list:
    return TICKET_FILTERS[UserRole(role)](tickets)


_PENDING = TicketStatus.PENDING.value


def _student_modules(tickets) -> List[DashboardModule]:
    return [
        DashboardModule("submit-request", "Submit Request", "Create new support ticket", "Send", path="/submit"),
        DashboardModule("my-tickets", "My Tickets", "Track request status", "Ticket", path="/tickets", count=len(tickets)),
        DashboardModule("ai-teacher", "AI Teacher", "Academic assistance", "GraduationCap", path="/ai-teacher"),
        DashboardModule("campus-assistant", "Campus Assistant", "General campus help", "Bot", path="/ai-assistant"),
        DashboardModule("lectures", "Video Lectures", "Access course materials", "Video", path="/lectures"),
        DashboardModule("navigation", "Campus Navigation", "QR codes & directions", "MapPin", path="/navigate"),
    ]


def _teaching_staff_modules(tickets) -> List[DashboardModule]:
    return [
        DashboardModule(
            "student-queries", "Student Queries", "Academic questions assigned", "MessageSquare",
            path="/tickets", count=_count(tickets, status=_PENDING),
        ),
        DashboardModule("upload-lectures", "Upload Lectures", "Manage video content", "Upload", path="/manage-lectures"),
        DashboardModule("syllabus-management", "Syllabus Management", "Upload course materials", "BookOpen", path="/syllabus"),
        DashboardModule("ai-teacher-validation", "AI Teacher Review", "Validate AI responses", "GraduationCap", path="/ai-teacher"),
        DashboardModule("department-notices", "Department Notices", "Publish announcements", "Bell", path="/notices"),
    ]


def _tutor_modules(tickets) -> List[DashboardModule]:
    return [
        DashboardModule("student-tickets", "Student Issues", "Assigned student requests", "Users", path="/tickets", count=len(tickets)),
        DashboardModule("screening-queue", "Screening Queue", "First-level verification", "Filter", count=_count(tickets, status=_PENDING)),
        DashboardModule("escalation-center", "Escalation Center", "Forward to HOD/Staff", "ArrowUp"),
        DashboardModule("mentoring-notes", "Mentoring Notes", "Student guidance records", "FileText"),
    ]


def _department_staff_modules(tickets) -> List[DashboardModule]:
    return [
        DashboardModule(
            "department-inbox", "Department Inbox", "Department-level tickets", "Inbox",
            path="/tickets", count=_count(tickets, status=_PENDING),
        ),
        DashboardModule("ticket-assignment", "Ticket Assignment", "Assign to handlers", "UserCheck"),
        DashboardModule(
            "facility-tracking", "Facility Issues", "Infrastructure problems", "Building",
            count=_count(tickets, category=TicketCategory.FACILITY_ISSUE.value),
        ),
        DashboardModule("service-logs", "Service Logs", "Department activity", "Activity"),
    ]


def _hod_modules(tickets) -> List[DashboardModule]:
    return [
        DashboardModule("department-overview", "Department Overview", "Full department visibility", "Eye", path="/tickets"),
        DashboardModule(
            "approval-center", "Approval Center", "Approve/reject requests", "CheckCircle",
            count=_count(tickets, status=TicketStatus.ESCALATED.value),
        ),
        DashboardModule("faculty-monitoring", "Faculty Activity", "Monitor resolution activity", "Users"),
        DashboardModule("analytics-dashboard", "Department Analytics", "Performance insights", "BarChart"),
        DashboardModule("report-export", "Export Reports", "Generate department reports", "Download"),
    ]


def _admin_modules(tickets) -> List[DashboardModule]:
    return [
        DashboardModule("system-monitoring", "System Monitoring", "Full system visibility", "Monitor", path="/tickets"),
        DashboardModule("user-management", "User Management", "Manage roles & users", "Users"),
        DashboardModule("global-announcements", "Global Announcements", "System-wide notices", "Megaphone", path="/notices"),
        DashboardModule("qr-registry", "QR Location Registry", "Manage campus QR codes", "QrCode"),
        DashboardModule("system-analytics", "System Analytics", "Platform insights", "TrendingUp"),
    ]


def _warden_modules(tickets) -> List[DashboardModule]:
    return [
        DashboardModule("hostel-complaints", "Hostel Complaints", "Water, electricity, safety", "Home", path="/tickets", count=len(tickets)),
        DashboardModule("maintenance-assignment", "Maintenance Tasks", "Assign to technicians", "Wrench"),
        DashboardModule("block-monitoring", "Block Monitoring", "Room/block issues", "Building"),
        DashboardModule("safety-alerts", "Safety Alerts", "Emergency notifications", "AlertTriangle", priority="high"),
    ]


def _maintenance_modules(tickets) -> List[DashboardModule]:
    return [
        DashboardModule("facility-complaints", "Facility Issues", "Infrastructure problems", "Building", path="/tickets", count=len(tickets)),
        DashboardModule("location-mapping", "Location Mapping", "QR-based issue tracking", "MapPin"),
        DashboardModule("task-assignment", "Task Assignment", "Assign to technicians", "UserCheck"),
        DashboardModule("work-logs", "Work Status", "Update progress", "Activity"),
    ]


def _security_modules(tickets) -> List[DashboardModule]:
    return [
        DashboardModule("incident-reports", "Incident Reports", "Security-related issues", "Shield", path="/tickets", count=len(tickets)),
        DashboardModule(
            "emergency-alerts", "Emergency Alerts", "Priority incidents", "AlertTriangle",
            priority="high", count=_count(tickets, priority=TicketPriority.URGENT.value),
        ),
        DashboardModule("patrol-logs", "Patrol Logs", "Shift/post logs", "Clock"),
        DashboardModule("location-incidents", "Location Mapping", "Incident locations", "MapPin"),
    ]


def _transport_modules(tickets) -> List[DashboardModule]:
    return [
        DashboardModule("transport-requests", "Transport Requests", "Service requests", "Bus", path="/tickets", count=len(tickets)),
        DashboardModule("route-management", "Route Management", "Bus timing & routes", "Route"),
        DashboardModule("student-communication", "Student Communication", "Updates & notifications", "MessageSquare"),
        DashboardModule("lost-found", "Lost & Found", "Item reports", "Search"),
    ]


def _lab_assistant_modules(tickets) -> List[DashboardModule]:
    return [
        DashboardModule("equipment-issues", "Equipment Issues", "Lab equipment problems", "Monitor", path="/tickets", count=len(tickets)),
        DashboardModule("safety-notifications", "Safety Alerts", "Hazard notifications", "AlertTriangle", priority="high"),
        DashboardModule("maintenance-requests", "Maintenance Requests", "Forward to IT/Maintenance", "Wrench"),
        DashboardModule("asset-logs", "Asset Management", "Lab equipment tracking", "Package"),
    ]


def _supporting_staff_modules(tickets) -> List[DashboardModule]:
    return [
        DashboardModule("service-tickets", "Service Tickets", "General support requests", "Headphones", path="/tickets", count=len(tickets)),
        DashboardModule("task-list", "Task Assignment", "Work assignments", "CheckSquare"),
        DashboardModule("completion-updates", "Update Status", "Mark tasks complete", "CheckCircle"),
        DashboardModule("work-history", "Work History", "Department logs", "History"),
    ]


MODULE_BUILDERS: Dict[UserRole, Callable[[list], List[DashboardModule]]] = {
    UserRole.STUDENT: _student_modules,
    UserRole.TEACHING_STAFF: _teaching_staff_modules,
    UserRole.TUTOR: _tutor_modules,
    UserRole.DEPARTMENT_STAFF: _department_staff_modules,
    UserRole.HOD: _hod_modules,
    UserRole.ADMIN: _admin_modules,
    UserRole.HOSTEL_WARDEN: _warden_modules,
    UserRole.MAINTENANCE: _maintenance_modules,
    UserRole.SECURITY_STAFF: _security_modules,
    UserRole.TRANSPORT_OFFICER: _transport_modules,
    UserRole.LAB_ASSISTANT: _lab_assistant_modules,
    UserRole.SUPPORTING_STAFF: _supporting_staff_modules,
}

for _table, _name in ((TICKET_FILTERS, "TICKET_FILTERS"), (MODULE_BUILDERS, "MODULE_BUILDERS")):
    _missing = [r.value for r in UserRole if r not in _table]
    if _missing:
        raise RuntimeError(f"{_name} is missing roles: {', '.join(_missing)}")


def get_dashboard_modules(role, tickets: Sequence = ()) -> List[DashboardModule]:
    user_role = UserRole(role)
    return MODULE_BUILDERS[user_role](get_filtered_tickets(user_role, tickets))


def get_dashboard_insights(role, tickets: Sequence = ()) -> List[DashboardInsight]:
    role_tickets = get_filtered_tickets(role, tickets)
    return [
        DashboardInsight("Total Tickets", len(role_tickets), color="primary"),
        DashboardInsight("Pending", _count(role_tickets, status=_PENDING), color="warning"),
        DashboardInsight("In Progress", _count(role_tickets, status=TicketStatus.IN_PROGRESS.value), color="primary"),
        DashboardInsight("Resolved", _count(role_tickets, status=TicketStatus.RESOLVED.value), color="success"),
    ]
