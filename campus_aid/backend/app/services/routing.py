# campus_aid/backend/app/services/routing.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional

from ..db import utcnow
from ..models.enums import (
    Department,
    TicketCategory,
    TicketPriority,
    TicketStatus,
    UserRole,
)


def _require_complete(table: dict, enum_cls, name: str) -> None:
    """Every member of `enum_cls` must have a row in `table`."""
    missing = [m.value for m in enum_cls if m not in table]
    if missing:
        raise RuntimeError(f"{name} is missing entries for: {', '.join(missing)}")


def _as_role(role) -> Optional[UserRole]:
    try:
        return UserRole(role)
    except ValueError:
        return None


def _as_department(department) -> Optional[Department]:
    try:
        return Department((department or "").strip().lower())
    except ValueError:
        return None


# Department classification

# Checked in this order; the first rule that matches wins.
CLASSIFICATION_RULES = [
    (Department.ACADEMIC, ("syllabus", "lecture")),
    (Department.HOSTEL, ("room", "mess")),
    (Department.TRANSPORT, ("bus", "vehicle")),
    (Department.MAINTENANCE, ("repair", "cleaning")),
    (Department.SECURITY, ("safety", "access")),
    (Department.LAB, ("equipment", "computer")),
    (Department.LIBRARY, ("book", "resource")),
    (Department.IT, ("network", "software")),
]

# Ticket category -> category tag understood by classify_category
CATEGORY_TAGS: Dict[TicketCategory, str] = {
    TicketCategory.ACADEMIC_QUERY: "academic",
    TicketCategory.HOSTEL_ISSUE: "hostel",
    TicketCategory.TRANSPORT_ISSUE: "transport",
    TicketCategory.SECURITY_ISSUE: "security",
    TicketCategory.MAINTENANCE: "maintenance",
    TicketCategory.FACILITY_ISSUE: "maintenance",
    TicketCategory.SERVICE_REQUEST: "general",
    TicketCategory.COMPLAINT: "general",
    TicketCategory.OTHER: "general",
}
_require_complete(CATEGORY_TAGS, TicketCategory, "CATEGORY_TAGS")


def routing_tag_for_category(category) -> str:
    try:
        return CATEGORY_TAGS[TicketCategory(category)]
    except ValueError:
        return (category or "").strip().lower()


def classify_category(category: Optional[str], issue_type: Optional[str]) -> Department:
    """
    Map a category tag plus free-text issue type to a department.

    A rule matches when the category equals its tag or the issue type
    contains one of its keywords. Falls back to 'general'.
    """
    cat = (category or "").strip().lower()
    issue = (issue_type or "").lower()

    for department, keywords in CLASSIFICATION_RULES:
        if cat == department.value or any(k in issue for k in keywords):
            return department

    return Department.GENERAL


# Who may work a department's tickets

DEPARTMENT_ROUTING: Dict[Department, List[UserRole]] = {
    Department.ACADEMIC: [UserRole.TEACHING_STAFF, UserRole.TUTOR, UserRole.HOD],
    Department.HOSTEL: [UserRole.HOSTEL_WARDEN],
    Department.TRANSPORT: [UserRole.TRANSPORT_OFFICER],
    Department.MAINTENANCE: [UserRole.MAINTENANCE],
    Department.SECURITY: [UserRole.SECURITY_STAFF],
    Department.LAB: [UserRole.LAB_ASSISTANT, UserRole.TEACHING_STAFF],
    Department.LIBRARY: [UserRole.SUPPORTING_STAFF],
    Department.ADMINISTRATION: [UserRole.ADMIN, UserRole.DEPARTMENT_STAFF],
    Department.IT: [UserRole.ADMIN, UserRole.DEPARTMENT_STAFF],
    Department.GENERAL: [UserRole.ADMIN],
}
_require_complete(DEPARTMENT_ROUTING, Department, "DEPARTMENT_ROUTING")


def get_assignable_roles(department: Optional[str]) -> List[UserRole]:
    dept = _as_department(department)
    if dept is None:
        return [UserRole.ADMIN]
    return list(DEPARTMENT_ROUTING[dept])


def can_user_handle_ticket(role, department: Optional[str]) -> bool:
    """Admin may handle anything, including unrecognized departments."""
    user_role = _as_role(role)
    if user_role is None:
        return False
    return user_role == UserRole.ADMIN or user_role in get_assignable_roles(department)


# Priority and resolution estimates

def get_priority_level(category: Optional[str], issue_type: Optional[str]) -> TicketPriority:
    """
    Rules-based priority suggestion:

      - High: security category, or "emergency" / "urgent" in the issue.
      - Medium: academic or lab category, or "exam" in the issue.
      - Low: everything else.
    """
    cat = (category or "").strip().lower()
    issue = (issue_type or "").lower()

    if cat == "security" or "emergency" in issue or "urgent" in issue:
        return TicketPriority.HIGH

    if cat in ("academic", "lab") or "exam" in issue:
        return TicketPriority.MEDIUM

    return TicketPriority.LOW


BASE_RESOLUTION_HOURS = {
    Department.SECURITY: 1,
    Department.IT: 4,
    Department.MAINTENANCE: 24,
    Department.ACADEMIC: 48,
    Department.GENERAL: 72,
}
DEFAULT_RESOLUTION_HOURS = 72

PRIORITY_MULTIPLIERS = {
    TicketPriority.HIGH: 0.5,
    TicketPriority.MEDIUM: 1.0,
    TicketPriority.LOW: 2.0,
}


def get_estimated_resolution_time(department: Optional[str], priority: Optional[str]) -> float:
    """Hours until a ticket is expected to be resolved."""
    base = BASE_RESOLUTION_HOURS.get(_as_department(department), DEFAULT_RESOLUTION_HOURS)
    try:
        multiplier = PRIORITY_MULTIPLIERS.get(TicketPriority(priority), 1.0)
    except ValueError:
        multiplier = 1.0
    return base * multiplier


# Status transitions each role may perform

_S = TicketStatus

_TEACHING_FLOW = {
    _S.PENDING: [_S.IN_PROGRESS, _S.ESCALATED],
    _S.IN_PROGRESS: [_S.RESOLVED, _S.ESCALATED],
}
_DEPARTMENT_FLOW = {
    _S.PENDING: [_S.IN_PROGRESS],
    _S.IN_PROGRESS: [_S.RESOLVED, _S.ESCALATED],
}
_OPERATIONS_FLOW = {
    _S.PENDING: [_S.IN_PROGRESS],
    _S.IN_PROGRESS: [_S.RESOLVED],
}
# hod and admin may set any of these from any status
_OVERRIDE_FLOW = {
    status: [_S.IN_PROGRESS, _S.RESOLVED, _S.ESCALATED, _S.REJECTED]
    for status in TicketStatus
}

ROLE_ACTIONS: Dict[UserRole, Dict[TicketStatus, List[TicketStatus]]] = {
    UserRole.STUDENT: {},
    UserRole.TUTOR: _TEACHING_FLOW,
    UserRole.TEACHING_STAFF: _TEACHING_FLOW,
    UserRole.DEPARTMENT_STAFF: _DEPARTMENT_FLOW,
    UserRole.HOD: _OVERRIDE_FLOW,
    UserRole.ADMIN: _OVERRIDE_FLOW,
    UserRole.MAINTENANCE: _OPERATIONS_FLOW,
    UserRole.SECURITY_STAFF: _OPERATIONS_FLOW,
    UserRole.HOSTEL_WARDEN: _OPERATIONS_FLOW,
    UserRole.TRANSPORT_OFFICER: _OPERATIONS_FLOW,
    UserRole.LAB_ASSISTANT: _OPERATIONS_FLOW,
    UserRole.SUPPORTING_STAFF: _OPERATIONS_FLOW,
}
_require_complete(ROLE_ACTIONS, UserRole, "ROLE_ACTIONS")


def get_available_actions(role, current_status) -> List[TicketStatus]:
    """Statuses `role` may move a ticket to; never includes the current one."""
    user_role = _as_role(role)
    try:
        status = TicketStatus(current_status)
    except ValueError:
        return []
    if user_role is None:
        return []
    return [s for s in ROLE_ACTIONS[user_role].get(status, []) if s != status]


# Category routing rules and escalation

@dataclass(frozen=True)
class RoutingRule:
    category: TicketCategory
    department: str
    assigned_role: UserRole
    priority: Optional[TicketPriority] = None
    escalation_hours: Optional[int] = None


_ROUTING_RULES = [
    RoutingRule(TicketCategory.ACADEMIC_QUERY, "Academic", UserRole.TUTOR, escalation_hours=24),
    RoutingRule(TicketCategory.FACILITY_ISSUE, "Maintenance", UserRole.MAINTENANCE, escalation_hours=4),
    RoutingRule(TicketCategory.HOSTEL_ISSUE, "Hostel", UserRole.HOSTEL_WARDEN, escalation_hours=2),
    RoutingRule(TicketCategory.TRANSPORT_ISSUE, "Transport", UserRole.TRANSPORT_OFFICER, escalation_hours=8),
    RoutingRule(
        TicketCategory.SECURITY_ISSUE,
        "Security",
        UserRole.SECURITY_STAFF,
        priority=TicketPriority.URGENT,
        escalation_hours=1,
    ),
    RoutingRule(TicketCategory.MAINTENANCE, "Maintenance", UserRole.MAINTENANCE, escalation_hours=6),
    RoutingRule(TicketCategory.SERVICE_REQUEST, "Administration", UserRole.DEPARTMENT_STAFF, escalation_hours=48),
    RoutingRule(TicketCategory.COMPLAINT, "Administration", UserRole.DEPARTMENT_STAFF, escalation_hours=24),
    RoutingRule(TicketCategory.OTHER, "Administration", UserRole.DEPARTMENT_STAFF, escalation_hours=48),
]
ROUTING_RULES: Dict[TicketCategory, RoutingRule] = {r.category: r for r in _ROUTING_RULES}
_require_complete(ROUTING_RULES, TicketCategory, "ROUTING_RULES")

DEFAULT_ESCALATION_HOURS = 24


def get_routing(category, user_department: Optional[str] = None) -> RoutingRule:
    """
    Routing rule for a ticket category. Unknown categories use the 'other'
    rule; academic queries go to the submitter's own department when known.
    """
    try:
        rule = ROUTING_RULES[TicketCategory(category)]
    except ValueError:
        rule = ROUTING_RULES[TicketCategory.OTHER]

    if rule.category == TicketCategory.ACADEMIC_QUERY and user_department:
        return RoutingRule(
            category=rule.category,
            department=user_department,
            assigned_role=rule.assigned_role,
            priority=rule.priority,
            escalation_hours=rule.escalation_hours,
        )
    return rule


def should_escalate(created_at: datetime, category, now: Optional[datetime] = None) -> bool:
    rule = get_routing(category)
    hours_elapsed = ((now or utcnow()) - created_at).total_seconds() / 3600
    return hours_elapsed > (rule.escalation_hours or DEFAULT_ESCALATION_HOURS)


ESCALATION_PATH: Dict[UserRole, UserRole] = {
    UserRole.TUTOR: UserRole.TEACHING_STAFF,
    UserRole.TEACHING_STAFF: UserRole.HOD,
    UserRole.DEPARTMENT_STAFF: UserRole.HOD,
    UserRole.MAINTENANCE: UserRole.ADMIN,
    UserRole.SECURITY_STAFF: UserRole.ADMIN,
    UserRole.TRANSPORT_OFFICER: UserRole.ADMIN,
    UserRole.HOSTEL_WARDEN: UserRole.ADMIN,
    UserRole.LAB_ASSISTANT: UserRole.HOD,
    UserRole.SUPPORTING_STAFF: UserRole.ADMIN,
    UserRole.HOD: UserRole.ADMIN,
    UserRole.ADMIN: UserRole.ADMIN,
    UserRole.STUDENT: UserRole.TUTOR,
}
_require_complete(ESCALATION_PATH, UserRole, "ESCALATION_PATH")


def get_escalation_path(role) -> UserRole:
    user_role = _as_role(role)
    if user_role is None:
        return UserRole.ADMIN
    return ESCALATION_PATH[user_role]


CATEGORY_PRIORITY: Dict[TicketCategory, TicketPriority] = {
    TicketCategory.SECURITY_ISSUE: TicketPriority.URGENT,
    TicketCategory.FACILITY_ISSUE: TicketPriority.HIGH,
    TicketCategory.HOSTEL_ISSUE: TicketPriority.HIGH,
    TicketCategory.MAINTENANCE: TicketPriority.MEDIUM,
    TicketCategory.TRANSPORT_ISSUE: TicketPriority.MEDIUM,
    TicketCategory.ACADEMIC_QUERY: TicketPriority.MEDIUM,
    TicketCategory.SERVICE_REQUEST: TicketPriority.LOW,
    TicketCategory.COMPLAINT: TicketPriority.MEDIUM,
    TicketCategory.OTHER: TicketPriority.LOW,
}
_require_complete(CATEGORY_PRIORITY, TicketCategory, "CATEGORY_PRIORITY")


def get_priority_by_category(category) -> TicketPriority:
    try:
        return CATEGORY_PRIORITY[TicketCategory(category)]
    except ValueError:
        return TicketPriority.MEDIUM


# Ticket visibility for staff lists

def can_view_ticket(user, ticket) -> bool:
    """
    Whether `user` sees `ticket` in staff ticket lists. Submitters always
    see their own tickets.
    """
    if ticket.submitted_by == user.id:
        return True

    role = _as_role(user.role)
    category = ticket.category

    if role in (UserRole.ADMIN, UserRole.HOD):
        return True
    if role == UserRole.DEPARTMENT_STAFF:
        return bool(user.department) and ticket.department == user.department
    if role in (UserRole.TUTOR, UserRole.TEACHING_STAFF):
        return category == TicketCategory.ACADEMIC_QUERY.value
    if role == UserRole.HOSTEL_WARDEN:
        return category == TicketCategory.HOSTEL_ISSUE.value
    if role == UserRole.MAINTENANCE:
        return category in (TicketCategory.FACILITY_ISSUE.value, TicketCategory.MAINTENANCE.value)
    if role == UserRole.SECURITY_STAFF:
        return category == TicketCategory.SECURITY_ISSUE.value
    if role == UserRole.TRANSPORT_OFFICER:
        return category == TicketCategory.TRANSPORT_ISSUE.value
    return False


# Everything the routing table says about a prospective ticket

@dataclass
class RoutingDecision:
    department: Department
    assignable_roles: List[UserRole]
    priority: TicketPriority
    estimated_resolution_hours: float
    assigned_role: UserRole
    escalation_hours: int
    escalation_role: UserRole
    category_priority: Optional[TicketPriority] = None
    notes: List[str] = field(default_factory=list)


def route_ticket(category: str, issue_type: Optional[str] = None) -> RoutingDecision:
    """
    `category` is either a ticket category (e.g. "hostel_issue") or a bare
    category tag (e.g. "hostel").
    """
    tag = routing_tag_for_category(category)
    department = classify_category(tag, issue_type)
    priority = get_priority_level(tag, issue_type)
    rule = get_routing(category)

    decision = RoutingDecision(
        department=department,
        assignable_roles=get_assignable_roles(department.value),
        priority=priority,
        estimated_resolution_hours=get_estimated_resolution_time(department.value, priority.value),
        assigned_role=rule.assigned_role,
        escalation_hours=rule.escalation_hours or DEFAULT_ESCALATION_HOURS,
        escalation_role=get_escalation_path(rule.assigned_role),
    )
    try:
        decision.category_priority = CATEGORY_PRIORITY[TicketCategory(category)]
    except ValueError:
        decision.notes.append(f"'{category}' is not a ticket category; routed by tag only")
    return decision
