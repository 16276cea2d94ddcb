# tests/test_routing_rules.py

from datetime import datetime, timedelta
from types import SimpleNamespace

from campus_aid.backend.app.models.enums import Department, TicketPriority, TicketStatus, UserRole
from campus_aid.backend.app.services.routing import (
    can_user_handle_ticket,
    can_view_ticket,
    classify_category,
    get_assignable_roles,
    get_available_actions,
    get_escalation_path,
    get_estimated_resolution_time,
    get_priority_by_category,
    get_priority_level,
    get_routing,
    route_ticket,
    routing_tag_for_category,
    should_escalate,
)


def test_classify_by_category_tag():
    assert classify_category("hostel", None) == Department.HOSTEL
    assert classify_category("Security", "") == Department.SECURITY


def test_classify_by_issue_keyword_in_rule_order():
    assert classify_category("other", "Broken bus seat") == Department.TRANSPORT
    # "lecture" (academic) is checked before "computer" (lab)
    assert classify_category("other", "lecture hall computer") == Department.ACADEMIC


def test_classify_falls_back_to_general():
    assert classify_category("unknown", "nothing matches here") == Department.GENERAL
    assert classify_category(None, None) == Department.GENERAL


def test_ticket_categories_map_to_tags():
    assert routing_tag_for_category("academic_query") == "academic"
    assert routing_tag_for_category("facility_issue") == "maintenance"
    assert routing_tag_for_category("complaint") == "general"
    assert routing_tag_for_category("Library") == "library"


def test_assignable_roles():
    assert get_assignable_roles("academic") == [UserRole.TEACHING_STAFF, UserRole.TUTOR, UserRole.HOD]
    assert get_assignable_roles("lab") == [UserRole.LAB_ASSISTANT, UserRole.TEACHING_STAFF]
    assert get_assignable_roles("no-such-department") == [UserRole.ADMIN]


def test_admin_handles_everything():
    assert can_user_handle_ticket("admin", "hostel")
    assert can_user_handle_ticket("admin", "made-up")


def test_handle_requires_assignable_role():
    assert can_user_handle_ticket("hostel_warden", "hostel")
    assert not can_user_handle_ticket("hostel_warden", "transport")
    assert not can_user_handle_ticket("student", "academic")
    assert not can_user_handle_ticket("not-a-role", "academic")


def test_priority_level_high_on_security_or_urgent_words():
    assert get_priority_level("security", None) == TicketPriority.HIGH
    assert get_priority_level("hostel", "EMERGENCY water leak") == TicketPriority.HIGH
    assert get_priority_level("transport", "urgent") == TicketPriority.HIGH


def test_priority_level_medium_and_low():
    assert get_priority_level("academic", "marks") == TicketPriority.MEDIUM
    assert get_priority_level("hostel", "exam week noise") == TicketPriority.MEDIUM
    assert get_priority_level("library", "late fee") == TicketPriority.LOW


def test_estimated_resolution_time():
    assert get_estimated_resolution_time("security", "high") == 0.5
    assert get_estimated_resolution_time("it", "medium") == 4
    assert get_estimated_resolution_time("academic", "low") == 96
    assert get_estimated_resolution_time("hostel", "medium") == 72
    assert get_estimated_resolution_time("maintenance", "urgent") == 24


def test_tutor_actions():
    assert get_available_actions("tutor", "pending") == [TicketStatus.IN_PROGRESS, TicketStatus.ESCALATED]
    assert get_available_actions("tutor", "in_progress") == [TicketStatus.RESOLVED, TicketStatus.ESCALATED]
    assert get_available_actions("tutor", "resolved") == []


def test_override_roles_never_offer_current_status():
    for role in ("admin", "hod"):
        for status in TicketStatus:
            actions = get_available_actions(role, status)
            assert status not in actions
            assert set(actions) <= {
                TicketStatus.IN_PROGRESS,
                TicketStatus.RESOLVED,
                TicketStatus.ESCALATED,
                TicketStatus.REJECTED,
            }


def test_operational_roles_only_progress_and_resolve():
    assert get_available_actions("maintenance", "pending") == [TicketStatus.IN_PROGRESS]
    assert get_available_actions("maintenance", "in_progress") == [TicketStatus.RESOLVED]
    assert get_available_actions("security_staff", "escalated") == []


def test_students_and_unknown_roles_have_no_actions():
    assert get_available_actions("student", "pending") == []
    assert get_available_actions("nobody", "pending") == []
    assert get_available_actions("admin", "not-a-status") == []


def test_routing_rule_for_category():
    rule = get_routing("security_issue")
    assert rule.assigned_role == UserRole.SECURITY_STAFF
    assert rule.priority == TicketPriority.URGENT
    assert rule.escalation_hours == 1

    assert get_routing("nonsense").assigned_role == UserRole.DEPARTMENT_STAFF
    assert get_routing("academic_query", "Physics").department == "Physics"
    assert get_routing("hostel_issue", "Physics").department == "Hostel"


def test_should_escalate_after_window():
    created = datetime(2024, 7, 1, 8, 0)
    assert not should_escalate(created, "hostel_issue", now=created + timedelta(hours=2))
    assert should_escalate(created, "hostel_issue", now=created + timedelta(hours=2, minutes=1))
    assert should_escalate(created, "security_issue", now=created + timedelta(hours=1, seconds=1))


def test_escalation_path():
    assert get_escalation_path("tutor") == UserRole.TEACHING_STAFF
    assert get_escalation_path("teaching_staff") == UserRole.HOD
    assert get_escalation_path("hod") == UserRole.ADMIN
    assert get_escalation_path("unknown") == UserRole.ADMIN


def test_priority_by_category():
    assert get_priority_by_category("security_issue") == TicketPriority.URGENT
    assert get_priority_by_category("service_request") == TicketPriority.LOW
    assert get_priority_by_category("???") == TicketPriority.MEDIUM


def test_can_view_ticket_by_role():
    ticket = SimpleNamespace(submitted_by="s1", category="hostel_issue", department="Hostel")

    def user(role, uid="u", department=None):
        return SimpleNamespace(id=uid, role=role, department=department)

    assert can_view_ticket(user("student", uid="s1"), ticket)
    assert not can_view_ticket(user("student", uid="s2"), ticket)
    assert can_view_ticket(user("hostel_warden"), ticket)
    assert not can_view_ticket(user("transport_officer"), ticket)
    assert can_view_ticket(user("hod"), ticket)
    assert can_view_ticket(user("department_staff", department="Hostel"), ticket)
    assert not can_view_ticket(user("department_staff"), ticket)


def test_route_ticket_preview():
    decision = route_ticket("facility_issue", "urgent repair in corridor")
    assert decision.department == Department.MAINTENANCE
    assert decision.assignable_roles == [UserRole.MAINTENANCE]
    assert decision.priority == TicketPriority.HIGH
    assert decision.estimated_resolution_hours == 12
    assert decision.assigned_role == UserRole.MAINTENANCE
    assert decision.escalation_hours == 4
    assert decision.escalation_role == UserRole.ADMIN
    assert decision.category_priority == TicketPriority.HIGH
    assert decision.notes == []


def test_route_ticket_accepts_bare_tag():
    decision = route_ticket("library", "book renewal")
    assert decision.department == Department.LIBRARY
    assert decision.category_priority is None
    assert decision.notes
