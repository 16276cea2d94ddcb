# tests/test_dashboard.py

from types import SimpleNamespace

import pytest

from campus_aid.backend.app.models.enums import UserRole
from campus_aid.backend.app.services.dashboard import (
    get_dashboard_insights,
    get_dashboard_modules,
    get_filtered_tickets,
)


def _ticket(category, status="pending", priority="medium"):
    return SimpleNamespace(category=category, status=status, priority=priority)


TICKETS = [
    _ticket("academic_query"),
    _ticket("academic_query", status="resolved"),
    _ticket("hostel_issue", status="in_progress"),
    _ticket("facility_issue"),
    _ticket("maintenance", status="resolved"),
    _ticket("security_issue", priority="urgent"),
    _ticket("transport_issue", status="escalated"),
]


@pytest.mark.parametrize("role", list(UserRole))
def test_every_role_has_modules_and_insights(role):
    modules = get_dashboard_modules(role, TICKETS)
    assert modules
    assert len({m.id for m in modules}) == len(modules)
    assert [i.label for i in get_dashboard_insights(role, TICKETS)] == [
        "Total Tickets",
        "Pending",
        "In Progress",
        "Resolved",
    ]


def test_filtering_by_role():
    assert len(get_filtered_tickets("tutor", TICKETS)) == 2
    assert len(get_filtered_tickets("hostel_warden", TICKETS)) == 1
    assert len(get_filtered_tickets("maintenance", TICKETS)) == 2
    assert len(get_filtered_tickets("admin", TICKETS)) == len(TICKETS)


def test_insight_counts_and_colours():
    insights = {i.label: i for i in get_dashboard_insights("maintenance", TICKETS)}
    assert insights["Total Tickets"].value == 2
    assert insights["Pending"].value == 1
    assert insights["In Progress"].value == 0
    assert insights["Resolved"].value == 1
    assert [i.color for i in insights.values()] == ["primary", "warning", "primary", "success"]


def test_module_counts():
    student = {m.id: m for m in get_dashboard_modules("student", TICKETS[:2])}
    assert student["my-tickets"].count == 2

    security = {m.id: m for m in get_dashboard_modules("security_staff", TICKETS)}
    assert security["incident-reports"].count == 1
    assert security["emergency-alerts"].count == 1
    assert security["emergency-alerts"].priority == "high"

    hod = {m.id: m for m in get_dashboard_modules("hod", TICKETS)}
    assert hod["approval-center"].count == 1


def test_unknown_role_is_rejected():
    with pytest.raises(ValueError):
        get_dashboard_modules("janitor", TICKETS)
