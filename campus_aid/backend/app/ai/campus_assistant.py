# campus_aid/backend/app/ai/campus_assistant.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

# Scanned in this order; first keyword found in the query wins
DEPARTMENTS = {
    "computer science": "CS Block, First Floor. Contact: cs@campus.edu",
    "mechanical": "Mechanical Block, Ground Floor. Contact: mech@campus.edu",
    "electrical": "EE Block, Second Floor. Contact: ee@campus.edu",
    "library": "Central Library Building. Hours: 8 AM - 8 PM",
    "admin": "Main Building, Ground Floor. Hours: 9 AM - 5 PM",
}

FACILITIES = {
    "cafeteria": "Student Center, Ground Floor. Hours: 7 AM - 9 PM",
    "medical": "Health Center, 24/7 emergency services available",
    "hostel": "Hostel Complex, Boys: Block A, Girls: Block B",
    "transport": "Gate Complex, Bus services 6 AM - 10 PM",
    "sports": "Sports Complex, Indoor/Outdoor facilities available",
}

PROCEDURES = {
    "complaint": "Submit through the Campus Aid portal -> auto-routed to the department -> tracked until resolution",
    "academic query": "Contact your tutor or use the AI Teacher for syllabus questions",
    "hostel issue": "Contact the hostel warden or submit a ticket for maintenance",
    "transport": "Check bus schedules at the transport office or submit route requests",
}

SUPPORT_MESSAGE = (
    "**Campus Support Options:**\n"
    "- Submit tickets for issues\n"
    "- Use AI Teacher for academic help\n"
    "- Navigate campus with QR codes\n"
    "- Check notices for updates"
)

CONTACTS_MESSAGE = (
    "**Emergency Contacts:**\n"
    "- Security: 100\n"
    "- Medical: 102\n"
    "- Admin Office: 0422-123456\n"
    "- Hostel Warden: 0422-123457"
)

DEFAULT_MESSAGE = (
    "I can help you with:\n"
    "- Department locations and contacts\n"
    "- Campus facility information\n"
    "- Procedure guidance\n"
    "- Emergency contacts\n\n"
    "Try asking about specific departments, facilities, or procedures."
)

FAQS = [
    {
        "question": "How do I submit a complaint?",
        "answer": "Use the 'Submit Request' feature in Campus Aid. Your ticket will be "
                  "automatically routed to the appropriate department.",
    },
    {
        "question": "Where is the library located?",
        "answer": "Central Library Building, open 8 AM - 8 PM daily. Use campus "
                  "navigation for directions.",
    },
    {
        "question": "How do I contact my department?",
        "answer": "Each department has contact details available. Ask me about your "
                  "specific department for contact information.",
    },
    {
        "question": "What are the hostel rules?",
        "answer": "Contact your hostel warden for detailed rules, or submit a query "
                  "through the ticket system.",
    },
]


@dataclass
class CampusResponse:
    message: str
    type: str  # info | routing | faq | facility
    suggested_actions: List[str] = field(default_factory=list)


def _lookup(query: str, table: Dict[str, str]):
    for keyword, info in table.items():
        if keyword in query:
            return keyword, info
    return None


def process_query(query: str) -> CampusResponse:
    text = (query or "").lower()

    hit = _lookup(text, DEPARTMENTS)
    if hit:
        name, info = hit
        return CampusResponse(
            f"**{name.upper()} Department Information:**\n{info}",
            "routing",
            ["Submit Ticket", "Navigate to Location"],
        )

    hit = _lookup(text, FACILITIES)
    if hit:
        name, info = hit
        return CampusResponse(
            f"**{name.upper()} Information:**\n{info}",
            "facility",
            ["Get Directions", "Submit Facility Issue"],
        )

    hit = _lookup(text, PROCEDURES)
    if hit:
        name, info = hit
        return CampusResponse(
            f"**{name.upper()} Process:**\n{info}",
            "info",
            ["Submit Request", "View Guidelines"],
        )

    if "help" in text or "support" in text:
        return CampusResponse(SUPPORT_MESSAGE, "info", ["Submit Ticket", "AI Teacher", "Campus Navigation"])

    if "contact" in text or "phone" in text:
        return CampusResponse(CONTACTS_MESSAGE, "info")

    return CampusResponse(DEFAULT_MESSAGE, "faq", ["Browse Departments", "View Campus Map", "Submit Question"])


def get_faqs() -> List[Dict[str, str]]:
    return [dict(faq) for faq in FAQS]
