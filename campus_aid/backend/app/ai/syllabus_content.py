# campus_aid/backend/app/ai/syllabus_content.py

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass(frozen=True)
class Chapter:
    title: str
    content: str


@dataclass(frozen=True)
class SubjectContent:
    topics: List[str] = field(default_factory=list)
    concepts: List[str] = field(default_factory=list)
    chapters: List[Chapter] = field(default_factory=list)


# Built-in course outlines the AI teacher answers from
SYLLABUS_DATABASE: Dict[str, SubjectContent] = {
    "data-structures": SubjectContent(
        topics=["Arrays", "Linked Lists", "Stacks", "Queues", "Trees", "Graphs", "Hashing"],
        concepts=["Time Complexity", "Space Complexity", "Recursion", "Dynamic Programming"],
        chapters=[
            Chapter("Introduction to Data Structures", "Basic concepts and importance of data structures in programming."),
            Chapter("Arrays and Strings", "Linear data structures for storing elements of same type."),
            Chapter("Linked Lists", "Dynamic data structure with nodes containing data and pointers."),
        ],
    ),
    "database-management": SubjectContent(
        topics=["SQL", "Normalization", "Transactions", "Indexing", "Query Optimization"],
        concepts=["ACID Properties", "Relational Model", "Entity-Relationship Model"],
        chapters=[
            Chapter("Introduction to DBMS", "Database concepts and management systems."),
            Chapter("SQL Fundamentals", "Structured Query Language for database operations."),
            Chapter("Database Design", "Normalization and schema design principles."),
        ],
    ),
    "computer-networks": SubjectContent(
        topics=["OSI Model", "TCP/IP", "Routing", "Network Security", "Protocols"],
        concepts=["Packet Switching", "Network Topology", "Error Detection"],
        chapters=[
            Chapter("Network Fundamentals", "Basic networking concepts and models."),
            Chapter("OSI Reference Model", "Seven-layer network architecture model."),
            Chapter("Internet Protocols", "TCP/IP suite and internet communication."),
        ],
    ),
}


def subject_key(subject: str) -> str:
    """'Data Structures' -> 'data-structures'"""
    return re.sub(r"\s+", "-", subject.strip().lower())


def get_syllabus_content(subject: str) -> Optional[SubjectContent]:
    return SYLLABUS_DATABASE.get(subject_key(subject))


def get_available_subjects() -> List[str]:
    return [" ".join(w.capitalize() for w in key.split("-")) for key in SYLLABUS_DATABASE]


def _matches(text: str, query: str) -> bool:
    text = text.lower()
    return query in text or text in query


def _search_subject(query: str, name: str, content: SubjectContent) -> Optional[str]:
    topics = [t for t in content.topics if _matches(t, query)]
    chapters = [
        c for c in content.chapters
        if _matches(c.title, query) or query in c.content.lower()
    ]
    if not topics and not chapters:
        return None

    parts = [f"Based on the {name} syllabus:", ""]
    if topics:
        parts += [f"**Related Topics:** {', '.join(topics)}", ""]
    if chapters:
        parts.append("**Chapter Information:**")
        parts += [f"- {c.title}: {c.content}" for c in chapters]
    return "\n".join(parts)


def search_content(query: str, subject: Optional[str] = None) -> Optional[str]:
    """
    Look the query up in the topics and chapters of one subject, or of
    every built-in subject when none is given (or it is unknown).

    A topic matches when either string contains the other, so both
    "stacks" and "how do stacks work" hit the Stacks topic.
    Returns a formatted summary, or None when nothing matched.
    """
    needle = (query or "").strip().lower()
    if not needle:
        return None

    if subject and get_syllabus_content(subject) is not None:
        candidates = [subject_key(subject)]
    else:
        candidates = list(SYLLABUS_DATABASE)

    for key in candidates:
        name = " ".join(w.capitalize() for w in key.split("-"))
        found = _search_subject(needle, name, SYLLABUS_DATABASE[key])
        if found:
            return found
    return None
