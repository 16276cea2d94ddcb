# campus_aid/backend/app/ai/teacher.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from . import responder, syllabus_content

ACADEMIC_KEYWORDS = (
    "explain", "what is", "how does", "define", "concept", "theory", "algorithm",
    "data structure", "database", "network", "programming", "code", "function",
    "class", "method", "variable", "loop", "array", "list", "tree", "graph",
    "sql", "query", "table", "normalization", "tcp", "ip", "osi", "protocol",
)

CONVERSATIONAL_TRIGGERS = (
    "hey", "hi", "hello", "how are you", "stressed", "tired", "worried",
    "motivate", "encourage", "help me", "feeling", "exam", "test", "nervous",
    "friend", "chat", "talk", "support", "advice",
)

INAPPROPRIATE_TOPICS = (
    "medical", "legal", "personal information", "dating", "politics", "religion",
)

SYLLABUS_TIP = (
    "\n\nTip: ask your instructor to upload the syllabus for this topic "
    "so I can give you more specific help."
)

FALLBACK_MESSAGE = (
    "I'm here to help with your academic studies and to support your learning.\n\n"
    "For other kinds of questions I'd recommend:\n"
    "- Speaking with a counselor for personal matters\n"
    "- Contacting campus support for non-academic issues\n"
    "- Using the campus assistant for general campus info\n\n"
    "What can I help you learn today?"
)

CONVERSATIONAL_SUGGESTIONS = [
    "Can you help me with my coursework?",
    "I'm struggling with a concept",
    "How can I study more effectively?",
]

GENERAL_SUGGESTIONS = [
    "What subjects can you help me with?",
    "I need motivation to study",
    "Explain data structures to me",
]

# (trigger words, follow-up questions), first match wins
RELATED_QUESTIONS = [
    (
        ("data structure", "array", "list"),
        [
            "What's the difference between arrays and linked lists?",
            "How do stacks and queues work?",
            "Can you explain time complexity?",
        ],
    ),
    (
        ("database", "sql"),
        [
            "What is database normalization?",
            "How do SQL joins work?",
            "What are ACID properties?",
        ],
    ),
    (
        ("network", "osi"),
        [
            "How does the OSI model work?",
            "What's the difference between TCP and UDP?",
            "Can you explain IP addressing?",
        ],
    ),
]

DEFAULT_RELATED = [
    "Can you give me an example?",
    "How is this used in real applications?",
    "What are the key points to remember?",
]


@dataclass
class TeacherResponse:
    message: str
    mode: str  # academic | conversational | fallback
    confidence: float
    suggested_questions: List[str] = field(default_factory=list)


def is_inappropriate(query: str) -> bool:
    return responder.mentions(query, INAPPROPRIATE_TOPICS)


def is_academic(query: str) -> bool:
    if responder.mentions(query, ACADEMIC_KEYWORDS):
        return True
    lowered = query.lower()
    return any(subject.lower() in lowered for subject in syllabus_content.get_available_subjects())


def is_conversational(query: str) -> bool:
    return responder.mentions(query, CONVERSATIONAL_TRIGGERS)


def get_related_questions(query: str) -> List[str]:
    for triggers, questions in RELATED_QUESTIONS:
        if responder.mentions(query, triggers):
            return list(questions)
    return list(DEFAULT_RELATED)


def _academic_response(query: str, subject: Optional[str]) -> TeacherResponse:
    context = syllabus_content.search_content(query, subject)
    if context:
        return TeacherResponse(
            message=responder.generate_response(query, context),
            mode="academic",
            confidence=0.9,
            suggested_questions=get_related_questions(query),
        )
    return TeacherResponse(
        message=responder.generate_response(query) + SYLLABUS_TIP,
        mode="academic",
        confidence=0.6,
        suggested_questions=get_related_questions(query),
    )


def process_query(
    query: str,
    department: Optional[str] = None,
    semester: Optional[str] = None,
    subject: Optional[str] = None,
) -> TeacherResponse:
    """
    Answer a student's question.

    Off-limits topics get a polite redirect. Academic questions are looked up
    in the built-in syllabus (narrowed to `subject`, falling back to
    `department` as the subject name). Anything else gets a friendly
    conversational reply.
    """
    text = (query or "").strip()

    if is_inappropriate(text):
        return TeacherResponse(message=FALLBACK_MESSAGE, mode="fallback", confidence=0.5)

    if is_academic(text):
        return _academic_response(text, subject or department)

    if is_conversational(text):
        return TeacherResponse(
            message=responder.generate_response(text),
            mode="conversational",
            confidence=0.9,
            suggested_questions=list(CONVERSATIONAL_SUGGESTIONS),
        )

    return TeacherResponse(
        message=responder.generate_response(text),
        mode="conversational",
        confidence=0.8,
        suggested_questions=list(GENERAL_SUGGESTIONS),
    )
