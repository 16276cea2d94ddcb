# campus_aid/backend/app/ai/responder.py
#
# Canned, rule-based replies standing in for a hosted language model.
# Same call shape as a model client: a prompt plus optional context.

from __future__ import annotations

import re
from typing import Iterable, Optional

GREETINGS = ("hello", "hi", "hey")
STRESS_WORDS = ("stressed", "overwhelmed")
MOTIVATION_WORDS = ("motivate", "motivation")

ACADEMIC_INDICATORS = (
    "explain", "what is", "how does", "define", "concept", "theory",
    "algorithm", "function", "method", "class", "variable", "data structure",
)

GREETING_REPLY = (
    "Hey there! I'm your AI teacher and I'm glad you're here. Whether you have "
    "academic questions or just want to chat about your studies, I'm here for you. "
    "What's on your mind today?"
)

STRESS_REPLY = (
    "That feeling is completely normal, and you're not alone in it. College can be "
    "overwhelming at times, and you've handled hard things before. Want to talk "
    "about what's stressing you out? Sometimes talking it through helps."
)

MOTIVATION_REPLY = (
    "Asking for help takes courage, and it shows you care about growing. Every day "
    "you learn something new you move closer to your goals. What's one small step "
    "you can take right now?"
)

DEFAULT_REPLY = (
    "That's an interesting question! Could you tell me a bit more about what you're "
    "looking for? I can help with your coursework, study support, or just some "
    "encouragement."
)


def mentions(text: str, phrases: Iterable[str]) -> bool:
    """Whole-word (plural tolerant) match of any phrase in `text`."""
    text = text.lower()
    return any(re.search(rf"\b{re.escape(p)}s?\b", text) for p in phrases)


def is_academic_query(query: str) -> bool:
    return mentions(query, ACADEMIC_INDICATORS)


def generate_response(prompt: str, context: Optional[str] = None) -> str:
    if context:
        return (
            "Great question!\n\n"
            f"Based on your syllabus materials:\n{context}\n\n"
            "Feel free to ask me to explain any part differently or go deeper."
        )
    if mentions(prompt, GREETINGS):
        return GREETING_REPLY
    if mentions(prompt, STRESS_WORDS):
        return STRESS_REPLY
    if mentions(prompt, MOTIVATION_WORDS):
        return MOTIVATION_REPLY
    return DEFAULT_REPLY
