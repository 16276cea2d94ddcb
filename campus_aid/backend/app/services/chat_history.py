# campus_aid/backend/app/services/chat_history.py

from __future__ import annotations

import logging
from typing import List

from ..db import utcnow
from ..models import ChatMessage
from .entity_store import EntityStore

logger = logging.getLogger(__name__)

COLLECTION = "ai_chats"


class ChatHistoryService:
    def __init__(self, store: EntityStore):
        self.store = store

    def save_chat_message(self, user_id: str, assistant: str, query: str, response: str) -> ChatMessage:
        message = self.store.create(
            COLLECTION,
            {
                "user_id": user_id,
                "assistant": assistant,
                "query": query,
                "response": response,
                "timestamp": utcnow(),
            },
        )
        logger.debug("Saved %s assistant exchange for %s", assistant, user_id)
        return message

    def get_chat_history(self, user_id: str) -> List[ChatMessage]:
        """Newest first."""
        return self.store.get_ordered_where(COLLECTION, "user_id", "==", user_id, "timestamp")
