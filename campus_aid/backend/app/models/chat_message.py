# campus_aid/backend/app/models/chat_message.py
import uuid

from sqlalchemy import Column, DateTime, String, Text

from ..db import Base, utcnow


class ChatMessage(Base):
    """
    One assistant exchange (question + answer) for a user.
    `assistant` is "campus" or "teacher".
    """
    __tablename__ = "ai_chats"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(36), nullable=False, index=True)
    assistant = Column(String(20), nullable=False)
    query = Column(Text, nullable=False)
    response = Column(Text, nullable=False)
    timestamp = Column(DateTime, default=utcnow, nullable=False)
