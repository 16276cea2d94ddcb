# campus_aid/backend/app/api/v1/assistant.py

from dataclasses import asdict
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...ai import campus_assistant, teacher
from ...auth import get_current_user
from ...db import get_db
from ...models.user import User
from ...schemas.assistant import AssistantQuery, CampusAnswer, ChatMessageRead, FAQRead, TeacherAnswer
from ...services.chat_history import ChatHistoryService
from ...services.entity_store import EntityStore

router = APIRouter(prefix="/assistant", tags=["assistant"])


@router.post("/campus", response_model=CampusAnswer)
def ask_campus_assistant(
    payload: AssistantQuery,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    answer = campus_assistant.process_query(payload.query)
    ChatHistoryService(EntityStore(db)).save_chat_message(current_user.id, "campus", payload.query, answer.message)
    return CampusAnswer(**asdict(answer))


@router.post("/teacher", response_model=TeacherAnswer)
def ask_teacher(
    payload: AssistantQuery,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    answer = teacher.process_query(
        payload.query,
        department=payload.department or current_user.department,
        semester=payload.semester,
        subject=payload.subject,
    )
    ChatHistoryService(EntityStore(db)).save_chat_message(current_user.id, "teacher", payload.query, answer.message)
    return TeacherAnswer(**asdict(answer))


@router.get("/history", response_model=List[ChatMessageRead])
def chat_history(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return ChatHistoryService(EntityStore(db)).get_chat_history(current_user.id)


@router.get("/faqs", response_model=List[FAQRead])
def faqs():
    return campus_assistant.get_faqs()
