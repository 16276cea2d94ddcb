# campus_aid/backend/app/api/v1/notices.py

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ...auth import get_current_user, require_roles
from ...db import get_db
from ...models.enums import UserRole
from ...models.user import User
from ...schemas.notice import NoticeCreate, NoticeRead, NoticeUpdate
from ...services.entity_store import EntityStore
from ...services.notices import PUBLISHER_ROLES, NoticeService

router = APIRouter(prefix="/notices", tags=["notices"])

require_publisher = require_roles(*(UserRole(r) for r in sorted(PUBLISHER_ROLES)))


@router.get("/", response_model=List[NoticeRead])
def notices_for_me(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return NoticeService(EntityStore(db)).get_notices_for_role(current_user.role)


@router.get("/all", response_model=List[NoticeRead])
def all_notices(db: Session = Depends(get_db), _publisher: User = Depends(require_publisher)):
    return NoticeService(EntityStore(db)).get_all_notices()


@router.post("/", response_model=NoticeRead, status_code=status.HTTP_201_CREATED)
def create_notice(payload: NoticeCreate, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return NoticeService(EntityStore(db)).create_notice(current_user, payload.model_dump())


@router.get("/{notice_id}", response_model=NoticeRead)
def get_notice(notice_id: str, db: Session = Depends(get_db), _user: User = Depends(get_current_user)):
    return NoticeService(EntityStore(db)).get_notice_by_id(notice_id)


@router.patch("/{notice_id}", response_model=NoticeRead)
def update_notice(
    notice_id: str,
    payload: NoticeUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return NoticeService(EntityStore(db)).update_notice(
        current_user, notice_id, payload.model_dump(exclude_unset=True)
    )


@router.delete("/{notice_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_notice(notice_id: str, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    NoticeService(EntityStore(db)).delete_notice(current_user, notice_id)


@router.post("/{notice_id}/activate", response_model=NoticeRead)
def activate_notice(notice_id: str, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return NoticeService(EntityStore(db)).activate_notice(current_user, notice_id)


@router.post("/{notice_id}/deactivate", response_model=NoticeRead)
def deactivate_notice(notice_id: str, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return NoticeService(EntityStore(db)).deactivate_notice(current_user, notice_id)
