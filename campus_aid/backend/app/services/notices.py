# campus_aid/backend/app/services/notices.py

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..db import as_utc_naive, utcnow
from ..errors import AuthenticationRequired, NotFound, PermissionDenied, ValidationFailure
from ..models import Notice, User
from ..models.enums import UserRole
from .entity_store import EntityStore

logger = logging.getLogger(__name__)

COLLECTION = "notices"

PUBLISHER_ROLES = {
    UserRole.TEACHING_STAFF.value,
    UserRole.DEPARTMENT_STAFF.value,
    UserRole.HOD.value,
    UserRole.ADMIN.value,
}


def _is_live(notice: Notice, now: datetime) -> bool:
    return notice.expires_at is None or notice.expires_at > now


class NoticeService:
    def __init__(self, store: EntityStore):
        self.store = store

    def _require_publisher(self, user: Optional[User]) -> None:
        if user is None:
            raise AuthenticationRequired("Sign in to manage notices")
        if user.role not in PUBLISHER_ROLES:
            raise PermissionDenied(f"Role '{user.role}' cannot publish notices")

    def create_notice(self, publisher: Optional[User], data: Dict[str, Any]) -> Notice:
        self._require_publisher(publisher)
        target_roles = [UserRole(r).value for r in data.get("target_roles") or []]
        if not target_roles:
            raise ValidationFailure("A notice needs at least one target role")

        document = dict(
            data,
            target_roles=target_roles,
            expires_at=as_utc_naive(data.get("expires_at")),
            published_by=publisher.id,
            published_at=utcnow(),
            is_active=True,
        )
        notice = self.store.create(COLLECTION, document)
        logger.info("Notice %s published by %s for %s", notice.id, publisher.id, target_roles)
        return notice

    def get_notice_by_id(self, notice_id: str) -> Notice:
        notice = self.store.get_by_id(COLLECTION, notice_id)
        if notice is None:
            raise NotFound(f"Notice '{notice_id}' not found")
        return notice

    def get_all_notices(self) -> List[Notice]:
        """Active notices, newest first."""
        return self.store.get_ordered_where(COLLECTION, "is_active", "==", True, "published_at")

    def get_notices_for_role(self, role: str, now: Optional[datetime] = None) -> List[Notice]:
        """Active, unexpired notices addressed to `role`, newest first."""
        role = UserRole(role).value
        now = now or utcnow()
        return [
            n for n in self.get_all_notices()
            if role in (n.target_roles or []) and _is_live(n, now)
        ]

    def update_notice(self, user: Optional[User], notice_id: str, updates: Dict[str, Any]) -> Notice:
        self._require_publisher(user)
        self.get_notice_by_id(notice_id)
        if "target_roles" in updates and updates["target_roles"] is not None:
            updates = dict(updates, target_roles=[UserRole(r).value for r in updates["target_roles"]])
        if updates.get("expires_at") is not None:
            updates = dict(updates, expires_at=as_utc_naive(updates["expires_at"]))
        return self.store.update(COLLECTION, notice_id, updates)

    def delete_notice(self, user: Optional[User], notice_id: str) -> None:
        self._require_publisher(user)
        self.store.delete(COLLECTION, notice_id)
        logger.info("Notice %s deleted by %s", notice_id, user.id)

    def activate_notice(self, user: Optional[User], notice_id: str) -> Notice:
        return self.update_notice(user, notice_id, {"is_active": True})

    def deactivate_notice(self, user: Optional[User], notice_id: str) -> Notice:
        return self.update_notice(user, notice_id, {"is_active": False})
