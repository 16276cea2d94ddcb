# campus_aid/backend/app/services/users.py

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from ..errors import Conflict, NotFound
from ..models import User
from ..models.enums import UserRole
from .entity_store import EntityStore

logger = logging.getLogger(__name__)

COLLECTION = "users"


class UserService:
    def __init__(self, store: EntityStore):
        self.store = store

    def create_user(self, data: Dict[str, Any]) -> User:
        email = data["email"].strip().lower()
        if self.get_user_by_email(email) is not None:
            raise Conflict(f"A user with email {email} already exists")

        document = dict(data, email=email, role=UserRole(data["role"]).value)
        # Roll numbers only make sense for students
        if document["role"] != UserRole.STUDENT.value:
            document["roll_number"] = None

        user = self.store.create(COLLECTION, document)
        logger.info("Created user %s (%s)", user.email, user.role)
        return user

    def get_user_by_id(self, user_id: str) -> Optional[User]:
        return self.store.get_by_id(COLLECTION, user_id)

    def get_user_by_email(self, email: str) -> Optional[User]:
        users = self.store.get_where(COLLECTION, "email", "==", email.strip().lower())
        return users[0] if users else None

    def update_user(self, user_id: str, updates: Dict[str, Any]) -> User:
        if self.get_user_by_id(user_id) is None:
            raise NotFound(f"User '{user_id}' not found")
        return self.store.update(COLLECTION, user_id, updates)

    def get_users_by_role(self, role: str) -> List[User]:
        return self.store.get_where(COLLECTION, "role", "==", UserRole(role).value)

    def get_users_by_department(self, department: str) -> List[User]:
        return self.store.get_where(COLLECTION, "department", "==", department)

    def get_all_users(self) -> List[User]:
        return self.store.get_all(COLLECTION, order_field="created_at", direction="asc")
