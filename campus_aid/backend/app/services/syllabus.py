# campus_aid/backend/app/services/syllabus.py

from __future__ import annotations

import logging
from typing import Any, BinaryIO, Dict, List, Optional, Union

from ..db import utcnow
from ..errors import NotFound
from ..models import Syllabus, User
from .entity_store import EntityStore
from .lectures import require_content_manager
from .storage import BlobStorage

logger = logging.getLogger(__name__)

COLLECTION = "syllabus"
STORAGE_FOLDER = "syllabus"


class SyllabusService:
    def __init__(self, store: EntityStore, storage: BlobStorage):
        self.store = store
        self.storage = storage

    def upload_syllabus(
        self,
        uploader: Optional[User],
        data: Dict[str, Any],
        filename: str,
        file: Union[bytes, BinaryIO],
    ) -> Syllabus:
        require_content_manager(uploader)

        path = self.storage.generate_path(STORAGE_FOLDER, filename)
        file_url = self.storage.upload(path, file)

        document = dict(data, file_url=file_url, uploaded_by=uploader.id, uploaded_at=utcnow())
        try:
            syllabus = self.store.create(COLLECTION, document)
        except Exception:
            self.store.rollback()
            try:
                self.storage.delete(path)
            except (NotFound, OSError):
                logger.exception("Syllabus record failed and orphaned upload %s could not be removed", path)
            else:
                logger.error("Syllabus record failed; removed orphaned upload %s", path)
            raise

        logger.info("Syllabus %s (%s) uploaded by %s", syllabus.id, syllabus.subject, uploader.id)
        return syllabus

    def get_syllabus_by_id(self, syllabus_id: str) -> Syllabus:
        syllabus = self.store.get_by_id(COLLECTION, syllabus_id)
        if syllabus is None:
            raise NotFound(f"Syllabus '{syllabus_id}' not found")
        return syllabus

    def get_syllabus_by_department(self, department: str) -> List[Syllabus]:
        return self.store.get_where(COLLECTION, "department", "==", department)

    def get_syllabus_by_subject(self, subject: str) -> List[Syllabus]:
        return self.store.get_where(COLLECTION, "subject", "==", subject)

    def get_syllabus_content(self, department: str, subject: Optional[str] = None) -> List[Syllabus]:
        """Uploaded syllabus for a department, narrowed to one subject when given."""
        if subject:
            return [s for s in self.get_syllabus_by_subject(subject) if s.department == department]
        return self.get_syllabus_by_department(department)

    def get_all_syllabus(self) -> List[Syllabus]:
        return self.store.get_all(COLLECTION, order_field="uploaded_at")

    def update_syllabus(self, user: Optional[User], syllabus_id: str, updates: Dict[str, Any]) -> Syllabus:
        require_content_manager(user)
        self.get_syllabus_by_id(syllabus_id)
        return self.store.update(COLLECTION, syllabus_id, updates)

    def delete_syllabus(self, user: Optional[User], syllabus_id: str) -> None:
        require_content_manager(user)
        syllabus = self.get_syllabus_by_id(syllabus_id)

        path = self.storage.path_from_url(syllabus.file_url)
        if path:
            try:
                self.storage.delete(path)
            except NotFound:
                logger.warning("File for syllabus %s was already gone (%s)", syllabus_id, path)

        self.store.delete(COLLECTION, syllabus_id)
        logger.info("Syllabus %s deleted by %s", syllabus_id, user.id)
