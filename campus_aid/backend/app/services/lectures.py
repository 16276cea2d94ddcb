# campus_aid/backend/app/services/lectures.py

from __future__ import annotations

import logging
from typing import Any, BinaryIO, Dict, List, Optional, Union

from ..db import utcnow
from ..errors import AuthenticationRequired, NotFound, PermissionDenied
from ..models import Lecture, User
from ..models.enums import UserRole
from .entity_store import EntityStore
from .storage import BlobStorage

logger = logging.getLogger(__name__)

COLLECTION = "lectures"
STORAGE_FOLDER = "lectures"

# Roles that upload and manage course content (lectures and syllabus files)
CONTENT_MANAGER_ROLES = {
    UserRole.TEACHING_STAFF.value,
    UserRole.TUTOR.value,
    UserRole.HOD.value,
    UserRole.ADMIN.value,
}


def require_content_manager(user: Optional[User]) -> None:
    if user is None:
        raise AuthenticationRequired("Sign in to manage course content")
    if user.role not in CONTENT_MANAGER_ROLES:
        raise PermissionDenied(f"Role '{user.role}' cannot manage course content")


class LectureService:
    def __init__(self, store: EntityStore, storage: BlobStorage):
        self.store = store
        self.storage = storage

    def upload_lecture(
        self,
        uploader: Optional[User],
        data: Dict[str, Any],
        filename: str,
        video: Union[bytes, BinaryIO],
    ) -> Lecture:
        """
        Store the video, then the lecture record. New lectures start
        unpublished. If the record cannot be written the stored video is
        removed again.
        """
        require_content_manager(uploader)

        path = self.storage.generate_path(STORAGE_FOLDER, filename)
        video_url = self.storage.upload(path, video)

        document = dict(
            data,
            video_url=video_url,
            uploaded_by=uploader.id,
            uploaded_at=utcnow(),
            is_published=False,
        )
        try:
            lecture = self.store.create(COLLECTION, document)
        except Exception:
            self.store.rollback()
            try:
                self.storage.delete(path)
            except (NotFound, OSError):
                logger.exception("Lecture record failed and orphaned upload %s could not be removed", path)
            else:
                logger.error("Lecture record failed; removed orphaned upload %s", path)
            raise

        logger.info("Lecture %s uploaded by %s", lecture.id, uploader.id)
        return lecture

    def get_lecture_by_id(self, lecture_id: str) -> Lecture:
        lecture = self.store.get_by_id(COLLECTION, lecture_id)
        if lecture is None:
            raise NotFound(f"Lecture '{lecture_id}' not found")
        return lecture

    def get_lectures_by_department(self, department: str) -> List[Lecture]:
        """Published lectures only."""
        lectures = self.store.get_ordered_where(
            COLLECTION, "department", "==", department, "uploaded_at"
        )
        return [lecture for lecture in lectures if lecture.is_published]

    def get_all_lectures(self) -> List[Lecture]:
        return self.store.get_all(COLLECTION, order_field="uploaded_at")

    def update_lecture(self, user: Optional[User], lecture_id: str, updates: Dict[str, Any]) -> Lecture:
        require_content_manager(user)
        self.get_lecture_by_id(lecture_id)
        return self.store.update(COLLECTION, lecture_id, updates)

    def delete_lecture(self, user: Optional[User], lecture_id: str) -> None:
        require_content_manager(user)
        lecture = self.get_lecture_by_id(lecture_id)

        path = self.storage.path_from_url(lecture.video_url)
        if path:
            try:
                self.storage.delete(path)
            except NotFound:
                logger.warning("Video for lecture %s was already gone (%s)", lecture_id, path)

        self.store.delete(COLLECTION, lecture_id)
        logger.info("Lecture %s deleted by %s", lecture_id, user.id)

    def publish_lecture(self, user: Optional[User], lecture_id: str) -> Lecture:
        return self.update_lecture(user, lecture_id, {"is_published": True})

    def unpublish_lecture(self, user: Optional[User], lecture_id: str) -> Lecture:
        return self.update_lecture(user, lecture_id, {"is_published": False})
