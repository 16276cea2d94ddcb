# campus_aid/backend/app/api/v1/lectures.py

from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from sqlalchemy.orm import Session

from ...auth import get_current_user
from ...db import get_db
from ...errors import NotFound
from ...models.user import User
from ...schemas.lecture import LectureRead, LectureUpdate
from ...services.entity_store import EntityStore
from ...services.lectures import CONTENT_MANAGER_ROLES, LectureService
from ...services.storage import BlobStorage, get_storage

router = APIRouter(prefix="/lectures", tags=["lectures"])


@router.post("/", response_model=LectureRead, status_code=status.HTTP_201_CREATED)
def upload_lecture(
    title: str = Form(...),
    department: str = Form(...),
    course: str = Form(...),
    semester: str = Form(...),
    subject: str = Form(...),
    description: Optional[str] = Form(None),
    topic: Optional[str] = Form(None),
    duration: Optional[int] = Form(None),
    video: UploadFile = File(...),
    db: Session = Depends(get_db),
    storage: BlobStorage = Depends(get_storage),
    current_user: User = Depends(get_current_user),
):
    data = {
        "title": title,
        "department": department,
        "course": course,
        "semester": semester,
        "subject": subject,
        "description": description,
        "topic": topic,
        "duration": duration,
    }
    return LectureService(EntityStore(db), storage).upload_lecture(
        current_user, data, video.filename, video.file
    )


@router.get("/", response_model=List[LectureRead])
def list_lectures(
    department: Optional[str] = None,
    db: Session = Depends(get_db),
    storage: BlobStorage = Depends(get_storage),
    current_user: User = Depends(get_current_user),
):
    """Published lectures; content managers also see drafts when not filtering by department."""
    service = LectureService(EntityStore(db), storage)
    if department:
        return service.get_lectures_by_department(department)
    lectures = service.get_all_lectures()
    if current_user.role in CONTENT_MANAGER_ROLES:
        return lectures
    return [lecture for lecture in lectures if lecture.is_published]


@router.get("/{lecture_id}", response_model=LectureRead)
def get_lecture(
    lecture_id: str,
    db: Session = Depends(get_db),
    storage: BlobStorage = Depends(get_storage),
    current_user: User = Depends(get_current_user),
):
    lecture = LectureService(EntityStore(db), storage).get_lecture_by_id(lecture_id)
    if not lecture.is_published and current_user.role not in CONTENT_MANAGER_ROLES:
        raise NotFound(f"Lecture '{lecture_id}' not found")
    return lecture


@router.patch("/{lecture_id}", response_model=LectureRead)
def update_lecture(
    lecture_id: str,
    payload: LectureUpdate,
    db: Session = Depends(get_db),
    storage: BlobStorage = Depends(get_storage),
    current_user: User = Depends(get_current_user),
):
    return LectureService(EntityStore(db), storage).update_lecture(
        current_user, lecture_id, payload.model_dump(exclude_unset=True)
    )


@router.delete("/{lecture_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_lecture(
    lecture_id: str,
    db: Session = Depends(get_db),
    storage: BlobStorage = Depends(get_storage),
    current_user: User = Depends(get_current_user),
):
    LectureService(EntityStore(db), storage).delete_lecture(current_user, lecture_id)


@router.post("/{lecture_id}/publish", response_model=LectureRead)
def publish_lecture(
    lecture_id: str,
    db: Session = Depends(get_db),
    storage: BlobStorage = Depends(get_storage),
    current_user: User = Depends(get_current_user),
):
    return LectureService(EntityStore(db), storage).publish_lecture(current_user, lecture_id)


@router.post("/{lecture_id}/unpublish", response_model=LectureRead)
def unpublish_lecture(
    lecture_id: str,
    db: Session = Depends(get_db),
    storage: BlobStorage = Depends(get_storage),
    current_user: User = Depends(get_current_user),
):
    return LectureService(EntityStore(db), storage).unpublish_lecture(current_user, lecture_id)
