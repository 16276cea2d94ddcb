# campus_aid/backend/app/api/v1/syllabus.py

from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from sqlalchemy.orm import Session

from ...auth import get_current_user
from ...db import get_db
from ...models.user import User
from ...schemas.syllabus import SyllabusRead, SyllabusUpdate
from ...services.entity_store import EntityStore
from ...services.storage import BlobStorage, get_storage
from ...services.syllabus import SyllabusService

router = APIRouter(prefix="/syllabus", tags=["syllabus"])


@router.post("/", response_model=SyllabusRead, status_code=status.HTTP_201_CREATED)
def upload_syllabus(
    title: str = Form(...),
    department: str = Form(...),
    course: str = Form(...),
    semester: str = Form(...),
    subject: str = Form(...),
    extracted_content: Optional[str] = Form(None),
    file: UploadFile = File(...),
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
        "extracted_content": extracted_content,
    }
    return SyllabusService(EntityStore(db), storage).upload_syllabus(
        current_user, data, file.filename, file.file
    )


@router.get("/", response_model=List[SyllabusRead])
def list_syllabus(
    department: Optional[str] = None,
    subject: Optional[str] = None,
    db: Session = Depends(get_db),
    storage: BlobStorage = Depends(get_storage),
    _user: User = Depends(get_current_user),
):
    service = SyllabusService(EntityStore(db), storage)
    if department:
        return service.get_syllabus_content(department, subject)
    if subject:
        return service.get_syllabus_by_subject(subject)
    return service.get_all_syllabus()


@router.get("/{syllabus_id}", response_model=SyllabusRead)
def get_syllabus(
    syllabus_id: str,
    db: Session = Depends(get_db),
    storage: BlobStorage = Depends(get_storage),
    _user: User = Depends(get_current_user),
):
    return SyllabusService(EntityStore(db), storage).get_syllabus_by_id(syllabus_id)


@router.patch("/{syllabus_id}", response_model=SyllabusRead)
def update_syllabus(
    syllabus_id: str,
    payload: SyllabusUpdate,
    db: Session = Depends(get_db),
    storage: BlobStorage = Depends(get_storage),
    current_user: User = Depends(get_current_user),
):
    return SyllabusService(EntityStore(db), storage).update_syllabus(
        current_user, syllabus_id, payload.model_dump(exclude_unset=True)
    )


@router.delete("/{syllabus_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_syllabus(
    syllabus_id: str,
    db: Session = Depends(get_db),
    storage: BlobStorage = Depends(get_storage),
    current_user: User = Depends(get_current_user),
):
    SyllabusService(EntityStore(db), storage).delete_syllabus(current_user, syllabus_id)
