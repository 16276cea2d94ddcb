# tests/test_notices_lectures.py

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.exc import IntegrityError

from campus_aid.backend.app.db import utcnow
from campus_aid.backend.app.errors import AuthenticationRequired, NotFound, PermissionDenied, ValidationFailure
from campus_aid.backend.app.services.lectures import LectureService
from campus_aid.backend.app.services.notices import NoticeService
from campus_aid.backend.app.services.syllabus import SyllabusService


def _notice_data(**overrides):
    data = {
        "title": "Exam schedule",
        "content": "Mid-terms start Monday",
        "category": "academic",
        "target_roles": ["student"],
    }
    data.update(overrides)
    return data


# Notices

def test_only_publishers_can_create(store, make_user):
    notices = NoticeService(store)
    with pytest.raises(AuthenticationRequired):
        notices.create_notice(None, _notice_data())
    with pytest.raises(PermissionDenied):
        notices.create_notice(make_user("student"), _notice_data())

    notice = notices.create_notice(make_user("teaching_staff"), _notice_data())
    assert notice.is_active
    assert notice.target_roles == ["student"]


def test_notice_needs_a_target_role(store, make_user):
    with pytest.raises(ValidationFailure):
        NoticeService(store).create_notice(make_user("admin"), _notice_data(target_roles=[]))


def test_notices_for_role_filters_targets_expiry_and_active(store, make_user):
    notices = NoticeService(store)
    admin = make_user("admin")
    now = utcnow()

    for_students = notices.create_notice(admin, _notice_data(title="students"))
    notices.create_notice(admin, _notice_data(title="tutors", target_roles=["tutor"]))
    notices.create_notice(admin, _notice_data(title="expired", expires_at=now - timedelta(days=1)))
    hidden = notices.create_notice(admin, _notice_data(title="hidden"))
    notices.deactivate_notice(admin, hidden.id)
    # timezone-aware input is stored as naive UTC
    future = notices.create_notice(
        admin,
        _notice_data(title="future", expires_at=datetime.now(timezone.utc) + timedelta(days=3)),
    )
    assert future.expires_at.tzinfo is None

    titles = {n.title for n in notices.get_notices_for_role("student", now=now)}
    assert titles == {"students", "future"}
    assert for_students.id in {n.id for n in notices.get_all_notices()}
    assert hidden.id not in {n.id for n in notices.get_all_notices()}


def test_notice_update_and_delete(store, make_user):
    notices = NoticeService(store)
    admin = make_user("admin")
    notice = notices.create_notice(admin, _notice_data())

    updated = notices.update_notice(admin, notice.id, {"title": "Updated", "target_roles": ["tutor"]})
    assert updated.title == "Updated"
    assert updated.target_roles == ["tutor"]

    notices.delete_notice(admin, notice.id)
    with pytest.raises(NotFound):
        notices.get_notice_by_id(notice.id)


# Lectures

def _lecture_data():
    return {
        "title": "Binary Trees",
        "department": "CSE",
        "course": "B.Tech",
        "semester": "3",
        "subject": "Data Structures",
    }


def test_upload_lecture_starts_unpublished(store, storage, make_user):
    lectures = LectureService(store, storage)
    lecture = lectures.upload_lecture(make_user("teaching_staff"), _lecture_data(), "trees.mp4", b"video")

    assert not lecture.is_published
    assert lecture.video_url.startswith("/files/lectures/")
    path = storage.path_from_url(lecture.video_url)
    assert (storage.root / path).read_bytes() == b"video"
    assert lectures.get_lectures_by_department("CSE") == []

    lectures.publish_lecture(make_user("hod"), lecture.id)
    assert [l.id for l in lectures.get_lectures_by_department("CSE")] == [lecture.id]


def test_students_cannot_upload(store, storage, make_user):
    with pytest.raises(PermissionDenied):
        LectureService(store, storage).upload_lecture(make_user("student"), _lecture_data(), "x.mp4", b"v")
    assert not list(storage.root.rglob("*.mp4"))


def test_failed_record_removes_uploaded_video(store, storage, make_user):
    data = _lecture_data()
    data["department"] = None  # not nullable

    with pytest.raises(IntegrityError):
        LectureService(store, storage).upload_lecture(make_user("tutor"), data, "orphan.mp4", b"v")
    assert not list(storage.root.rglob("*orphan.mp4"))


def test_failed_cleanup_keeps_original_error(store, storage, make_user, monkeypatch):
    def broken_delete(path):
        raise OSError("disk unavailable")

    monkeypatch.setattr(storage, "delete", broken_delete)
    data = _lecture_data()
    data["department"] = None

    with pytest.raises(IntegrityError):
        LectureService(store, storage).upload_lecture(make_user("tutor"), data, "orphan.mp4", b"v")

    syllabus = dict(data, title="Orphan syllabus")
    with pytest.raises(IntegrityError):
        SyllabusService(store, storage).upload_syllabus(make_user("tutor"), syllabus, "orphan.pdf", b"%PDF")


def test_delete_lecture_removes_video(store, storage, make_user):
    lectures = LectureService(store, storage)
    staff = make_user("teaching_staff")
    lecture = lectures.upload_lecture(staff, _lecture_data(), "trees.mp4", b"video")
    path = storage.path_from_url(lecture.video_url)

    lectures.delete_lecture(staff, lecture.id)
    assert not (storage.root / path).exists()
    with pytest.raises(NotFound):
        lectures.get_lecture_by_id(lecture.id)


# Syllabus

def test_syllabus_upload_and_lookup(store, storage, make_user):
    service = SyllabusService(store, storage)
    staff = make_user("teaching_staff")
    data = dict(_lecture_data(), title="DS syllabus")
    ds = service.upload_syllabus(staff, data, "ds.pdf", b"%PDF")
    service.upload_syllabus(staff, dict(data, subject="Networks"), "cn.pdf", b"%PDF")
    service.upload_syllabus(staff, dict(data, department="ECE"), "ece.pdf", b"%PDF")

    assert len(service.get_syllabus_by_department("CSE")) == 2
    assert [s.id for s in service.get_syllabus_content("CSE", "Data Structures")] == [ds.id]
    assert len(service.get_syllabus_by_subject("Data Structures")) == 2

    service.delete_syllabus(staff, ds.id)
    assert len(service.get_all_syllabus()) == 2
