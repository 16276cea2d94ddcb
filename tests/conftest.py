# tests/conftest.py
import os
import tempfile

# Must be set before the app modules are imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="campus_aid_uploads_"))

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from campus_aid.backend.app import models  # noqa: E402,F401
from campus_aid.backend.app.auth import create_access_token, get_password_hash  # noqa: E402
from campus_aid.backend.app.db import Base, SessionLocal, engine  # noqa: E402
from campus_aid.backend.app.main import app  # noqa: E402
from campus_aid.backend.app.services.entity_store import EntityStore  # noqa: E402
from campus_aid.backend.app.services.storage import BlobStorage, get_storage  # noqa: E402
from campus_aid.backend.app.services.users import UserService  # noqa: E402

PASSWORD = "secret123"


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def store(db):
    return EntityStore(db)


@pytest.fixture
def storage(tmp_path):
    return BlobStorage(root=tmp_path / "blobs", base_url="/files")


@pytest.fixture
def make_user(store):
    users = UserService(store)
    counter = {"n": 0}

    def _make(role="student", department=None, roll_number=None, name=None):
        counter["n"] += 1
        return users.create_user(
            {
                "email": f"{role}{counter['n']}@campus.edu",
                "name": name or f"{role.replace('_', ' ').title()} {counter['n']}",
                "role": role,
                "department": department,
                "roll_number": roll_number,
                "password_hash": get_password_hash(PASSWORD),
            }
        )

    return _make


@pytest.fixture
def client(db, storage):
    app.dependency_overrides[get_storage] = lambda: storage
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    def _headers(user):
        return {"Authorization": f"Bearer {create_access_token({'sub': user.id})}"}

    return _headers
