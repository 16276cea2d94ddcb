# tests/test_api.py

from campus_aid.backend.app import config

API = "/api/v1"


def _ticket_body(**overrides):
    body = {
        "title": "Fan not working",
        "description": "Ceiling fan in room 204 stopped",
        "category": "hostel_issue",
        "issue_type": "room fan",
    }
    body.update(overrides)
    return body


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_admin_is_seeded_and_can_log_in(client):
    r = client.post(f"{API}/auth/login", json={"email": config.ADMIN_EMAIL, "password": config.ADMIN_PASSWORD})
    assert r.status_code == 200
    body = r.json()
    assert body["user"]["role"] == "admin"

    me = client.get(f"{API}/auth/me", headers={"Authorization": f"Bearer {body['access_token']}"})
    assert me.json()["email"] == config.ADMIN_EMAIL


def test_signup_login_and_duplicate(client):
    payload = {
        "email": "new.student@campus.edu",
        "password": "pass1234",
        "name": "New Student",
        "role": "student",
        "roll_number": "21CS042",
    }
    r = client.post(f"{API}/auth/signup", json=payload)
    assert r.status_code == 201
    assert r.json()["user"]["roll_number"] == "21CS042"

    assert client.post(f"{API}/auth/signup", json=payload).status_code == 409

    bad = client.post(f"{API}/auth/login", json={"email": payload["email"], "password": "wrong"})
    assert bad.status_code == 401
    assert bad.json()["detail"] == "Invalid email or password"


def test_admin_cannot_self_register(client):
    r = client.post(
        f"{API}/auth/signup",
        json={"email": "boss@campus.edu", "password": "pass1234", "name": "Boss", "role": "admin"},
    )
    assert r.status_code == 403


def test_requests_without_token_are_rejected(client):
    assert client.get(f"{API}/tickets/").status_code == 401
    r = client.get(f"{API}/tickets/", headers={"Authorization": "Bearer not-a-token"})
    assert r.status_code == 401


def test_ticket_flow(client, make_user, auth_headers):
    student = make_user("student")
    warden = make_user("hostel_warden")
    transport = make_user("transport_officer")

    r = client.post(f"{API}/tickets/", json=_ticket_body(), headers=auth_headers(student))
    assert r.status_code == 201
    ticket = r.json()
    assert ticket["ticket_number"].startswith("TKT")
    assert ticket["routing_department"] == "hostel"
    assert ticket["status"] == "pending"
    assert len(ticket["activity_log"]) == 1

    mine = client.get(f"{API}/tickets/mine", headers=auth_headers(student)).json()
    assert [t["id"] for t in mine] == [ticket["id"]]

    actions = client.get(f"{API}/tickets/{ticket['id']}/actions", headers=auth_headers(warden)).json()
    assert actions["can_handle"] is True
    assert actions["available_actions"] == ["in_progress"]

    assert client.get(f"{API}/tickets/{ticket['id']}", headers=auth_headers(transport)).status_code == 403

    r = client.patch(
        f"{API}/tickets/{ticket['id']}/status",
        json={"status": "resolved"},
        headers=auth_headers(warden),
    )
    assert r.status_code == 403

    r = client.patch(
        f"{API}/tickets/{ticket['id']}/status",
        json={"status": "in_progress", "notes": "Electrician booked"},
        headers=auth_headers(warden),
    )
    assert r.status_code == 200
    log = r.json()["activity_log"]
    assert log[-1]["action"] == "Status changed to in_progress: Electrician booked"
    assert log[-1]["performed_by_role"] == "hostel_warden"

    listed = client.get(f"{API}/tickets/?status=in_progress", headers=auth_headers(warden)).json()
    assert [t["id"] for t in listed] == [ticket["id"]]


def test_assignee_sees_actions_for_general_ticket(client, make_user, auth_headers):
    student = make_user("student")
    staff = make_user("department_staff")
    body = _ticket_body(category="service_request", issue_type="id card reissue")
    ticket = client.post(f"{API}/tickets/", json=body, headers=auth_headers(student)).json()
    assert ticket["routing_department"] == "general"

    actions = client.get(f"{API}/tickets/{ticket['id']}/actions", headers=auth_headers(staff)).json()
    assert actions["can_handle"] is True
    assert actions["available_actions"] == ["in_progress"]


def test_missing_ticket_is_404(client, make_user, auth_headers):
    r = client.get(f"{API}/tickets/nope", headers=auth_headers(make_user("admin")))
    assert r.status_code == 404


def test_invalid_ticket_body_is_422(client, make_user, auth_headers):
    r = client.post(
        f"{API}/tickets/",
        json=_ticket_body(category="not-a-category"),
        headers=auth_headers(make_user("student")),
    )
    assert r.status_code == 422


def test_attachment_upload_is_stored(client, make_user, auth_headers, storage):
    student = make_user("student")
    r = client.post(
        f"{API}/tickets/attachments",
        files={"file": ("photo.jpg", b"jpegbytes", "image/jpeg")},
        headers=auth_headers(student),
    )
    assert r.status_code == 201
    url = r.json()["url"]
    assert url.startswith(f"/files/attachments/{student.id}/")
    assert (storage.root / storage.path_from_url(url)).read_bytes() == b"jpegbytes"


def test_routing_preview(client, make_user, auth_headers):
    r = client.post(
        f"{API}/routing/preview",
        json={"category": "security_issue", "issue_type": "unknown person near gate"},
        headers=auth_headers(make_user("student")),
    )
    assert r.status_code == 200
    body = r.json()
    assert body["department"] == "security"
    assert body["priority"] == "high"
    assert body["category_priority"] == "urgent"
    assert body["escalation_hours"] == 1


def test_dashboard_for_student(client, make_user, auth_headers):
    student = make_user("student")
    client.post(f"{API}/tickets/", json=_ticket_body(), headers=auth_headers(student))

    body = client.get(f"{API}/dashboard/", headers=auth_headers(student)).json()
    assert body["role"] == "student"
    modules = {m["id"]: m for m in body["modules"]}
    assert modules["my-tickets"]["count"] == 1
    insights = {i["label"]: i["value"] for i in body["insights"]}
    assert insights == {"Total Tickets": 1, "Pending": 1, "In Progress": 0, "Resolved": 0}


def test_users_listing_is_admin_only(client, make_user, auth_headers):
    make_user("tutor", department="CSE")
    make_user("tutor", department="ECE")

    assert client.get(f"{API}/users/", headers=auth_headers(make_user("student"))).status_code == 403

    admin = make_user("admin")
    tutors = client.get(f"{API}/users/?role=tutor&department=CSE", headers=auth_headers(admin)).json()
    assert [u["department"] for u in tutors] == ["CSE"]


def test_notices_api(client, make_user, auth_headers):
    staff = make_user("teaching_staff")
    student = make_user("student")
    body = {"title": "Lab closed", "content": "Friday", "category": "lab", "target_roles": ["student"]}

    assert client.post(f"{API}/notices/", json=body, headers=auth_headers(student)).status_code == 403
    r = client.post(f"{API}/notices/", json=body, headers=auth_headers(staff))
    assert r.status_code == 201
    notice_id = r.json()["id"]

    assert [n["id"] for n in client.get(f"{API}/notices/", headers=auth_headers(student)).json()] == [notice_id]

    client.post(f"{API}/notices/{notice_id}/deactivate", headers=auth_headers(staff))
    assert client.get(f"{API}/notices/", headers=auth_headers(student)).json() == []


def test_lecture_upload_and_publish(client, make_user, auth_headers):
    staff = make_user("teaching_staff")
    student = make_user("student")
    form = {"title": "Heaps", "department": "CSE", "course": "B.Tech", "semester": "3", "subject": "DS"}

    r = client.post(
        f"{API}/lectures/",
        data=form,
        files={"video": ("heaps.mp4", b"mp4", "video/mp4")},
        headers=auth_headers(staff),
    )
    assert r.status_code == 201
    lecture = r.json()
    assert lecture["is_published"] is False

    assert client.get(f"{API}/lectures/{lecture['id']}", headers=auth_headers(student)).status_code == 404
    client.post(f"{API}/lectures/{lecture['id']}/publish", headers=auth_headers(staff))
    listed = client.get(f"{API}/lectures/?department=CSE", headers=auth_headers(student)).json()
    assert [l["id"] for l in listed] == [lecture["id"]]

    assert lecture["video_url"].startswith("/files/lectures/")


def test_uploaded_files_are_served(client):
    target = config.UPLOAD_DIR / "served" / "hello.txt"
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(b"hello")

    r = client.get(f"{config.FILES_BASE_URL}/served/hello.txt")
    assert r.status_code == 200
    assert r.content == b"hello"


def test_locations_and_qr_scan(client, make_user, auth_headers):
    admin = make_user("admin")
    student = make_user("student")
    body = {"name": "Library", "type": "academic", "latitude": 11.0, "longitude": 76.9}

    assert client.post(f"{API}/locations/", json=body, headers=auth_headers(student)).status_code == 403
    location = client.post(f"{API}/locations/", json=body, headers=auth_headers(admin)).json()

    code = client.post(f"{API}/qr-codes/", json={"location_id": location["id"]}, headers=auth_headers(admin)).json()

    scanned = client.post(f"{API}/qr-codes/scan", json={"data": code["qr_code"]}, headers=auth_headers(student))
    assert scanned.json()["id"] == location["id"]

    payload = client.get(f"{API}/locations/{location['id']}/qr-data", headers=auth_headers(student)).json()
    assert payload["location_id"] == location["id"]

    client.post(f"{API}/qr-codes/{code['id']}/deactivate", headers=auth_headers(admin))
    r = client.post(f"{API}/qr-codes/scan", json={"data": code["qr_code"]}, headers=auth_headers(student))
    assert r.status_code == 404


def test_assistants_save_history(client, make_user, auth_headers):
    student = make_user("student", department="CSE")

    campus = client.post(f"{API}/assistant/campus", json={"query": "cafeteria hours"}, headers=auth_headers(student))
    assert campus.json()["type"] == "facility"

    tutor = client.post(
        f"{API}/assistant/teacher",
        json={"query": "explain stacks", "subject": "Data Structures"},
        headers=auth_headers(student),
    )
    assert tutor.json()["mode"] == "academic"
    assert tutor.json()["confidence"] == 0.9

    history = client.get(f"{API}/assistant/history", headers=auth_headers(student)).json()
    assert {h["assistant"] for h in history} == {"campus", "teacher"}

    faqs = client.get(f"{API}/assistant/faqs").json()
    assert len(faqs) == 4
