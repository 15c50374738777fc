def create_session(client, headers, **fields):
    payload = {"title": "Study", "session_date": "2026-10-20"}
    payload.update(fields)
    r = client.post("/api/v1/planner", json=payload, headers=headers)
    assert r.status_code == 201, r.text
    return r.json()


def test_create_session_with_course(client, auth_headers, course_id):
    session = create_session(
        client, auth_headers,
        title="Revise genetics",
        course_id=course_id,
        start_time="09:00",
        end_time="10:30",
    )

    assert session["courseName"] == "Biology"
    assert session["completed"] is False
    assert session["start_time"] == "09:00"


def test_create_session_requires_title_and_date(client, auth_headers):
    r = client.post("/api/v1/planner", json={"title": "No date"}, headers=auth_headers)
    assert r.status_code == 400
    assert r.json()["detail"] == "Title and date are required"

    r = client.post("/api/v1/planner", json={"session_date": "2026-10-20", "title": " "}, headers=auth_headers)
    assert r.status_code == 400


def test_create_session_for_foreign_course(client, other_headers, course_id):
    r = client.post(
        "/api/v1/planner",
        json={"title": "Borrowed", "session_date": "2026-10-20", "course_id": course_id},
        headers=other_headers,
    )
    assert r.status_code == 404


def test_list_sessions_ordered_and_filtered_by_month(client, auth_headers):
    late = create_session(client, auth_headers, title="Late", session_date="2026-10-21", start_time="18:00")
    early = create_session(client, auth_headers, title="Early", session_date="2026-10-21", start_time="08:00")
    first = create_session(client, auth_headers, title="First", session_date="2026-10-02")
    november = create_session(client, auth_headers, title="Next month", session_date="2026-11-01")

    r = client.get("/api/v1/planner", headers=auth_headers)
    assert [s["id"] for s in r.json()] == [first["id"], early["id"], late["id"], november["id"]]

    r = client.get("/api/v1/planner", params={"month": 10, "year": 2026}, headers=auth_headers)
    assert [s["id"] for s in r.json()] == [first["id"], early["id"], late["id"]]


def test_sessions_are_private(client, auth_headers, other_headers):
    session = create_session(client, auth_headers)

    assert client.get("/api/v1/planner", headers=other_headers).json() == []
    r = client.put(f"/api/v1/planner/{session['id']}", json={"title": "Hijack"}, headers=other_headers)
    assert r.status_code == 404
    assert r.json()["detail"] == "Session not found"
    assert client.delete(f"/api/v1/planner/{session['id']}", headers=other_headers).status_code == 404


def test_partial_update_keeps_other_fields(client, auth_headers, course_id):
    session = create_session(client, auth_headers, description="Chapter 3", course_id=course_id)

    r = client.put(
        f"/api/v1/planner/{session['id']}",
        json={"title": "Chapter 3 and 4", "completed": True},
        headers=auth_headers,
    )

    assert r.status_code == 200
    updated = r.json()
    assert updated["title"] == "Chapter 3 and 4"
    assert updated["completed"] is True
    assert updated["description"] == "Chapter 3"
    assert updated["session_date"] == "2026-10-20"
    assert updated["course_id"] == course_id


def test_update_can_detach_course(client, auth_headers, course_id):
    session = create_session(client, auth_headers, course_id=course_id)

    r = client.put(f"/api/v1/planner/{session['id']}", json={"course_id": None}, headers=auth_headers)

    assert r.json()["course_id"] is None
    assert r.json()["courseName"] is None


def test_update_rejects_blank_title(client, auth_headers):
    session = create_session(client, auth_headers)

    r = client.put(f"/api/v1/planner/{session['id']}", json={"title": ""}, headers=auth_headers)

    assert r.status_code == 400


def test_toggle_and_delete(client, auth_headers):
    session = create_session(client, auth_headers)

    r = client.patch(f"/api/v1/planner/{session['id']}/toggle", headers=auth_headers)
    assert r.json()["completed"] is True
    r = client.patch(f"/api/v1/planner/{session['id']}/toggle", headers=auth_headers)
    assert r.json()["completed"] is False

    assert client.delete(f"/api/v1/planner/{session['id']}", headers=auth_headers).status_code == 200
    assert client.get("/api/v1/planner", headers=auth_headers).json() == []
