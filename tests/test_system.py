def test_root(client):
    r = client.get("/")
    assert r.status_code == 200
    data = r.json()
    assert data["status"] == "healthy"
    assert "version" in data


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "healthy"}


def test_unknown_route(client):
    assert client.get("/api/v1/nope").status_code == 404


def test_schema_errors_keep_422(client, auth_headers, course_id):
    r = client.post(
        f"/api/v1/courses/{course_id}/quiz/1/submit",
        json={"answers": "all of them"},
        headers=auth_headers,
    )
    assert r.status_code == 422
