from datetime import datetime, timedelta, timezone

from studybuddy.models.quiz import Quiz
from studybuddy.schemas.quiz import QuizQuestion


def _question(correct=0):
    return QuizQuestion(question="Q?", options=["a", "b", "c", "d"], correct_index=correct)


def test_analytics_for_new_user(client, auth_headers):
    r = client.get("/api/v1/analytics", headers=auth_headers)

    assert r.status_code == 200
    data = r.json()
    assert data["stats"]["totalCourses"] == 0
    assert data["stats"]["totalQuizzes"] == 0
    assert data["stats"]["averageQuizScore"] is None
    assert data["notesPerDay"] == []
    assert data["notesPerCourse"] == []
    assert data["recentNotes"] == []


def test_analytics_counts(client, auth_headers, other_headers, course_id, db_session, llm):
    note_ids = [
        client.post(
            f"/api/v1/courses/{course_id}/notes",
            json={"title": f"Note {i}", "body": "Body long enough to summarize"},
            headers=auth_headers,
        ).json()["id"]
        for i in range(3)
    ]
    client.patch(f"/api/v1/courses/{course_id}/notes/{note_ids[0]}/toggle-reviewed", headers=auth_headers)
    llm.reply("• Summary")
    client.post(f"/api/v1/courses/{course_id}/notes/{note_ids[1]}/summarize", headers=auth_headers)
    client.post(
        f"/api/v1/courses/{course_id}/pdfs",
        files={"pdf": ("a.pdf", b"%PDF-1.4\n%EOF\n", "application/pdf")},
        headers=auth_headers,
    )
    client.post("/api/v1/courses", json={"name": "Empty course"}, headers=auth_headers)

    today = datetime.now(timezone.utc).date()
    for offset, done in ((0, True), (2, False), (30, True)):
        r = client.post(
            "/api/v1/planner",
            json={"title": "Study", "session_date": (today - timedelta(days=offset)).isoformat()},
            headers=auth_headers,
        )
        if done:
            client.patch(f"/api/v1/planner/{r.json()['id']}/toggle", headers=auth_headers)

    user_id = client.get("/api/v1/auth/me", headers=auth_headers).json()["id"]
    db_session.add_all([
        Quiz(user_id=user_id, course_id=course_id, title="Q1", questions=[_question()] * 3, total=3,
             answers=[0, 0, 1], score=2, completed_at=datetime.now(timezone.utc)),
        Quiz(user_id=user_id, course_id=course_id, title="Q2", questions=[_question()] * 2, total=2,
             answers=[0, 0], score=2, completed_at=datetime.now(timezone.utc)),
        Quiz(user_id=user_id, course_id=course_id, title="Q3", questions=[_question()] * 5, total=5),
    ])
    db_session.commit()

    client.post("/api/v1/courses", json={"name": "Not mine"}, headers=other_headers)

    r = client.get("/api/v1/analytics", headers=auth_headers)

    assert r.status_code == 200, r.text
    data = r.json()
    assert data["stats"] == {
        "totalCourses": 2,
        "totalNotes": 3,
        "totalPdfs": 1,
        "totalSummaries": 1,
        "reviewedNotes": 1,
        "totalSessions": 3,
        "completedSessions": 2,
        "sessionsThisWeek": 2,
        "totalQuizzes": 3,
        "completedQuizzes": 2,
        "averageQuizScore": 83.5,
    }
    assert sum(day["count"] for day in data["notesPerDay"]) == 3
    assert data["notesPerCourse"][0] == {"name": "Biology", "noteCount": 3, "pdfCount": 1}
    assert data["notesPerCourse"][1] == {"name": "Empty course", "noteCount": 0, "pdfCount": 0}
    assert len(data["recentNotes"]) == 3
    assert data["recentNotes"][0]["courseName"] == "Biology"
