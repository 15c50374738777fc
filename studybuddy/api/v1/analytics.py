"""
Dashboard analytics for the current user.
"""
from collections import Counter
from datetime import date, datetime, time, timedelta, timezone
from typing import Any, Optional

from fastapi import APIRouter, Depends
from sqlalchemy import func
from sqlalchemy.orm import Session

from studybuddy.core.dependencies import get_current_user, get_db
from studybuddy.models.course import Course, Note, Pdf
from studybuddy.models.planner import StudySession
from studybuddy.models.quiz import Quiz
from studybuddy.models.user import User
from studybuddy.schemas.analytics import AnalyticsResponse
from studybuddy.services.quiz_service import percentage

router = APIRouter()

ACTIVITY_WINDOW_DAYS = 7
TOP_COURSES = 10
RECENT_NOTES = 10


def _window_start(today: Optional[date] = None) -> date:
    today = today or datetime.now(timezone.utc).date()
    return today - timedelta(days=ACTIVITY_WINDOW_DAYS - 1)


@router.get("", response_model=AnalyticsResponse)
def get_analytics(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    """
    Collect counters, activity over the last week and recent notes.
    """
    user_notes = db.query(Note).join(Course).filter(Course.user_id == current_user.id)
    user_sessions = db.query(StudySession).filter(StudySession.user_id == current_user.id)
    since = _window_start()

    # Quizzes
    quizzes = db.query(Quiz).filter(Quiz.user_id == current_user.id).all()
    completed = [q for q in quizzes if q.is_completed]
    average_score = None
    if completed:
        scores = [percentage(q.score or 0, q.total) for q in completed]
        average_score = round(sum(scores) / len(scores), 1)

    stats = {
        "totalCourses": db.query(Course).filter(Course.user_id == current_user.id).count(),
        "totalNotes": user_notes.count(),
        "totalPdfs": db.query(Pdf).join(Course).filter(Course.user_id == current_user.id).count(),
        "totalSummaries": user_notes.filter(Note.summary.isnot(None), Note.summary != "").count(),
        "reviewedNotes": user_notes.filter(Note.is_reviewed.is_(True)).count(),
        "totalSessions": user_sessions.count(),
        "completedSessions": user_sessions.filter(StudySession.completed.is_(True)).count(),
        "sessionsThisWeek": user_sessions.filter(StudySession.session_date >= since.isoformat()).count(),
        "totalQuizzes": len(quizzes),
        "completedQuizzes": len(completed),
        "averageQuizScore": average_score,
    }

    # Notes per day
    recent_dates = [
        created.date().isoformat()
        for (created,) in user_notes.with_entities(Note.created_at)
        .filter(Note.created_at >= datetime.combine(since, time.min))
        .all()
        if created is not None
    ]
    notes_per_day = [
        {"date": day, "count": count}
        for day, count in sorted(Counter(recent_dates).items())
    ]

    # Notes per course
    note_count = (
        db.query(func.count(Note.id)).filter(Note.course_id == Course.id).correlate(Course).scalar_subquery()
    )
    pdf_count = (
        db.query(func.count(Pdf.id)).filter(Pdf.course_id == Course.id).correlate(Course).scalar_subquery()
    )
    course_rows = (
        db.query(Course.name, note_count.label("note_count"), pdf_count.label("pdf_count"))
        .filter(Course.user_id == current_user.id)
        .order_by(note_count.desc(), Course.id.asc())
        .limit(TOP_COURSES)
        .all()
    )
    notes_per_course = [
        {"name": name, "noteCount": notes or 0, "pdfCount": pdfs or 0}
        for name, notes, pdfs in course_rows
    ]

    # Recent notes
    recent_rows = (
        user_notes.with_entities(Note.title, Note.created_at, Course.name)
        .order_by(Note.created_at.desc(), Note.id.desc())
        .limit(RECENT_NOTES)
        .all()
    )
    recent_notes = [
        {
            "title": title,
            "created_at": created.isoformat() if created else None,
            "courseName": course_name,
        }
        for title, created, course_name in recent_rows
    ]

    return {
        "stats": stats,
        "notesPerDay": notes_per_day,
        "notesPerCourse": notes_per_course,
        "recentNotes": recent_notes,
    }
