"""
Ownership checks for user-scoped resources.

Every course, note, PDF and planner entry is private to the user who created
it. Resources owned by someone else are reported exactly like missing ones.
"""
from sqlalchemy.orm import Session

from studybuddy.core.exceptions import NotFoundError
from studybuddy.models.course import Course, Note, Pdf
from studybuddy.models.planner import StudySession
from studybuddy.models.user import User


def get_owned_course(course_id: int, user: User, db: Session) -> Course:
    """
    Return the course if it belongs to ``user``.

    Raises:
        NotFoundError: Course missing or owned by another user
    """
    course = db.query(Course).filter(
        Course.id == course_id,
        Course.user_id == user.id
    ).first()
    if not course:
        raise NotFoundError("Course not found")
    return course


def get_owned_note(course_id: int, note_id: int, user: User, db: Session) -> Note:
    course = get_owned_course(course_id, user, db)
    note = db.query(Note).filter(Note.id == note_id, Note.course_id == course.id).first()
    if not note:
        raise NotFoundError("Note not found")
    return note


def get_owned_pdf(course_id: int, pdf_id: int, user: User, db: Session) -> Pdf:
    course = get_owned_course(course_id, user, db)
    pdf = db.query(Pdf).filter(Pdf.id == pdf_id, Pdf.course_id == course.id).first()
    if not pdf:
        raise NotFoundError("PDF not found")
    return pdf


def get_owned_session(session_id: int, user: User, db: Session) -> StudySession:
    session = db.query(StudySession).filter(
        StudySession.id == session_id,
        StudySession.user_id == user.id
    ).first()
    if not session:
        raise NotFoundError("Session not found")
    return session
