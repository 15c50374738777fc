"""Models module - Import all models here for Alembic."""
from studybuddy.db.base import Base
from studybuddy.models.user import User
from studybuddy.models.course import Course, Note, Pdf
from studybuddy.models.planner import StudySession
from studybuddy.models.quiz import Quiz
from studybuddy.models.contact import ContactMessage

__all__ = ["Base", "User", "Course", "Note", "Pdf", "StudySession", "Quiz", "ContactMessage"]
