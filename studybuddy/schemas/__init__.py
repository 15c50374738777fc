"""Schemas module - Import all schemas."""
from studybuddy.schemas.user import User, UserCreate, UserLogin, AuthResponse
from studybuddy.schemas.course import (
    CourseCreate,
    CourseUpdate,
    CourseInDB,
    CourseWithCounts,
    NoteCreate,
    NoteUpdate,
    NoteInDB,
    PdfInDB,
    SummaryResponse,
)
from studybuddy.schemas.quiz import (
    QuizQuestion,
    QuizOut,
    QuizDetail,
    QuizSubmit,
    QuizResult,
    QuizSummary,
)
from studybuddy.schemas.planner import StudySessionCreate, StudySessionUpdate, StudySessionInDB
from studybuddy.schemas.analytics import AnalyticsResponse
from studybuddy.schemas.common import Message, ContactCreate

__all__ = [
    "User",
    "UserCreate",
    "UserLogin",
    "AuthResponse",
    "CourseCreate",
    "CourseUpdate",
    "CourseInDB",
    "CourseWithCounts",
    "NoteCreate",
    "NoteUpdate",
    "NoteInDB",
    "PdfInDB",
    "SummaryResponse",
    "QuizQuestion",
    "QuizOut",
    "QuizDetail",
    "QuizSubmit",
    "QuizResult",
    "QuizSummary",
    "StudySessionCreate",
    "StudySessionUpdate",
    "StudySessionInDB",
    "AnalyticsResponse",
    "Message",
    "ContactCreate",
]
