"""API v1 router."""
from fastapi import APIRouter

from studybuddy.api.v1 import analytics, auth, contact, course, note, pdf, planner, quiz

api_router = APIRouter()

api_router.include_router(auth.router, prefix="/auth", tags=["Authentication"])
api_router.include_router(course.router, prefix="/courses", tags=["Course Management"])
api_router.include_router(note.router, prefix="/courses", tags=["Notes"])
api_router.include_router(pdf.router, prefix="/courses", tags=["PDFs"])
api_router.include_router(quiz.router, prefix="/courses", tags=["Quizzes"])
api_router.include_router(planner.router, prefix="/planner", tags=["Study Planner"])
api_router.include_router(analytics.router, prefix="/analytics", tags=["Analytics"])
api_router.include_router(contact.router, prefix="/contact", tags=["Contact"])
