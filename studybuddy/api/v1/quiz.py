"""
Quiz endpoints - generating quizzes from course material, submitting answers, history.
"""
from typing import Any, List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from studybuddy.core.dependencies import get_current_user, get_db, get_llm_factory
from studybuddy.core.llm_config import LLMFactory
from studybuddy.models.user import User
from studybuddy.schemas.quiz import QuizDetail, QuizOut, QuizResult, QuizSubmit, QuizSummary
from studybuddy.services.quiz_service import QuizService

router = APIRouter()


def get_quiz_service(
    db: Session = Depends(get_db),
    llm_factory: LLMFactory = Depends(get_llm_factory),
) -> QuizService:
    return QuizService(db, llm_factory)


@router.post("/{course_id}/quiz/generate", response_model=QuizOut, status_code=status.HTTP_201_CREATED)
def generate_quiz(
    course_id: int,
    current_user: User = Depends(get_current_user),
    service: QuizService = Depends(get_quiz_service),
) -> Any:
    """
    Generate a new multiple choice quiz from the course's notes and PDF summaries.

    Args:
        course_id: Course ID
        current_user: Current authenticated user
        service: Quiz service bound to this request

    Returns:
        The stored quiz, unanswered

    Raises:
        NotFoundError: Course missing or not owned
        ValidationError: Not enough study material
        ConfigurationError: No AI API key configured
        UpstreamUnavailableError: The AI service could not be reached
        UpstreamFormatError: The AI answer was not a valid quiz
    """
    return service.generate(course_id, current_user)


@router.post("/{course_id}/quiz/{quiz_id}/submit", response_model=QuizResult)
def submit_quiz(
    course_id: int,
    quiz_id: int,
    submission: QuizSubmit,
    current_user: User = Depends(get_current_user),
    service: QuizService = Depends(get_quiz_service),
) -> Any:
    """
    Score the submitted answers. A quiz can only be submitted once.
    """
    return service.submit(course_id, quiz_id, current_user, submission.answers)


@router.get("/{course_id}/quiz/history", response_model=List[QuizSummary])
def quiz_history(
    course_id: int,
    current_user: User = Depends(get_current_user),
    service: QuizService = Depends(get_quiz_service),
) -> Any:
    """
    List the user's quizzes for a course, newest first.
    """
    return service.history(course_id, current_user)


@router.get("/{course_id}/quiz/{quiz_id}", response_model=QuizDetail)
def get_quiz(
    course_id: int,
    quiz_id: int,
    current_user: User = Depends(get_current_user),
    service: QuizService = Depends(get_quiz_service),
) -> Any:
    return service.get_quiz(course_id, quiz_id, current_user)
