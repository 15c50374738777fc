"""
Pydantic schemas for quizzes.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt


class QuizQuestion(BaseModel):
    """One multiple choice question embedded in a quiz."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    question: str
    options: List[str]
    correct_index: int = Field(..., alias="correctIndex")


class QuizOut(BaseModel):
    """Schema for a generated quiz."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    questions: List[QuizQuestion]
    total: int
    score: Optional[int] = None
    created_at: Optional[datetime] = None


class QuizDetail(QuizOut):
    """Schema for a stored quiz including its submission, if any."""

    course_id: int
    answers: Optional[List[int]] = None
    completed_at: Optional[datetime] = None


class QuizSubmit(BaseModel):
    """Selected option index per question, in question order. Use -1 for unanswered."""

    answers: Optional[List[StrictInt]] = None


class QuestionResult(BaseModel):
    """Per-question review after submission."""

    model_config = ConfigDict(populate_by_name=True)

    question: str
    options: List[str]
    correct_index: int = Field(..., alias="correctIndex")
    selected_index: int = Field(..., alias="selectedIndex")
    correct: bool


class QuizResult(BaseModel):
    score: int
    total: int
    percentage: int
    results: List[QuestionResult]


class QuizSummary(BaseModel):
    """Quiz history entry (metadata only)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    score: Optional[int] = None
    total: int
    completed_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
