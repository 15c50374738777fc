"""
Quiz model - AI generated multiple choice quizzes and their single submission.
"""
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, JSON
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from studybuddy.db.base import Base
from studybuddy.db.types import QuestionList


class Quiz(Base):
    """Quiz model."""

    __tablename__ = "quizzes"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    course_id = Column(Integer, ForeignKey("courses.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String, nullable=False)
    questions = Column(QuestionList, nullable=False)
    answers = Column(JSON, nullable=True)  # selected option index per question
    score = Column(Integer, nullable=True)
    total = Column(Integer, nullable=False)
    completed_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    user = relationship("User", back_populates="quizzes")
    course = relationship("Course", back_populates="quizzes")

    @property
    def is_completed(self) -> bool:
        return self.completed_at is not None
