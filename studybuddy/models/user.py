"""
User model for authentication.
"""
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from studybuddy.db.base import Base


class User(Base):
    """User model."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    courses = relationship("Course", back_populates="owner", cascade="all, delete-orphan", passive_deletes=True)
    study_sessions = relationship(
        "StudySession", back_populates="user", cascade="all, delete-orphan", passive_deletes=True
    )
    quizzes = relationship("Quiz", back_populates="user", cascade="all, delete-orphan", passive_deletes=True)
