from sqlalchemy import Boolean, Column, Integer, String, DateTime, Text, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from studybuddy.db.base import Base


class Course(Base):
    """Course model."""

    __tablename__ = "courses"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    owner = relationship("User", back_populates="courses")
    notes = relationship("Note", back_populates="course", cascade="all, delete-orphan", passive_deletes=True)
    pdfs = relationship("Pdf", back_populates="course", cascade="all, delete-orphan", passive_deletes=True)
    quizzes = relationship("Quiz", back_populates="course", cascade="all, delete-orphan", passive_deletes=True)
    study_sessions = relationship("StudySession", back_populates="course", passive_deletes=True)


class Note(Base):
    """Study note written by the user inside a course."""

    __tablename__ = "notes"

    id = Column(Integer, primary_key=True, index=True)
    course_id = Column(Integer, ForeignKey("courses.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String, nullable=False)
    body = Column(Text, nullable=True)
    summary = Column(Text, nullable=True)  # cached AI summary
    is_reviewed = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    course = relationship("Course", back_populates="notes")


class Pdf(Base):
    """Uploaded PDF stored on local disk."""

    __tablename__ = "pdfs"

    id = Column(Integer, primary_key=True, index=True)
    course_id = Column(Integer, ForeignKey("courses.id", ondelete="CASCADE"), nullable=False, index=True)
    original_name = Column(String, nullable=False)
    filename = Column(String, nullable=False)
    file_path = Column(String, nullable=False)
    size = Column(Integer, nullable=True)
    summary = Column(Text, nullable=True)  # cached AI summary
    uploaded_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    course = relationship("Course", back_populates="pdfs")
