"""
Pydantic schemas for the study planner.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class StudySessionCreate(BaseModel):
    """Schema for creating a planner entry."""

    title: Optional[str] = None
    session_date: Optional[str] = Field(None, description="YYYY-MM-DD")
    description: Optional[str] = None
    course_id: Optional[int] = None
    start_time: Optional[str] = Field(None, description="HH:MM")
    end_time: Optional[str] = Field(None, description="HH:MM")


class StudySessionUpdate(BaseModel):
    """Partial update; fields left out keep their stored value."""

    title: Optional[str] = None
    session_date: Optional[str] = None
    description: Optional[str] = None
    course_id: Optional[int] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    completed: Optional[bool] = None


class StudySessionInDB(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    user_id: int
    title: str
    description: Optional[str] = None
    course_id: Optional[int] = None
    course_name: Optional[str] = Field(None, serialization_alias="courseName")
    session_date: str
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    completed: bool = False
    created_at: Optional[datetime] = None
