import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class CourseBase(BaseModel):
    """Base course schema."""
    name: Optional[str] = Field(None, description="Name of the course")
    description: Optional[str] = Field(None, description="Description of the course")


class CourseCreate(CourseBase):
    pass


class CourseUpdate(CourseBase):
    pass


class CourseInDB(CourseBase):
    """Schema for course in database."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    created_at: Optional[datetime.datetime] = None


class CourseWithCounts(CourseInDB):
    note_count: int = 0
    pdf_count: int = 0


class CourseStats(BaseModel):
    """Dashboard counters for the current user."""
    totalCourses: int
    totalNotes: int
    totalSummaries: int
    totalPdfs: int
    totalPdfSummaries: int


class CourseProgress(BaseModel):
    """Notes reviewed out of total notes in a course."""
    total: int
    reviewed: int
    percentage: int


class NoteBase(BaseModel):
    title: Optional[str] = None
    body: Optional[str] = None


class NoteCreate(NoteBase):
    pass


class NoteUpdate(NoteBase):
    pass


class NoteInDB(NoteBase):
    """Schema for note in database."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    course_id: int
    summary: Optional[str] = None
    is_reviewed: bool = False
    created_at: Optional[datetime.datetime] = None


class NoteReviewed(BaseModel):
    is_reviewed: bool


class PdfInDB(BaseModel):
    """Schema for uploaded PDF."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    course_id: int
    original_name: str
    filename: str
    file_path: str
    size: Optional[int] = None
    summary: Optional[str] = None
    uploaded_at: Optional[datetime.datetime] = None


class SummaryResponse(BaseModel):
    """Summary text and whether it came from the stored copy."""
    summary: str
    cached: bool


class SearchNoteHit(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    body: Optional[str] = None
    course_id: int
    course_name: str
    created_at: Optional[datetime.datetime] = None


class SearchPdfHit(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    original_name: str
    filename: str
    course_id: int
    course_name: str
    uploaded_at: Optional[datetime.datetime] = None


class SearchResults(BaseModel):
    courses: List[CourseInDB] = Field(default_factory=list)
    notes: List[SearchNoteHit] = Field(default_factory=list)
    pdfs: List[SearchPdfHit] = Field(default_factory=list)
