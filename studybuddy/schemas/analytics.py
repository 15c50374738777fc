from typing import List, Optional

from pydantic import BaseModel


class OverallStats(BaseModel):
    totalCourses: int
    totalNotes: int
    totalPdfs: int
    totalSummaries: int
    reviewedNotes: int
    totalSessions: int
    completedSessions: int
    sessionsThisWeek: int
    totalQuizzes: int
    completedQuizzes: int
    averageQuizScore: Optional[float] = None


class DailyCount(BaseModel):
    date: str
    count: int


class CourseActivity(BaseModel):
    name: str
    noteCount: int
    pdfCount: int


class RecentNote(BaseModel):
    title: str
    created_at: Optional[str] = None
    courseName: str


class AnalyticsResponse(BaseModel):
    """Everything the analytics dashboard renders."""
    stats: OverallStats
    notesPerDay: List[DailyCount]
    notesPerCourse: List[CourseActivity]
    recentNotes: List[RecentNote]
