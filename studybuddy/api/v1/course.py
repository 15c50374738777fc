import logging
from typing import Any, List, Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from studybuddy.core.dependencies import get_current_user, get_db
from studybuddy.core.exceptions import ValidationError
from studybuddy.core.permissions import get_owned_course
from studybuddy.models.course import Course, Note, Pdf
from studybuddy.models.user import User
from studybuddy.schemas.common import Message
from studybuddy.schemas.course import (
    CourseCreate,
    CourseInDB,
    CourseProgress,
    CourseStats,
    CourseUpdate,
    CourseWithCounts,
    SearchResults,
)
from studybuddy.utils.file_upload import delete_stored_file

logger = logging.getLogger(__name__)

router = APIRouter()


def _clean_course_fields(course_in: CourseCreate) -> tuple:
    name = (course_in.name or "").strip()
    if not name:
        raise ValidationError("Course name is required.")
    description = course_in.description.strip() if course_in.description else None
    return name, description or None


def _has_summary(column):
    return (column.isnot(None)) & (column != "")


@router.get("", response_model=List[CourseWithCounts])
def list_courses(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    """
    List the current user's courses, newest first, with note and PDF counts.
    """
    note_count = (
        db.query(func.count(Note.id)).filter(Note.course_id == Course.id).correlate(Course).scalar_subquery()
    )
    pdf_count = (
        db.query(func.count(Pdf.id)).filter(Pdf.course_id == Course.id).correlate(Course).scalar_subquery()
    )
    rows = (
        db.query(Course, note_count.label("note_count"), pdf_count.label("pdf_count"))
        .filter(Course.user_id == current_user.id)
        .order_by(Course.created_at.desc(), Course.id.desc())
        .all()
    )
    return [
        CourseWithCounts(
            **CourseInDB.model_validate(course).model_dump(),
            note_count=notes or 0,
            pdf_count=pdfs or 0,
        )
        for course, notes, pdfs in rows
    ]


@router.get("/stats", response_model=CourseStats)
def get_course_stats(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    """
    Aggregate counters for the dashboard.
    """
    notes = db.query(Note).join(Course).filter(Course.user_id == current_user.id)
    pdfs = db.query(Pdf).join(Course).filter(Course.user_id == current_user.id)

    return CourseStats(
        totalCourses=db.query(Course).filter(Course.user_id == current_user.id).count(),
        totalNotes=notes.count(),
        totalSummaries=notes.filter(_has_summary(Note.summary)).count(),
        totalPdfs=pdfs.count(),
        totalPdfSummaries=pdfs.filter(_has_summary(Pdf.summary)).count(),
    )


@router.get("/search", response_model=SearchResults)
def search(
    q: Optional[str] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    """
    Case-insensitive substring search across courses, notes and PDF names.
    """
    term = (q or "").strip()
    if not term:
        return SearchResults()

    pattern = f"%{term}%"

    courses = db.query(Course).filter(
        Course.user_id == current_user.id,
        or_(Course.name.ilike(pattern), Course.description.ilike(pattern))
    ).all()

    notes = (
        db.query(Note, Course.name)
        .join(Course)
        .filter(Course.user_id == current_user.id, or_(Note.title.ilike(pattern), Note.body.ilike(pattern)))
        .all()
    )

    pdfs = (
        db.query(Pdf, Course.name)
        .join(Course)
        .filter(Course.user_id == current_user.id, Pdf.original_name.ilike(pattern))
        .all()
    )

    return {
        "courses": courses,
        "notes": [
            {
                "id": note.id,
                "title": note.title,
                "body": note.body,
                "course_id": note.course_id,
                "course_name": course_name,
                "created_at": note.created_at,
            }
            for note, course_name in notes
        ],
        "pdfs": [
            {
                "id": pdf.id,
                "original_name": pdf.original_name,
                "filename": pdf.filename,
                "course_id": pdf.course_id,
                "course_name": course_name,
                "uploaded_at": pdf.uploaded_at,
            }
            for pdf, course_name in pdfs
        ],
    }


@router.get("/{course_id}/progress", response_model=CourseProgress)
def get_course_progress(
    course_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    """
    Share of the course's notes marked as reviewed.
    """
    course = get_owned_course(course_id, current_user, db)

    total = db.query(Note).filter(Note.course_id == course.id).count()
    reviewed = db.query(Note).filter(Note.course_id == course.id, Note.is_reviewed.is_(True)).count()

    return CourseProgress(
        total=total,
        reviewed=reviewed,
        percentage=(200 * reviewed + total) // (2 * total) if total else 0,
    )


@router.post("", response_model=CourseInDB, status_code=status.HTTP_201_CREATED)
def create_course(
    course_in: CourseCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    """
    Create a new course owned by the current user.
    """
    name, description = _clean_course_fields(course_in)

    course = Course(name=name, description=description, user_id=current_user.id)
    db.add(course)
    db.commit()
    db.refresh(course)

    logger.info(f"Course {course.id} created by user {current_user.id}")
    return course


@router.put("/{course_id}", response_model=CourseInDB)
def update_course(
    course_id: int,
    course_in: CourseUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    """
    Rename a course or change its description.
    """
    name, description = _clean_course_fields(course_in)
    course = get_owned_course(course_id, current_user, db)

    course.name = name
    course.description = description
    db.commit()
    db.refresh(course)
    return course


@router.delete("/{course_id}", response_model=Message)
def delete_course(
    course_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    """
    Delete a course with its notes, PDFs and quizzes.

    Planner entries pointing at the course are kept and detached from it.
    """
    course = get_owned_course(course_id, current_user, db)
    stored_files = [pdf.file_path for pdf in db.query(Pdf).filter(Pdf.course_id == course.id).all()]

    db.delete(course)
    db.commit()

    for file_path in stored_files:
        try:
            delete_stored_file(file_path)
        except OSError as e:
            logger.error(f"Could not remove '{file_path}' for deleted course {course_id}: {e}")

    logger.info(f"Course {course_id} deleted by user {current_user.id}")
    return {"message": "Course deleted successfully."}
