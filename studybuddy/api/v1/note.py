"""
Note endpoints, nested under a course.
"""
import logging
from typing import Any, List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from studybuddy.core.agents.summarizer import Summarizer
from studybuddy.core.config import settings
from studybuddy.core.dependencies import get_current_user, get_db, get_llm_factory
from studybuddy.core.exceptions import ValidationError
from studybuddy.core.llm_config import LLMFactory
from studybuddy.core.permissions import get_owned_course, get_owned_note
from studybuddy.models.course import Note
from studybuddy.models.user import User
from studybuddy.schemas.common import Message
from studybuddy.schemas.course import NoteCreate, NoteInDB, NoteReviewed, NoteUpdate, SummaryResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def _require_title(note_in: NoteCreate) -> str:
    title = (note_in.title or "").strip()
    if not title:
        raise ValidationError("Note title is required.")
    return title


@router.get("/{course_id}/notes", response_model=List[NoteInDB])
def list_notes(
    course_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    course = get_owned_course(course_id, current_user, db)
    return (
        db.query(Note)
        .filter(Note.course_id == course.id)
        .order_by(Note.created_at.desc(), Note.id.desc())
        .all()
    )


@router.post("/{course_id}/notes", response_model=NoteInDB, status_code=status.HTTP_201_CREATED)
def create_note(
    course_id: int,
    note_in: NoteCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    """
    Add a note to a course.
    """
    title = _require_title(note_in)
    course = get_owned_course(course_id, current_user, db)

    note = Note(course_id=course.id, title=title, body=note_in.body or "")
    db.add(note)
    db.commit()
    db.refresh(note)
    return note


@router.put("/{course_id}/notes/{note_id}", response_model=NoteInDB)
def update_note(
    course_id: int,
    note_id: int,
    note_in: NoteUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    """
    Update a note. Changing the body drops the stored summary.
    """
    title = _require_title(note_in)
    note = get_owned_note(course_id, note_id, current_user, db)

    body = note_in.body or ""
    if body != (note.body or ""):
        note.summary = None
    note.title = title
    note.body = body

    db.commit()
    db.refresh(note)
    return note


@router.delete("/{course_id}/notes/{note_id}", response_model=Message)
def delete_note(
    course_id: int,
    note_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    note = get_owned_note(course_id, note_id, current_user, db)
    db.delete(note)
    db.commit()
    return {"message": "Note deleted successfully."}


@router.patch("/{course_id}/notes/{note_id}/toggle-reviewed", response_model=NoteReviewed)
def toggle_reviewed(
    course_id: int,
    note_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    note = get_owned_note(course_id, note_id, current_user, db)
    note.is_reviewed = not note.is_reviewed
    db.commit()
    return {"is_reviewed": note.is_reviewed}


@router.post("/{course_id}/notes/{note_id}/summarize", response_model=SummaryResponse)
def summarize_note(
    course_id: int,
    note_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    llm_factory: LLMFactory = Depends(get_llm_factory),
) -> Any:
    """
    Summarize a note into bullet points.

    Args:
        course_id: Course ID
        note_id: Note ID
        db: Database session
        current_user: Current authenticated user
        llm_factory: LLM client factory

    Returns:
        The summary and whether it was already stored

    Raises:
        ValidationError: If the note body is too short
        UpstreamUnavailableError: If the LLM call fails
    """
    note = get_owned_note(course_id, note_id, current_user, db)

    if note.summary:
        return {"summary": note.summary, "cached": True}

    body = (note.body or "").strip()
    if len(body) < settings.NOTE_MIN_SUMMARY_CHARS:
        raise ValidationError("Note is too short to summarize")

    note.summary = Summarizer(llm_factory).summarize_note(body)
    db.commit()

    logger.info(f"Summarized note {note.id} for user {current_user.id}")
    return {"summary": note.summary, "cached": False}
