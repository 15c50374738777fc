"""
Study planner endpoints.
"""
import logging
from typing import Any, List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from studybuddy.core.dependencies import get_current_user, get_db
from studybuddy.core.exceptions import ValidationError
from studybuddy.core.permissions import get_owned_course, get_owned_session
from studybuddy.models.planner import StudySession
from studybuddy.models.user import User
from studybuddy.schemas.common import Message
from studybuddy.schemas.planner import StudySessionCreate, StudySessionInDB, StudySessionUpdate

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[StudySessionInDB])
def list_sessions(
    month: Optional[int] = Query(None, ge=1, le=12),
    year: Optional[int] = Query(None, ge=1),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    """
    List planner entries ordered by date and start time.

    When both ``month`` and ``year`` are given only that month is returned.
    """
    query = db.query(StudySession).filter(StudySession.user_id == current_user.id)
    if month and year:
        query = query.filter(StudySession.session_date.like(f"{year:04d}-{month:02d}-%"))

    return query.order_by(
        StudySession.session_date.asc(),
        StudySession.start_time.asc(),
        StudySession.id.asc()
    ).all()


@router.post("", response_model=StudySessionInDB, status_code=status.HTTP_201_CREATED)
def create_session(
    session_in: StudySessionCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    """
    Plan a study session, optionally linked to one of the user's courses.
    """
    title = (session_in.title or "").strip()
    session_date = (session_in.session_date or "").strip()
    if not title or not session_date:
        raise ValidationError("Title and date are required")

    if session_in.course_id is not None:
        get_owned_course(session_in.course_id, current_user, db)

    session = StudySession(
        user_id=current_user.id,
        title=title,
        description=session_in.description or None,
        course_id=session_in.course_id,
        session_date=session_date,
        start_time=session_in.start_time or None,
        end_time=session_in.end_time or None,
    )
    db.add(session)
    db.commit()
    db.refresh(session)
    return session


@router.put("/{session_id}", response_model=StudySessionInDB)
def update_session(
    session_id: int,
    session_in: StudySessionUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    """
    Update the fields present in the request; the rest keep their values.
    """
    session = get_owned_session(session_id, current_user, db)
    update_data = session_in.model_dump(exclude_unset=True)

    for field in ("title", "session_date"):
        if field in update_data:
            value = (update_data[field] or "").strip()
            if not value:
                raise ValidationError("Title and date are required")
            update_data[field] = value

    if update_data.get("course_id") is not None:
        get_owned_course(update_data["course_id"], current_user, db)

    if "completed" in update_data and update_data["completed"] is None:
        del update_data["completed"]

    for field, value in update_data.items():
        setattr(session, field, value)

    db.commit()
    db.refresh(session)
    return session


@router.patch("/{session_id}/toggle", response_model=StudySessionInDB)
def toggle_session(
    session_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    session = get_owned_session(session_id, current_user, db)
    session.completed = not session.completed
    db.commit()
    db.refresh(session)
    return session


@router.delete("/{session_id}", response_model=Message)
def delete_session(
    session_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    session = get_owned_session(session_id, current_user, db)
    db.delete(session)
    db.commit()
    return {"message": "Session deleted successfully."}
