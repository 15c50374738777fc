"""
PDF upload, download and summary endpoints, nested under a course.
"""
import logging
import os
from typing import Any, List

from fastapi import APIRouter, Depends, File, UploadFile, status
from fastapi.responses import FileResponse
from sqlalchemy.orm import Session

from studybuddy.core.agents.summarizer import Summarizer
from studybuddy.core.config import settings
from studybuddy.core.dependencies import get_current_user, get_db, get_llm_factory
from studybuddy.core.exceptions import NotFoundError, ValidationError
from studybuddy.core.llm_config import LLMFactory
from studybuddy.core.permissions import get_owned_course, get_owned_pdf
from studybuddy.models.course import Pdf
from studybuddy.models.user import User
from studybuddy.schemas.common import Message
from studybuddy.schemas.course import PdfInDB, SummaryResponse
from studybuddy.utils.document_parser import extract_text_from_pdf
from studybuddy.utils.file_upload import delete_stored_file, save_upload_file

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/{course_id}/pdfs", response_model=List[PdfInDB])
def list_pdfs(
    course_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    course = get_owned_course(course_id, current_user, db)
    return (
        db.query(Pdf)
        .filter(Pdf.course_id == course.id)
        .order_by(Pdf.uploaded_at.desc(), Pdf.id.desc())
        .all()
    )


@router.post("/{course_id}/pdfs", response_model=PdfInDB, status_code=status.HTTP_201_CREATED)
def upload_pdf(
    course_id: int,
    pdf: UploadFile = File(...),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    """
    Upload a PDF into a course.

    Args:
        course_id: Course ID
        pdf: Uploaded file, sent as the multipart field ``pdf``
        db: Database session
        current_user: Current authenticated user

    Returns:
        Created PDF record

    Raises:
        NotFoundError: If the course is not owned by the user
        ValidationError: If the file is not a PDF or is too large
    """
    course = get_owned_course(course_id, current_user, db)

    file_path, filename, file_size = save_upload_file(pdf)

    record = Pdf(
        course_id=course.id,
        original_name=pdf.filename,
        filename=filename,
        file_path=file_path,
        size=file_size,
    )
    db.add(record)
    db.commit()
    db.refresh(record)

    logger.info(f"Stored PDF '{filename}' ({file_size} bytes) for course {course.id}")
    return record


@router.get("/{course_id}/pdfs/{pdf_id}/file")
def download_pdf(
    course_id: int,
    pdf_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    """
    Stream the stored PDF back to its owner.
    """
    record = get_owned_pdf(course_id, pdf_id, current_user, db)
    if not os.path.exists(record.file_path):
        logger.warning(f"PDF {record.id} is missing from disk at '{record.file_path}'")
        raise NotFoundError("File not found")

    return FileResponse(
        record.file_path,
        media_type="application/pdf",
        filename=record.original_name,
    )


@router.delete("/{course_id}/pdfs/{pdf_id}", response_model=Message)
def delete_pdf(
    course_id: int,
    pdf_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    """
    Delete a PDF record and its stored file.
    """
    record = get_owned_pdf(course_id, pdf_id, current_user, db)
    file_path = record.file_path

    db.delete(record)
    db.commit()

    try:
        delete_stored_file(file_path)
    except OSError as e:
        logger.error(f"Could not remove '{file_path}': {e}")

    return {"message": "PDF deleted successfully."}


@router.post("/{course_id}/pdfs/{pdf_id}/summarize", response_model=SummaryResponse)
def summarize_pdf(
    course_id: int,
    pdf_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    llm_factory: LLMFactory = Depends(get_llm_factory),
) -> Any:
    """
    Summarize the text of an uploaded PDF.

    Only the first ``PDF_MAX_TEXT_CHARS`` characters of the extracted text
    are sent to the model.
    """
    record = get_owned_pdf(course_id, pdf_id, current_user, db)

    if record.summary:
        return {"summary": record.summary, "cached": True}

    try:
        text = extract_text_from_pdf(record.file_path, max_chars=settings.PDF_MAX_TEXT_CHARS)
    except ValueError as e:
        logger.warning(f"Text extraction failed for PDF {record.id}: {e}")
        text = ""

    text = text.strip()
    if len(text) < settings.PDF_MIN_TEXT_CHARS:
        raise ValidationError("Could not extract enough text from this PDF")

    record.summary = Summarizer(llm_factory).summarize_pdf(text[:settings.PDF_MAX_TEXT_CHARS])
    db.commit()

    logger.info(f"Summarized PDF {record.id} for user {current_user.id}")
    return {"summary": record.summary, "cached": False}
