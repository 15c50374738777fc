"""
Public contact form endpoint.
"""
import logging
from typing import Any

from email_validator import EmailNotValidError, validate_email
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from studybuddy.core.dependencies import get_db
from studybuddy.core.exceptions import ValidationError
from studybuddy.models.contact import ContactMessage
from studybuddy.schemas.common import ContactCreate, Message

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=Message, status_code=status.HTTP_201_CREATED)
def send_message(contact_in: ContactCreate, db: Session = Depends(get_db)) -> Any:
    """
    Store a message from the contact form. No login required.

    Raises:
        ValidationError: Missing name, email or message, or malformed email
    """
    name = (contact_in.name or "").strip()
    email = (contact_in.email or "").strip()
    message = (contact_in.message or "").strip()

    if not name:
        raise ValidationError("Name is required.")
    if not email:
        raise ValidationError("Email is required.")
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError as e:
        logger.debug(f"Rejected contact email: {e}")
        raise ValidationError("Please enter a valid email address.") from e
    if not message:
        raise ValidationError("Message is required.")

    db.add(ContactMessage(
        name=name,
        email=email,
        subject=(contact_in.subject or "").strip(),
        message=message,
    ))
    db.commit()

    logger.info("Contact message received")
    return {"message": "Thank you! Your message has been sent successfully."}
