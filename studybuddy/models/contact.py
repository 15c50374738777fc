from sqlalchemy import Column, Integer, String, DateTime, Text
from sqlalchemy.sql import func

from studybuddy.db.base import Base


class ContactMessage(Base):
    """Message sent from the public contact form."""

    __tablename__ = "contact_messages"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    subject = Column(String, nullable=True)
    message = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
