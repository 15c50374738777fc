"""
Application error taxonomy.

Every error carries the HTTP status it maps to and a short human-readable
message. The handler registered in ``studybuddy.main`` turns them into
``{"detail": message}`` responses.
"""
from fastapi import status


class StudyBuddyError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str = ""):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(StudyBuddyError):
    """Resource is absent or not owned by the caller."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class ValidationError(StudyBuddyError):
    """Malformed or insufficient caller input."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class QuizAlreadySubmittedError(ValidationError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Quiz has already been submitted"


class ConfigurationError(StudyBuddyError):
    """A required secret or setting is missing."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "AI API key not configured"


class UpstreamUnavailableError(StudyBuddyError):
    """Network or HTTP failure while calling the LLM service."""

    status_code = status.HTTP_502_BAD_GATEWAY
    default_message = "AI service unavailable"


class UpstreamFormatError(StudyBuddyError):
    """The LLM service answered with text that does not have the expected shape."""

    status_code = status.HTTP_502_BAD_GATEWAY
    default_message = "AI returned invalid quiz format. Please try again."
