"""
File upload utilities.
"""
import logging
import os
import random
import re
import time
from typing import Optional, Tuple

from fastapi import UploadFile

from studybuddy.core.config import settings
from studybuddy.core.exceptions import ValidationError

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = {"pdf"}
ALLOWED_CONTENT_TYPES = {"application/pdf"}


def is_allowed_file(filename: str, content_type: Optional[str] = None) -> bool:
    """
    Check if the upload is a PDF.

    Args:
        filename: Name of file
        content_type: MIME type sent by the client

    Returns:
        True if file extension and content type are allowed, False otherwise
    """
    if content_type and content_type not in ALLOWED_CONTENT_TYPES:
        return False
    return get_file_extension(filename) in ALLOWED_EXTENSIONS


def get_file_extension(filename: str) -> str:
    """
    Get file extension.

    Args:
        filename: Name of file

    Returns:
        File extension without dot
    """
    return filename.rsplit(".", 1)[1].lower() if "." in filename else ""


def generate_unique_filename(original_filename: str) -> str:
    """
    Generate a unique, disk-safe filename that keeps the original name readable.

    Args:
        original_filename: Original filename

    Returns:
        Unique filename
    """
    base = os.path.basename(original_filename.replace("\\", "/"))
    base = re.sub(r"\s+", "_", base)
    unique = f"{int(time.time() * 1000)}-{random.randint(0, 10**9)}"
    return f"{unique}-{base}"


def save_upload_file(
    upload_file: UploadFile,
    upload_dir: Optional[str] = None,
    max_size: Optional[int] = None,
) -> Tuple[str, str, int]:
    """
    Save uploaded file to disk.

    Args:
        upload_file: Uploaded file
        upload_dir: Target directory, defaults to settings.UPLOAD_DIR
        max_size: Size cap in bytes, defaults to settings.MAX_UPLOAD_SIZE

    Returns:
        Tuple of (file_path, filename, file_size)

    Raises:
        ValidationError: If file type or size is not allowed
    """
    upload_dir = upload_dir or settings.UPLOAD_DIR
    max_size = max_size or settings.MAX_UPLOAD_SIZE

    original_name = upload_file.filename or ""
    if not is_allowed_file(original_name, upload_file.content_type):
        raise ValidationError("Only PDF files are allowed")

    content = upload_file.file.read()
    file_size = len(content)

    if file_size == 0:
        raise ValidationError("Uploaded file is empty")
    if file_size > max_size:
        raise ValidationError(
            f"File size exceeds maximum allowed size of {max_size} bytes"
        )

    # Create upload directory if it doesn't exist
    os.makedirs(upload_dir, exist_ok=True)

    unique_filename = generate_unique_filename(original_name)
    file_path = os.path.join(upload_dir, unique_filename)

    with open(file_path, "wb") as f:
        f.write(content)

    return file_path, unique_filename, file_size


def delete_stored_file(file_path: str) -> bool:
    """
    Remove a stored upload if it is still on disk.

    Returns:
        True if a file was removed
    """
    if not file_path or not os.path.exists(file_path):
        return False
    os.remove(file_path)
    logger.info(f"Deleted stored file '{file_path}'")
    return True
