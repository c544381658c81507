"""
Custom validators for the application
"""
import os
import re
import uuid
from typing import Iterable, Optional

from fastapi import UploadFile

from practicals.core.errors import BadRequestError


def get_extension(filename: Optional[str]) -> str:
    return os.path.splitext(filename or "")[1].lower()


def validate_file_extension(filename: Optional[str], allowed_extensions: Iterable[str]) -> bool:
    """Validate file extension against an allow-list"""
    return get_extension(filename) in {ext.lower() for ext in allowed_extensions}


def validate_file_size(file_size: int, max_size: int) -> bool:
    """Validate file size"""
    return 0 < file_size <= max_size


def validate_storage_filename(filename: str) -> bool:
    """A stored file name is a single path component"""
    return bool(filename) and filename not in (".", "..") and not re.search(r'[\\/]', filename)


def check_upload(filename: Optional[str], size: int, allowed_extensions: Iterable[str], max_size: int) -> None:
    """Raise BadRequestError when an uploaded file breaks the type or size rules."""
    allowed = sorted(allowed_extensions)
    if not validate_file_extension(filename, allowed):
        raise BadRequestError(
            f"File type not allowed. Allowed types: {', '.join(allowed)}",
            code="UNSUPPORTED_FILE_TYPE"
        )
    if size == 0:
        raise BadRequestError("Uploaded file is empty", code="EMPTY_FILE")
    if not validate_file_size(size, max_size):
        raise BadRequestError(
            f"File size exceeds maximum allowed size of {max_size / (1024 * 1024):.1f}MB",
            code="FILE_TOO_LARGE"
        )


def unique_filename(filename: Optional[str]) -> str:
    """Random storage name that keeps only the original extension"""
    return f"{uuid.uuid4().hex}{get_extension(filename)}"


async def read_upload(file: UploadFile, allowed_extensions: Iterable[str], max_size: int) -> bytes:
    """Read an uploaded file and check it, never holding more than max_size + 1 bytes."""
    content = await file.read(max_size + 1)
    check_upload(file.filename, len(content), allowed_extensions, max_size)
    return content
