"""
Utility functions for the application
"""
from .validators import (
    validate_file_extension,
    validate_file_size,
    validate_storage_filename,
    check_upload,
    read_upload,
    unique_filename,
)

__all__ = [
    "validate_file_extension",
    "validate_file_size",
    "validate_storage_filename",
    "check_upload",
    "read_upload",
    "unique_filename",
]
