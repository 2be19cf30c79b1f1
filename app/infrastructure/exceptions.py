"""Infrastructure exceptions for storage and external operations.

Storage errors extend PixicoException so presentation can map them
to HTTP responses consistently.
"""

from app.domain.exceptions import PixicoException


class StorageException(PixicoException):
    """Base exception for storage operations."""


class StorageUploadError(StorageException):
    def __init__(self, storage_ref: str, reason: str) -> None:
        super().__init__(
            f"Failed to upload file: {storage_ref}",
            "STORAGE_UPLOAD_ERROR",
            {"storage_ref": storage_ref, "reason": reason},
        )


class StorageDeleteError(StorageException):
    def __init__(self, storage_ref: str, reason: str) -> None:
        super().__init__(
            f"Failed to delete file: {storage_ref}",
            "STORAGE_DELETE_ERROR",
            {"storage_ref": storage_ref, "reason": reason},
        )


class StoragePermissionError(StorageException):
    """Storage reference escapes the storage root."""

    def __init__(self, storage_ref: str, operation: str) -> None:
        super().__init__(
            f"Permission denied for {operation} on {storage_ref}",
            "STORAGE_PERMISSION_ERROR",
            {"storage_ref": storage_ref, "operation": operation},
        )
