"""Image upload use case for prompt and blog artwork."""

from __future__ import annotations

import logging
import mimetypes
from typing import TYPE_CHECKING

from app.domain.exceptions import ValidationException
from app.shared.utils.generators import generate_cuid

if TYPE_CHECKING:
    from app.application.interfaces.services import IStorageService

logger = logging.getLogger(__name__)

IMAGE_BUCKETS = frozenset({"prompt-images", "blog-images"})

_EXTENSIONS = {
    "image/jpeg": ".jpg",
    "image/png": ".png",
    "image/webp": ".webp",
    "image/gif": ".gif",
}


class ImageUploadService:
    """Validate an image and store it under a fresh, unguessable name."""

    def __init__(
        self,
        storage: "IStorageService",
        allowed_types: set[str],
        max_size: int,
    ) -> None:
        self.storage = storage
        self.allowed_types = allowed_types
        self.max_size = max_size

    async def upload_image(self, bucket: str, data: bytes, content_type: str) -> str:
        """Store data in bucket and return its public URL."""
        if bucket not in IMAGE_BUCKETS:
            raise ValidationException(f"Unknown bucket '{bucket}'", field="bucket")
        if content_type not in self.allowed_types:
            raise ValidationException(
                f"Unsupported image type '{content_type}'", field="file"
            )
        if not data:
            raise ValidationException("File is empty", field="file")
        if len(data) > self.max_size:
            raise ValidationException(
                f"File exceeds maximum size of {self.max_size} bytes", field="file"
            )
        ext = _EXTENSIONS.get(content_type) or mimetypes.guess_extension(content_type) or ""
        storage_ref = f"{bucket}/{generate_cuid()}{ext}"
        url = await self.storage.upload(data, storage_ref, content_type)
        logger.info("Stored %d-byte image at %s", len(data), storage_ref)
        return url
