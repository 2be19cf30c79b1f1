"""Image storage: local filesystem and S3-compatible backends.

StorageFactory picks the backend from app.core.config; backends are imported
lazily so the local default never loads boto3.
"""

from app.infrastructure.external.storage.factory import StorageFactory

__all__ = ["StorageFactory"]
