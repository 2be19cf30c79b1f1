"""S3-compatible object storage (AWS S3, MinIO, Supabase Storage S3 API, ...)."""

from __future__ import annotations

import asyncio
import logging

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from app.infrastructure.exceptions import StorageDeleteError, StorageUploadError

logger = logging.getLogger(__name__)


class S3StorageService:
    """Public-read image bucket.

    boto3 is synchronous; every call runs in asyncio.to_thread.
    """

    def __init__(
        self,
        bucket: str,
        region: str = "us-east-1",
        endpoint_url: str | None = None,
        public_url: str | None = None,
        access_key: str | None = None,
        secret_key: str | None = None,
    ) -> None:
        self.bucket = bucket
        self.region = region
        if public_url:
            self._public_base = public_url.rstrip("/")
        elif endpoint_url:
            self._public_base = f"{endpoint_url.rstrip('/')}/{bucket}"
        else:
            self._public_base = f"https://{bucket}.s3.{region}.amazonaws.com"
        extra = {} if endpoint_url is None else {"endpoint_url": endpoint_url}
        self._client = boto3.client(
            "s3",
            region_name=region,
            aws_access_key_id=access_key,
            aws_secret_access_key=secret_key,
            **extra,
        )

    def public_url(self, storage_ref: str) -> str:
        return f"{self._public_base}/{storage_ref}"

    async def upload(self, data: bytes, storage_ref: str, content_type: str) -> str:
        def _put() -> None:
            self._client.put_object(
                Bucket=self.bucket,
                Key=storage_ref,
                Body=data,
                ContentType=content_type,
                CacheControl="public, max-age=3600",
            )

        try:
            await asyncio.to_thread(_put)
        except (BotoCoreError, ClientError) as e:
            logger.warning("S3 upload failed for %s: %s", storage_ref, e)
            raise StorageUploadError(storage_ref, str(e)) from e
        return self.public_url(storage_ref)

    async def delete(self, storage_ref: str) -> bool:
        def _delete() -> bool:
            try:
                self._client.head_object(Bucket=self.bucket, Key=storage_ref)
            except ClientError as e:
                if e.response.get("Error", {}).get("Code") in ("404", "NoSuchKey", "NotFound"):
                    return False
                raise
            self._client.delete_object(Bucket=self.bucket, Key=storage_ref)
            return True

        try:
            return await asyncio.to_thread(_delete)
        except (BotoCoreError, ClientError) as e:
            raise StorageDeleteError(storage_ref, str(e)) from e
