"""MinIO implementation of the StorageClient interface."""

import logging
from datetime import timedelta
from typing import BinaryIO
from xml.etree import ElementTree

from minio import Minio

from distill.config import StorageConfig
from distill.exceptions import StorageError
from distill.infrastructure.interfaces import StorageClient

logger = logging.getLogger(__name__)


def get_minio_client(config: StorageConfig, region: str | None = None) -> Minio:
    """
    Initialize and return a MinIO client for an S3-compatible endpoint.

    Args:
        config: Storage endpoint and credentials.
        region: Region to sign requests for. When omitted the client is only
            suitable for account-level calls such as listing buckets.

    Returns:
        Minio: Configured MinIO client
    """
    try:
        return Minio(
            endpoint=config.endpoint,
            access_key=config.access_key or None,
            secret_key=config.secret_key or None,
            secure=config.secure,
            region=region,
        )
    except Exception:
        logger.exception(
            "MinIO client initialization failed",
            extra={"endpoint": config.endpoint, "region": region},
        )
        raise


class MinioStorageClient(StorageClient):
    """Handles object storage operations using MinIO."""

    def __init__(self, client: Minio, presigned_url_ttl: timedelta = timedelta(hours=1)):
        self._client = client
        self._presigned_url_ttl = presigned_url_ttl

    def list_buckets(self) -> list[str]:
        try:
            names = [bucket.name for bucket in self._client.list_buckets()]
            logger.info("Buckets listed", extra={"bucket_count": len(names)})
            return names
        except Exception as e:
            logger.exception("Bucket listing failed")
            raise StorageError("list buckets", cause=e) from e

    def locate_bucket(self, bucket_name: str) -> str:
        """
        Reads the bucket's raw location constraint with GetBucketLocation.

        The MinIO SDK resolves and caches regions internally without exposing
        the constraint, so the request is sent through its signed request
        helper. Location requests are always signed for ``us-east-1``.
        """
        try:
            response = self._client._url_open(
                "GET",
                "us-east-1",
                bucket_name=bucket_name,
                query_params={"location": ""},
            )
            element = ElementTree.fromstring(response.data.decode())
            constraint = element.text or ""
            logger.info(
                "Bucket location read",
                extra={"bucket_name": bucket_name, "constraint": constraint},
            )
            return constraint
        except Exception as e:
            logger.exception(
                "Bucket location lookup failed", extra={"bucket_name": bucket_name}
            )
            raise StorageError("locate bucket", bucket_name, cause=e) from e

    def upload(
        self,
        bucket_name: str,
        object_name: str,
        data: BinaryIO,
        size: int,
        content_type: str,
    ) -> None:
        try:
            self._client.put_object(
                bucket_name=bucket_name,
                object_name=object_name,
                data=data,
                length=size,
                content_type=content_type,
            )
            logger.info(
                "File uploaded",
                extra={
                    "bucket_name": bucket_name,
                    "object_name": object_name,
                    "size": size,
                },
            )
        except Exception as e:
            logger.exception(
                "Upload failed",
                extra={"bucket_name": bucket_name, "object_name": object_name},
            )
            raise StorageError("upload", bucket_name, object_name, cause=e) from e

    def delete(self, bucket_name: str, object_name: str) -> None:
        try:
            self._client.remove_object(bucket_name=bucket_name, object_name=object_name)
            logger.info(
                "Object deleted",
                extra={"bucket_name": bucket_name, "object_name": object_name},
            )
        except Exception as e:
            logger.exception(
                "Delete failed",
                extra={"bucket_name": bucket_name, "object_name": object_name},
            )
            raise StorageError("delete", bucket_name, object_name, cause=e) from e

    def staged_uri(self, bucket_name: str, object_name: str) -> str:
        """Returns a presigned GET URL so the transcriber can fetch the object."""
        try:
            return self._client.presigned_get_object(
                bucket_name=bucket_name,
                object_name=object_name,
                expires=self._presigned_url_ttl,
            )
        except Exception as e:
            logger.exception(
                "Presigned URL generation failed",
                extra={"bucket_name": bucket_name, "object_name": object_name},
            )
            raise StorageError("presign", bucket_name, object_name, cause=e) from e
