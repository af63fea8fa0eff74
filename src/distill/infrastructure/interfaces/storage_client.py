"""Abstract interface for object storage operations."""

from abc import ABC, abstractmethod
from typing import BinaryIO


class StorageClient(ABC):
    """Abstract base class for object storage backends."""

    @abstractmethod
    def list_buckets(self) -> list[str]:
        """
        Lists the names of all buckets visible to the configured account.

        Raises:
            StorageError: If the listing call fails.
        """
        pass

    @abstractmethod
    def locate_bucket(self, bucket_name: str) -> str:
        """
        Returns the bucket's region constraint exactly as the provider reports it.

        An empty string is the provider's alias for its default region.

        Raises:
            StorageError: If the location lookup fails.
        """
        pass

    @abstractmethod
    def upload(
        self,
        bucket_name: str,
        object_name: str,
        data: BinaryIO,
        size: int,
        content_type: str,
    ) -> None:
        """
        Uploads a file to storage.

        Args:
            bucket_name: The storage bucket name.
            object_name: The destination path/name in storage.
            data: File-like object containing the data.
            size: Size of the file in bytes.
            content_type: MIME type of the file.

        Raises:
            StorageError: If the upload fails.
        """
        pass

    @abstractmethod
    def delete(self, bucket_name: str, object_name: str) -> None:
        """
        Deletes an object from storage.

        Raises:
            StorageError: If the delete fails.
        """
        pass

    @abstractmethod
    def staged_uri(self, bucket_name: str, object_name: str) -> str:
        """
        Returns a URI the transcription service can fetch the object from.

        Raises:
            StorageError: If the URI cannot be generated.
        """
        pass
