"""Chooses the bucket the audio file is staged in."""

import logging

from distill.exceptions import PreconditionError, RemoteCallError, StorageError
from distill.infrastructure.interfaces import (
    BucketPrompter,
    ProgressReporter,
    StorageClient,
)

logger = logging.getLogger(__name__)

BUCKET_PROMPT = "Choose a destination bucket for your audio file"


class DestinationResolver:
    """Resolves the destination bucket from configuration or an interactive choice."""

    def __init__(
        self,
        storage: StorageClient,
        prompter: BucketPrompter,
        default_bucket: str = "",
        reporter: ProgressReporter | None = None,
    ):
        self._storage = storage
        self._prompter = prompter
        self._default_bucket = default_bucket
        self._reporter = reporter

    def resolve(self) -> str:
        """
        Returns the bucket to upload into.

        The configured default is used without prompting when the account
        lists it. Otherwise every listed bucket is offered to the user.

        Raises:
            RemoteCallError: If the bucket listing fails.
            PreconditionError: If no non-empty bucket name can be resolved.
        """
        try:
            buckets = self._storage.list_buckets()
        except StorageError as e:
            raise RemoteCallError("list buckets", cause=e) from e

        if self._default_bucket:
            if self._default_bucket in buckets:
                logger.info(
                    "Using configured bucket", extra={"bucket": self._default_bucket}
                )
                return self._default_bucket
            self._warn(
                f"The configured bucket '{self._default_bucket}' was not found."
            )

        if not buckets:
            raise PreconditionError(
                "No valid bucket found. Please check your storage configuration."
            )

        selection = self._prompter.choose(BUCKET_PROMPT, buckets)
        if not 0 <= selection < len(buckets):
            raise PreconditionError(f"Invalid bucket selection: {selection}")

        bucket_name = buckets[selection]
        if not bucket_name:
            raise PreconditionError(
                "No valid bucket found. Please check your storage configuration."
            )

        logger.info("Bucket selected", extra={"bucket": bucket_name})
        return bucket_name

    def _warn(self, message: str) -> None:
        logger.warning(message)
        if self._reporter is not None:
            self._reporter.warn(message)
