"""Builds storage clients bound to the region a bucket actually lives in."""

import logging
from collections.abc import Callable

from distill.infrastructure.interfaces import StorageClient

from .models import ResolvedDestination

logger = logging.getLogger(__name__)

DEFAULT_REGION = "us-east-1"

# Legacy constraint name still reported for buckets created in Ireland.
LOCATION_ALIASES = {
    "EU": "eu-west-1",
}


def region_from_constraint(
    location_constraint: str | None, default_region: str = DEFAULT_REGION
) -> str:
    """Maps a provider region constraint to a concrete region name."""
    constraint = (location_constraint or "").strip()
    # An empty constraint is the provider's alias for its default region.
    if not constraint:
        return default_region
    return LOCATION_ALIASES.get(constraint, constraint)


class RegionalStorageFactory:
    """Creates a storage client scoped to the region of a given bucket."""

    def __init__(
        self,
        locator: StorageClient,
        client_builder: Callable[[str], StorageClient],
        default_region: str = DEFAULT_REGION,
    ):
        self._locator = locator
        self._client_builder = client_builder
        self._default_region = default_region

    def for_bucket(
        self, bucket_name: str
    ) -> tuple[ResolvedDestination, StorageClient]:
        """
        Resolves the bucket's region and builds a new client for it.

        Args:
            bucket_name: The bucket the job will upload into.

        Returns:
            Tuple of (ResolvedDestination, region-scoped StorageClient).

        Raises:
            StorageError: If the bucket location cannot be read.
        """
        constraint = self._locator.locate_bucket(bucket_name)
        region = region_from_constraint(constraint, self._default_region)

        logger.info(
            "Bucket region resolved",
            extra={"bucket": bucket_name, "constraint": constraint, "region": region},
        )

        destination = ResolvedDestination(bucket_name=bucket_name, region=region)
        return destination, self._client_builder(region)
