import pytest

from distill.domain import RegionalStorageFactory, ResolvedDestination, region_from_constraint
from distill.exceptions import StorageError

from conftest import FakeStorage


@pytest.mark.parametrize(
    "constraint, expected",
    [
        ("", "us-east-1"),
        (None, "us-east-1"),
        ("  ", "us-east-1"),
        ("EU", "eu-west-1"),
        ("eu-central-1", "eu-central-1"),
        ("ap-southeast-2", "ap-southeast-2"),
    ],
)
def test_region_from_constraint(constraint, expected):
    assert region_from_constraint(constraint) == expected


def test_empty_constraint_uses_configured_default():
    assert region_from_constraint("", "us-west-2") == "us-west-2"


def test_for_bucket_builds_a_new_client_for_the_bucket_region():
    locator = FakeStorage(constraint="eu-west-2")
    regional = FakeStorage()
    built = []

    def build(region):
        built.append(region)
        return regional

    factory = RegionalStorageFactory(locator, build)
    destination, client = factory.for_bucket("audio-bucket")

    assert destination == ResolvedDestination(bucket_name="audio-bucket", region="eu-west-2")
    assert client is regional
    assert client is not locator
    assert built == ["eu-west-2"]
    assert locator.calls == [("locate_bucket", "audio-bucket")]


def test_for_bucket_maps_empty_constraint_to_us_east_1():
    factory = RegionalStorageFactory(FakeStorage(constraint=""), lambda region: FakeStorage())

    destination, _ = factory.for_bucket("legacy-bucket")

    assert destination.region == "us-east-1"


def test_for_bucket_propagates_location_errors():
    class _BrokenLocator(FakeStorage):
        def locate_bucket(self, bucket_name):
            raise StorageError("locate bucket", bucket_name, cause=PermissionError("denied"))

    built = []
    factory = RegionalStorageFactory(_BrokenLocator(), built.append)

    with pytest.raises(StorageError):
        factory.for_bucket("private-bucket")
    assert built == []
