import boto3
import pytest
from fastapi.testclient import TestClient
from moto import mock_aws

from r2gallery.main import app
from r2gallery.models import ObjectEntry
from r2gallery.storage import MemoryObjectStore, StorageError, ObjectStore, get_store


class FailingStore(ObjectStore):
    def list_objects(self):
        raise StorageError("connection refused by storage.internal:443")


@pytest.fixture
def make_client():
    """Returns a factory building a TestClient bound to the given store."""
    def _make(store):
        app.dependency_overrides[get_store] = lambda: store
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()


@pytest.fixture
def entries():
    return [ObjectEntry(key=f"photos/img_{i:03d}.jpg", size=i) for i in range(1, 121)]


@pytest.fixture
def memory_client(make_client, entries):
    return make_client(MemoryObjectStore(entries))


@pytest.fixture
def failing_client(make_client):
    return make_client(FailingStore())


@pytest.fixture
def aws_credentials(monkeypatch):
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")


@pytest.fixture
def s3_bucket(aws_credentials):
    """
    Spins up a mock S3, creates an empty bucket and yields (client, bucket name).
    Torn down when the test ends.
    """
    with mock_aws():
        s3 = boto3.client("s3", region_name="us-east-1")
        bucket_name = "gallery-test"
        s3.create_bucket(Bucket=bucket_name)
        yield s3, bucket_name
