"""
Shared fixtures for objstore tests.
"""
import pytest
from botocore.exceptions import ClientError

from objstore.storage.filesystem import LocalFilesystem
from objstore.storage.memory import MemoryObjectStore
from objstore.storage.s3 import S3ObjectStore


def client_error(code: str, operation_name: str = "GetObject") -> ClientError:
    """Build a botocore ClientError carrying the given error code."""
    return ClientError(
        {"Error": {"Code": code, "Message": f"{code} raised by test"}},
        operation_name,
    )


class FakeS3Client:
    """
    Dict-backed stand-in for the boto3 S3 client calls the store makes.

    Mirrors S3 behavior the store depends on: uploads to a missing bucket
    fail, downloads of a missing key fail with a 404 from HeadObject, and
    creating a bucket twice fails with BucketAlreadyOwnedByYou.
    """

    def __init__(self):
        self.buckets: dict[str, dict[str, bytes]] = {}
        self.create_bucket_calls: list[dict] = []

    def create_bucket(self, **kwargs):
        self.create_bucket_calls.append(kwargs)
        if kwargs["Bucket"] in self.buckets:
            raise client_error("BucketAlreadyOwnedByYou", "CreateBucket")
        self.buckets[kwargs["Bucket"]] = {}

    def upload_fileobj(self, Fileobj, Bucket, Key, ExtraArgs=None, Callback=None, Config=None):
        if Bucket not in self.buckets:
            raise client_error("NoSuchBucket", "PutObject")
        self.buckets[Bucket][Key] = Fileobj.read()

    def download_fileobj(self, Bucket, Key, Fileobj, ExtraArgs=None, Callback=None, Config=None):
        try:
            data = self.buckets[Bucket][Key]
        except KeyError:
            raise client_error("404", "HeadObject") from None
        Fileobj.write(data)

    def generate_presigned_url(self, ClientMethod, Params=None, ExpiresIn=3600, HttpMethod=None):
        return (
            f"https://{Params['Bucket']}.s3.amazonaws.com/{Params['Key']}"
            f"?X-Amz-Expires={ExpiresIn}"
        )


@pytest.fixture
def memory_store():
    """In-memory store with a private filesystem."""
    return MemoryObjectStore()


@pytest.fixture
def local_store(tmp_path):
    """In-memory store persisting to a temporary directory."""
    return MemoryObjectStore(filesystem=LocalFilesystem(tmp_path / "objects"))


@pytest.fixture
def fake_s3_client():
    return FakeS3Client()


@pytest.fixture
def fake_s3_store(fake_s3_client):
    """S3 store over the fake client with default settings."""
    return S3ObjectStore(fake_s3_client)
