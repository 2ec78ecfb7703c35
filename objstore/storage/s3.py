"""
S3 object store.

Talks to AWS S3 or any S3-compatible service (MinIO, LocalStack) through
boto3. Client errors are passed to the caller unchanged, except that a
missing object on download is reported as ObjectNotFoundError (with the
original ClientError as its cause) so not-found looks the same on every
backend.
"""
import asyncio
import io
import logging
import threading
from datetime import timedelta

import boto3
from boto3.s3.transfer import TransferConfig
from botocore.client import BaseClient
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from objstore.config import Settings
from objstore.storage.base import ObjectStore
from objstore.storage.exceptions import NamespaceError, ObjectNotFoundError
from objstore.utils.streams import Body, is_file_like, read_body

logger = logging.getLogger(__name__)

# Stalled downloads are abandoned after two minutes
DEFAULT_DOWNLOAD_TIMEOUT = 120.0

NOT_FOUND_CODES = ("404", "NoSuchKey", "NotFound")
BUCKET_EXISTS_CODES = ("BucketAlreadyOwnedByYou",)

# us-east-1 rejects an explicit LocationConstraint
DEFAULT_REGION = "us-east-1"

MB = 1024 * 1024


def _error_code(error: ClientError) -> str:
    return str(error.response.get("Error", {}).get("Code", ""))


class S3ObjectStore(ObjectStore):
    """
    Object store backed by an S3 client.

    Uploads go through the managed multipart transfer, so large bodies are
    sent in chunks. Downloads buffer the whole object in memory and are
    bounded by download_timeout seconds.
    """

    def __init__(
        self,
        client: BaseClient,
        *,
        download_timeout: float = DEFAULT_DOWNLOAD_TIMEOUT,
        transfer_config: TransferConfig | None = None,
        create_buckets: bool = True,
        region: str | None = None,
        compression_level: int = -1,
    ):
        """
        Initialize S3 object store.

        Args:
            client: Configured boto3 S3 client
            download_timeout: Wall-clock limit for a download, in seconds
            transfer_config: Multipart settings for uploads and downloads
            create_buckets: Create buckets on first upload (pass False when the
                credentials lack CreateBucket permission)
            region: Region used as LocationConstraint when creating buckets
            compression_level: zlib level used when uploads request compression
        """
        super().__init__(compression_level=compression_level)
        self.client = client
        self.download_timeout = download_timeout
        self.transfer_config = transfer_config
        self.create_buckets = create_buckets
        self.region = region

        self._known_buckets: set[str] = set()
        self._bucket_lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings: Settings) -> "S3ObjectStore":
        """Build a store and its boto3 client from settings."""
        client_kwargs: dict[str, object] = {
            "region_name": settings.AWS_REGION,
            "config": Config(
                signature_version="s3v4",
                connect_timeout=settings.S3_CONNECT_TIMEOUT_SECONDS,
                read_timeout=settings.S3_READ_TIMEOUT_SECONDS,
            ),
        }

        if settings.AWS_ACCESS_KEY_ID and settings.AWS_SECRET_ACCESS_KEY:
            client_kwargs["aws_access_key_id"] = settings.AWS_ACCESS_KEY_ID
            client_kwargs["aws_secret_access_key"] = settings.AWS_SECRET_ACCESS_KEY

        # Endpoint override for MinIO / LocalStack
        if settings.S3_ENDPOINT_URL:
            client_kwargs["endpoint_url"] = settings.S3_ENDPOINT_URL

        transfer_config = TransferConfig(
            multipart_threshold=settings.S3_MULTIPART_THRESHOLD_MB * MB,
            multipart_chunksize=settings.S3_MULTIPART_CHUNK_SIZE_MB * MB,
        )

        return cls(
            boto3.client("s3", **client_kwargs),
            download_timeout=settings.S3_DOWNLOAD_TIMEOUT_SECONDS,
            transfer_config=transfer_config,
            create_buckets=settings.S3_CREATE_BUCKETS,
            region=settings.AWS_REGION,
            compression_level=settings.COMPRESSION_LEVEL,
        )

    def get_presigned_url(self, bucket: str, key: str, expires_in: timedelta) -> str:
        return self.client.generate_presigned_url(
            ClientMethod="get_object",
            Params={"Bucket": bucket, "Key": key},
            ExpiresIn=int(expires_in.total_seconds()),
        )

    async def _put_object(self, bucket: str, key: str, body: Body) -> None:
        if self.create_buckets:
            await asyncio.to_thread(self._ensure_bucket, bucket)

        # Uncompressed file-like bodies are streamed straight to the transfer
        if is_file_like(body):
            fileobj = body
        else:
            fileobj = io.BytesIO(await read_body(body))

        await asyncio.to_thread(
            self.client.upload_fileobj,
            fileobj,
            bucket,
            key,
            Config=self.transfer_config,
        )

        logger.debug(f"Uploaded s3://{bucket}/{key}")

    async def _get_object(self, bucket: str, key: str) -> bytes:
        buffer = io.BytesIO()

        try:
            await asyncio.wait_for(
                asyncio.to_thread(
                    self.client.download_fileobj,
                    bucket,
                    key,
                    buffer,
                    Config=self.transfer_config,
                ),
                timeout=self.download_timeout,
            )
        except asyncio.TimeoutError as e:
            raise TimeoutError(
                f"Download of s3://{bucket}/{key} exceeded {self.download_timeout}s"
            ) from e
        except ClientError as e:
            if _error_code(e) in NOT_FOUND_CODES:
                raise ObjectNotFoundError(bucket, key) from e
            raise

        data = buffer.getvalue()
        logger.debug(f"Downloaded {len(data)} bytes from s3://{bucket}/{key}")
        return data

    def _ensure_bucket(self, bucket: str) -> None:
        """
        Create the bucket once per store instance.

        Raises:
            NamespaceError: If creation fails for any reason other than the
                bucket already being owned by the caller
        """
        with self._bucket_lock:
            if bucket in self._known_buckets:
                return

            create_kwargs: dict[str, object] = {"Bucket": bucket}
            if self.region and self.region != DEFAULT_REGION:
                create_kwargs["CreateBucketConfiguration"] = {
                    "LocationConstraint": self.region
                }

            try:
                self.client.create_bucket(**create_kwargs)
                logger.debug(f"Created bucket {bucket}")
            except ClientError as e:
                if _error_code(e) not in BUCKET_EXISTS_CODES:
                    raise NamespaceError(bucket, str(e)) from e
            except BotoCoreError as e:
                raise NamespaceError(bucket, str(e)) from e

            self._known_buckets.add(bucket)
