"""
Abstract base class for object stores.

This module defines the contract every backend implements: presigned
URLs, upload and download of blobs addressed by (bucket, key). Option
handling and compression live here so that every backend applies them
the same way; backends only move bytes.
"""
from abc import ABC, abstractmethod
from datetime import timedelta

from objstore.storage.compression import compress, decompress
from objstore.storage.options import Options, check_options, use_compression
from objstore.utils.streams import Body, read_body
from objstore.utils.validators import validate_location


class ObjectStore(ABC):
    """
    Abstract base class for object stores.

    Objects are raw bytes, optionally compressed at rest. Whether an object
    was stored compressed is not recorded anywhere: callers must pass the
    same options to download() that they passed to upload().
    """

    def __init__(self, compression_level: int = -1):
        """
        Initialize the store.

        Args:
            compression_level: zlib level used when uploads request compression
        """
        self.compression_level = compression_level

    @abstractmethod
    def get_presigned_url(self, bucket: str, key: str, expires_in: timedelta) -> str:
        """
        Generate a URL a third party can use to fetch an object.

        The object does not need to exist yet.

        Args:
            bucket: Bucket name
            key: Object key within the bucket
            expires_in: Maximum lifetime of the URL

        Returns:
            URL string
        """
        pass

    async def upload(
        self,
        body: Body,
        bucket: str,
        key: str,
        options: Options | int = Options.NONE,
    ) -> None:
        """
        Store the whole of body at bucket/key, replacing any existing object.

        The bucket is created on first use. When options request compression,
        the body is read into memory and compressed before anything is written.

        Args:
            body: bytes, binary file-like object or async iterator of chunks
            bucket: Bucket name
            key: Object key within the bucket
            options: Option flags

        Raises:
            ValidationError: If bucket or key is empty
            CompressionError: If compression fails (nothing is written)
            NamespaceError: If the bucket cannot be created
        """
        self._validate_location(bucket, key)
        options = check_options(options)

        payload = body
        if use_compression(options):
            payload = compress(await read_body(body), self.compression_level)

        await self._put_object(bucket, key, payload)

    async def download(
        self,
        bucket: str,
        key: str,
        options: Options | int = Options.NONE,
    ) -> bytes:
        """
        Retrieve the object stored at bucket/key.

        Args:
            bucket: Bucket name
            key: Object key within the bucket
            options: Option flags; compression means the stored payload is
                decompressed before it is returned

        Returns:
            Object contents

        Raises:
            ValidationError: If bucket or key is empty
            ObjectNotFoundError: If no object is stored at bucket/key
            CompressionError: If decompression was requested and fails
        """
        self._validate_location(bucket, key)
        options = check_options(options)

        # Transfer errors propagate from here, before any decompression
        data = await self._get_object(bucket, key)

        if use_compression(options):
            return decompress(data)
        return data

    def _validate_location(self, bucket: str, key: str) -> None:
        validate_location(bucket, key)

    @abstractmethod
    async def _put_object(self, bucket: str, key: str, body: Body) -> None:
        """
        Write body as the object at bucket/key, creating the bucket if needed.

        Args:
            bucket: Bucket name (already validated)
            key: Object key (already validated)
            body: Payload to store, already compressed if requested
        """
        pass

    @abstractmethod
    async def _get_object(self, bucket: str, key: str) -> bytes:
        """
        Read the stored bytes at bucket/key.

        Raises:
            ObjectNotFoundError: If no object is stored at bucket/key
        """
        pass
