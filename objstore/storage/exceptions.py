"""
Storage-specific exceptions.

Every error raised by the object store itself derives from StorageError.
Errors coming from the remote service client (botocore) are not wrapped
and reach the caller unchanged.
"""


class StorageError(Exception):
    """Base exception for object store operations."""

    pass


class ValidationError(StorageError):
    """Raised when a bucket, key or options value is rejected before any I/O."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__("; ".join(errors))


class ObjectNotFoundError(StorageError):
    """Raised when no object is stored at the requested bucket and key."""

    def __init__(self, bucket: str, key: str):
        self.bucket = bucket
        self.key = key
        super().__init__(f"Object not found: {bucket}/{key}")


class CompressionError(StorageError):
    """Raised when compressing or decompressing a payload fails."""

    pass


class NamespaceError(StorageError):
    """Raised when a bucket cannot be created for a reason other than already existing."""

    def __init__(self, bucket: str, reason: str):
        self.bucket = bucket
        self.reason = reason
        super().__init__(f"Failed to create bucket {bucket}: {reason}")
