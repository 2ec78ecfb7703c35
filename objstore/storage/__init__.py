"""
Object storage abstraction.

This package provides one contract for storing blobs addressed by
(bucket, key), with an S3 backend and an in-memory backend that behave
identically, so callers can swap one for the other in tests.
"""

from objstore.storage.base import ObjectStore
from objstore.storage.exceptions import (
    CompressionError,
    NamespaceError,
    ObjectNotFoundError,
    StorageError,
    ValidationError,
)
from objstore.storage.filesystem import LocalFilesystem, MemoryFilesystem, VirtualFilesystem
from objstore.storage.memory import MemoryObjectStore
from objstore.storage.options import Options, use_compression
from objstore.storage.s3 import S3ObjectStore

__all__ = [
    "ObjectStore",
    "MemoryObjectStore",
    "S3ObjectStore",
    "VirtualFilesystem",
    "MemoryFilesystem",
    "LocalFilesystem",
    "Options",
    "use_compression",
    "StorageError",
    "ValidationError",
    "ObjectNotFoundError",
    "CompressionError",
    "NamespaceError",
]
