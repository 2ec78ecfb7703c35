"""objstore: uniform object storage with interchangeable S3 and in-memory backends."""

from objstore.dependencies.storage import get_store
from objstore.storage import (
    CompressionError,
    MemoryObjectStore,
    NamespaceError,
    ObjectNotFoundError,
    ObjectStore,
    Options,
    S3ObjectStore,
    StorageError,
    ValidationError,
    use_compression,
)

__all__ = [
    "get_store",
    "ObjectStore",
    "MemoryObjectStore",
    "S3ObjectStore",
    "Options",
    "use_compression",
    "StorageError",
    "ValidationError",
    "ObjectNotFoundError",
    "CompressionError",
    "NamespaceError",
]
