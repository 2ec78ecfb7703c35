"""
Object store selection.

This module builds the configured backend so callers depend on the
ObjectStore contract rather than on a concrete implementation.
"""
import logging

from objstore.config import Settings
from objstore.config import settings as default_settings
from objstore.storage.base import ObjectStore
from objstore.storage.filesystem import LocalFilesystem
from objstore.storage.memory import MemoryObjectStore
from objstore.storage.s3 import S3ObjectStore

logger = logging.getLogger(__name__)


def get_store(settings: Settings | None = None) -> ObjectStore:
    """
    Return an object store based on configuration.

    This allows switching between in-memory, local disk and S3 storage
    by changing the STORAGE_BACKEND environment variable. Every call
    returns a new instance; in-memory stores never share data.

    Args:
        settings: Settings to read (default: module-level settings)

    Returns:
        ObjectStore instance

    Raises:
        ValueError: If STORAGE_BACKEND is not supported
    """
    settings = settings or default_settings
    backend = settings.STORAGE_BACKEND.lower()

    if backend == "memory":
        store = MemoryObjectStore(compression_level=settings.COMPRESSION_LEVEL)
    elif backend == "local":
        store = MemoryObjectStore(
            filesystem=LocalFilesystem(settings.LOCAL_STORAGE_PATH),
            compression_level=settings.COMPRESSION_LEVEL,
        )
    elif backend == "s3":
        store = S3ObjectStore.from_settings(settings)
    else:
        raise ValueError(f"Unknown storage backend: {settings.STORAGE_BACKEND}")

    logger.debug(f"Using {backend} object store")
    return store
