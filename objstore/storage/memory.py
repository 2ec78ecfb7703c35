"""
Object store backed by a virtual filesystem.

Used for tests and local development. Each bucket is a top-level
directory and each key a file path beneath it. By default the store owns
a private MemoryFilesystem; pass a LocalFilesystem to keep objects on disk.
"""
import logging
from datetime import timedelta

from objstore.storage.base import ObjectStore
from objstore.storage.exceptions import NamespaceError, ObjectNotFoundError, StorageError
from objstore.storage.filesystem import MemoryFilesystem, VirtualFilesystem
from objstore.utils.streams import Body, read_body
from objstore.utils.validators import validate_path_location

logger = logging.getLogger(__name__)


def key_path(bucket: str, key: str) -> str:
    return f"{bucket}/{key}"


class MemoryObjectStore(ObjectStore):
    """
    In-process object store with the same semantics as the S3 store.

    Presigned URLs are synthesized as https://{bucket}/{key} and never
    touch storage.
    """

    def __init__(self, filesystem: VirtualFilesystem | None = None, compression_level: int = -1):
        """
        Initialize in-memory object store.

        Args:
            filesystem: Backing filesystem (default: a new, private MemoryFilesystem)
            compression_level: zlib level used when uploads request compression
        """
        super().__init__(compression_level=compression_level)
        self.filesystem = filesystem if filesystem is not None else MemoryFilesystem()

    def get_presigned_url(self, bucket: str, key: str, expires_in: timedelta) -> str:
        return f"https://{bucket}/{key}"

    def _validate_location(self, bucket: str, key: str) -> None:
        validate_path_location(bucket, key)

    async def _put_object(self, bucket: str, key: str, body: Body) -> None:
        data = await read_body(body)

        await self._ensure_bucket(bucket)

        path = key_path(bucket, key)
        try:
            # Keys may contain '/', which maps onto nested directories
            if "/" in key:
                await self.filesystem.mkdir(path.rsplit("/", 1)[0], parents=True, exist_ok=True)
            await self.filesystem.write_file(path, data)
        except OSError as e:
            raise StorageError(f"Failed to store object {path}: {e}") from e

        logger.debug(f"Stored {len(data)} bytes at {path}")

    async def _get_object(self, bucket: str, key: str) -> bytes:
        path = key_path(bucket, key)

        try:
            file_stat = await self.filesystem.stat(path)
            if file_stat.is_dir:
                raise ObjectNotFoundError(bucket, key)
            data = await self.filesystem.read_file(path)
        except (FileNotFoundError, NotADirectoryError) as e:
            # A key below an existing object resolves through a regular file
            raise ObjectNotFoundError(bucket, key) from e

        logger.debug(f"Read {len(data)} bytes from {path}")
        return data

    async def _ensure_bucket(self, bucket: str) -> None:
        """
        Create the bucket directory if it does not exist yet.

        Raises:
            NamespaceError: If creation fails for any reason other than
                the directory already existing
        """
        try:
            await self.filesystem.mkdir(bucket)
        except FileExistsError:
            # Bucket names are not unique per upload, so this is expected
            return
        except OSError as e:
            raise NamespaceError(bucket, str(e)) from e

        logger.debug(f"Created bucket {bucket}")
