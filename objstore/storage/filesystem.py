"""
Virtual filesystem primitives used by the in-memory object store.

The object store only needs four operations (mkdir, write_file, read_file,
stat), so they are modelled as a small injectable interface. Failures are
reported with the built-in OSError subclasses, the same ones pathlib and
os raise, so callers classify them by type rather than by message.
"""
import errno
import os
import stat as stat_module
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path, PurePosixPath
from uuid import uuid4

import aiofiles
import aiofiles.os

ROOT = PurePosixPath("/")


@dataclass(frozen=True)
class FileStat:
    path: str
    size: int
    is_dir: bool
    modified_at: datetime


def _os_error(exc_type: type[OSError], code: int, path: str) -> OSError:
    return exc_type(code, os.strerror(code), path)


class VirtualFilesystem(ABC):
    """Minimal hierarchical filesystem with '/'-separated paths."""

    @abstractmethod
    async def mkdir(self, path: str, parents: bool = False, exist_ok: bool = False) -> None:
        """
        Create a directory.

        Raises:
            FileExistsError: If path exists (unless exist_ok and it is a directory)
            FileNotFoundError: If the parent is missing and parents is False
            NotADirectoryError: If an ancestor is a regular file
        """
        pass

    @abstractmethod
    async def write_file(self, path: str, data: bytes) -> None:
        """
        Create or replace a regular file.

        Raises:
            FileNotFoundError: If the parent directory is missing
            IsADirectoryError: If path is a directory
        """
        pass

    @abstractmethod
    async def read_file(self, path: str) -> bytes:
        """
        Read a regular file.

        Raises:
            FileNotFoundError: If path does not exist
            IsADirectoryError: If path is a directory
        """
        pass

    @abstractmethod
    async def stat(self, path: str) -> FileStat:
        """
        Describe a file or directory.

        Raises:
            FileNotFoundError: If path does not exist
            NotADirectoryError: If a parent component is a regular file
        """
        pass


class MemoryFilesystem(VirtualFilesystem):
    """
    Filesystem held entirely in process memory.

    Each instance owns its own tree; nothing is shared between instances.
    All mutations happen under one lock, so concurrent directory creation
    for the same bucket cannot race.
    """

    def __init__(self):
        self._dirs: dict[PurePosixPath, datetime] = {ROOT: datetime.now(timezone.utc)}
        self._files: dict[PurePosixPath, tuple[bytes, datetime]] = {}
        self._lock = threading.Lock()

    @staticmethod
    def _normalize(path: str) -> PurePosixPath:
        return ROOT / path

    async def mkdir(self, path: str, parents: bool = False, exist_ok: bool = False) -> None:
        target = self._normalize(path)

        with self._lock:
            if target in self._files:
                raise _os_error(FileExistsError, errno.EEXIST, path)
            if target in self._dirs:
                if exist_ok:
                    return
                raise _os_error(FileExistsError, errno.EEXIST, path)

            if target.parent not in self._dirs and not parents:
                if target.parent in self._files:
                    raise _os_error(NotADirectoryError, errno.ENOTDIR, path)
                raise _os_error(FileNotFoundError, errno.ENOENT, path)

            now = datetime.now(timezone.utc)
            # Ancestors from the root down, then the target itself
            for directory in [*reversed(target.parents), target]:
                if directory in self._files:
                    raise _os_error(NotADirectoryError, errno.ENOTDIR, path)
                self._dirs.setdefault(directory, now)

    async def write_file(self, path: str, data: bytes) -> None:
        target = self._normalize(path)

        with self._lock:
            if target in self._dirs:
                raise _os_error(IsADirectoryError, errno.EISDIR, path)
            if target.parent in self._files:
                raise _os_error(NotADirectoryError, errno.ENOTDIR, path)
            if target.parent not in self._dirs:
                raise _os_error(FileNotFoundError, errno.ENOENT, path)

            self._files[target] = (bytes(data), datetime.now(timezone.utc))

    async def read_file(self, path: str) -> bytes:
        target = self._normalize(path)

        with self._lock:
            if target in self._dirs:
                raise _os_error(IsADirectoryError, errno.EISDIR, path)
            try:
                data, _ = self._files[target]
            except KeyError:
                raise _os_error(FileNotFoundError, errno.ENOENT, path) from None

        return data

    async def stat(self, path: str) -> FileStat:
        target = self._normalize(path)

        with self._lock:
            if target in self._dirs:
                return FileStat(
                    path=str(target), size=0, is_dir=True, modified_at=self._dirs[target]
                )
            if target in self._files:
                data, modified_at = self._files[target]
                return FileStat(
                    path=str(target), size=len(data), is_dir=False, modified_at=modified_at
                )

        raise _os_error(FileNotFoundError, errno.ENOENT, path)


class LocalFilesystem(VirtualFilesystem):
    """
    Filesystem rooted in a real directory on disk.

    Lets the in-memory object store persist between runs during local
    development. File contents go through aiofiles; replacing a file is
    done by writing a temporary sibling and renaming it over the target.
    """

    def __init__(self, base_path: str | Path):
        """
        Initialize local filesystem.

        Args:
            base_path: Directory all paths are resolved under (created if missing)
        """
        self.base_path = Path(base_path)
        self.base_path.mkdir(parents=True, exist_ok=True)

    def _resolve(self, path: str) -> Path:
        """
        Map a virtual path onto base_path.

        Raises:
            ValueError: If the path contains '..' segments
        """
        relative = PurePosixPath(path.lstrip("/"))
        if ".." in relative.parts:
            raise ValueError(f"Path escapes filesystem root: {path}")
        return self.base_path.joinpath(*relative.parts)

    async def mkdir(self, path: str, parents: bool = False, exist_ok: bool = False) -> None:
        self._resolve(path).mkdir(parents=parents, exist_ok=exist_ok)

    async def write_file(self, path: str, data: bytes) -> None:
        target = self._resolve(path)
        temp_path = target.with_name(f".{target.name}.{uuid4().hex}.tmp")

        try:
            async with aiofiles.open(temp_path, "wb") as f:
                await f.write(data)
            # Atomic move (rename)
            os.replace(temp_path, target)
        except OSError:
            # Clean up partial file on error
            if temp_path.exists():
                temp_path.unlink()
            raise

    async def read_file(self, path: str) -> bytes:
        async with aiofiles.open(self._resolve(path), "rb") as f:
            return await f.read()

    async def stat(self, path: str) -> FileStat:
        result = await aiofiles.os.stat(self._resolve(path))
        return FileStat(
            path=str(ROOT / path),
            size=result.st_size,
            is_dir=stat_module.S_ISDIR(result.st_mode),
            modified_at=datetime.fromtimestamp(result.st_mtime, tz=timezone.utc),
        )
