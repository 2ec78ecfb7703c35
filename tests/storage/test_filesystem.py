"""
Tests for the virtual filesystem implementations.

The same behavior is checked against MemoryFilesystem and LocalFilesystem.
"""
import pytest

from objstore.storage.filesystem import LocalFilesystem, MemoryFilesystem


@pytest.fixture(params=["memory", "local"])
def filesystem(request, tmp_path):
    if request.param == "memory":
        return MemoryFilesystem()
    return LocalFilesystem(tmp_path / "root")


@pytest.mark.asyncio
async def test_write_and_read(filesystem):
    await filesystem.mkdir("bucket")
    await filesystem.write_file("bucket/file", b"content")

    assert await filesystem.read_file("bucket/file") == b"content"


@pytest.mark.asyncio
async def test_write_replaces(filesystem):
    await filesystem.mkdir("bucket")
    await filesystem.write_file("bucket/file", b"a much longer first version")
    await filesystem.write_file("bucket/file", b"short")

    assert await filesystem.read_file("bucket/file") == b"short"


@pytest.mark.asyncio
async def test_mkdir_existing_raises(filesystem):
    await filesystem.mkdir("bucket")

    with pytest.raises(FileExistsError):
        await filesystem.mkdir("bucket")


@pytest.mark.asyncio
async def test_mkdir_exist_ok(filesystem):
    await filesystem.mkdir("bucket")

    await filesystem.mkdir("bucket", exist_ok=True)


@pytest.mark.asyncio
async def test_mkdir_missing_parent(filesystem):
    with pytest.raises(FileNotFoundError):
        await filesystem.mkdir("bucket/a/b")


@pytest.mark.asyncio
async def test_mkdir_parents(filesystem):
    await filesystem.mkdir("bucket/a/b", parents=True)

    assert (await filesystem.stat("bucket")).is_dir
    assert (await filesystem.stat("bucket/a/b")).is_dir


@pytest.mark.asyncio
async def test_mkdir_over_file_raises(filesystem):
    await filesystem.mkdir("bucket")
    await filesystem.write_file("bucket/a", b"file")

    with pytest.raises(FileExistsError):
        await filesystem.mkdir("bucket/a", exist_ok=True)


@pytest.mark.asyncio
async def test_write_without_parent_raises(filesystem):
    with pytest.raises(FileNotFoundError):
        await filesystem.write_file("missing/file", b"data")


@pytest.mark.asyncio
async def test_read_missing_raises(filesystem):
    with pytest.raises(FileNotFoundError):
        await filesystem.read_file("missing")


@pytest.mark.asyncio
async def test_read_directory_raises(filesystem):
    await filesystem.mkdir("bucket")

    with pytest.raises(IsADirectoryError):
        await filesystem.read_file("bucket")


@pytest.mark.asyncio
async def test_stat_file(filesystem):
    await filesystem.mkdir("bucket")
    await filesystem.write_file("bucket/file", b"12345")

    file_stat = await filesystem.stat("bucket/file")

    assert file_stat.size == 5
    assert not file_stat.is_dir
    assert file_stat.path == "/bucket/file"
    assert file_stat.modified_at.tzinfo is not None


@pytest.mark.asyncio
async def test_stat_missing_raises(filesystem):
    with pytest.raises(FileNotFoundError):
        await filesystem.stat("missing")


@pytest.mark.asyncio
async def test_memory_filesystems_are_independent():
    first = MemoryFilesystem()
    second = MemoryFilesystem()

    await first.mkdir("bucket")

    with pytest.raises(FileNotFoundError):
        await second.stat("bucket")


@pytest.mark.asyncio
async def test_local_filesystem_stays_under_root(tmp_path):
    filesystem = LocalFilesystem(tmp_path / "root")

    with pytest.raises(ValueError):
        await filesystem.read_file("../outside")


@pytest.mark.asyncio
async def test_local_filesystem_leaves_no_temp_files(tmp_path):
    filesystem = LocalFilesystem(tmp_path / "root")
    await filesystem.mkdir("bucket")

    await filesystem.write_file("bucket/file", b"data")
    await filesystem.write_file("bucket/file", b"data again")

    assert [p.name for p in (tmp_path / "root" / "bucket").iterdir()] == ["file"]
