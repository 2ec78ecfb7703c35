"""
zlib stream compression for stored payloads.

Payloads are fed through compressobj/decompressobj in fixed-size slices
so the transform works the same way regardless of payload size.
"""
import zlib

from objstore.storage.exceptions import CompressionError

# 64KB slices, same unit the filesystem backends write in
CHUNK_SIZE = 64 * 1024


def compress(data: bytes, level: int = zlib.Z_DEFAULT_COMPRESSION) -> bytes:
    """
    Compress data into a zlib stream.

    Args:
        data: Raw payload
        level: zlib compression level (-1 for the library default, 0-9)

    Returns:
        Compressed payload

    Raises:
        CompressionError: If the compressor rejects the level or the data
    """
    try:
        compressor = zlib.compressobj(level)
        parts = []
        view = memoryview(data)
        for offset in range(0, len(view), CHUNK_SIZE):
            parts.append(compressor.compress(view[offset:offset + CHUNK_SIZE]))
        parts.append(compressor.flush())
    except (zlib.error, ValueError) as e:
        raise CompressionError(f"Failed to compress payload: {e}") from e

    return b"".join(parts)


def decompress(data: bytes) -> bytes:
    """
    Decompress a zlib stream produced by compress().

    Raises:
        CompressionError: If the data is not a zlib stream, is truncated,
            or carries bytes after the end of the stream
    """
    decompressor = zlib.decompressobj()
    parts = []
    view = memoryview(data)

    try:
        for offset in range(0, len(view), CHUNK_SIZE):
            parts.append(decompressor.decompress(view[offset:offset + CHUNK_SIZE]))
        parts.append(decompressor.flush())
    except zlib.error as e:
        raise CompressionError(f"Failed to decompress payload: {e}") from e

    if not decompressor.eof:
        raise CompressionError("Failed to decompress payload: stream is truncated")
    if decompressor.unused_data:
        raise CompressionError(
            f"Failed to decompress payload: {len(decompressor.unused_data)} "
            "unexpected bytes after end of stream"
        )

    return b"".join(parts)
