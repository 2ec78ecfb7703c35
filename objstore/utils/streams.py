"""Helpers for consuming upload bodies."""
from typing import AsyncIterator, BinaryIO, Union

Body = Union[bytes, bytearray, memoryview, BinaryIO, AsyncIterator[bytes]]

# Read file-like bodies in 64KB chunks
READ_CHUNK_SIZE = 64 * 1024


def is_file_like(body: object) -> bool:
    return hasattr(body, "read") and not hasattr(body, "__aiter__")


async def read_body(body: Body) -> bytes:
    """
    Read an upload body to the end and return its bytes.

    Accepts raw bytes, a binary file-like object, or an async iterator
    of byte chunks (the shape streaming request bodies arrive in).

    Raises:
        TypeError: If the body is none of the supported shapes
    """
    if isinstance(body, (bytes, bytearray, memoryview)):
        return bytes(body)

    # Check if stream is async (has __aiter__)
    if hasattr(body, "__aiter__"):
        chunks = []
        async for chunk in body:
            chunks.append(bytes(chunk))
        return b"".join(chunks)

    if hasattr(body, "read"):
        chunks = []
        while True:
            chunk = body.read(READ_CHUNK_SIZE)
            if not chunk:
                break
            chunks.append(bytes(chunk))
        return b"".join(chunks)

    raise TypeError(f"Unsupported upload body type: {type(body).__name__}")
