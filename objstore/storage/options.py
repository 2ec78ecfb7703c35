"""
Per-call option flags.

Options is a 32-bit field where each bit is an independent capability.
Bits are allocated from the most significant end, so COMPRESSED is bit 31
and new flags take 30, 29, ... without changing existing values.
"""
from enum import IntFlag

from objstore.storage.exceptions import ValidationError

OPTIONS_MAX = 0xFFFFFFFF


class Options(IntFlag):
    NONE = 0
    # Upload: compress before writing. Download: stored payload is
    # compressed and must be decompressed before returning.
    COMPRESSED = 1 << 31


def check_options(options: Options | int) -> Options:
    """
    Coerce an options value into Options.

    Reserved bits are kept as-is so newer callers can pass flags this
    version does not know about.

    Raises:
        ValidationError: If the value does not fit in 32 unsigned bits
    """
    value = int(options)
    if value < 0 or value > OPTIONS_MAX:
        raise ValidationError([f"Options value {value:#x} does not fit in 32 bits"])
    return Options(value)


def use_compression(options: Options | int) -> bool:
    """Return True if the options request compression."""
    return bool(int(options) & Options.COMPRESSED)
