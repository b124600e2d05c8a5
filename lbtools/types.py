"""Basic constants and helpers shared across the package."""

from typing import NamedTuple, TypeVar

__all__ = [
    "Strings",
    "UNDEFINED_UINT16",
    "UNDEFINED_UINT32",
    "UNDEFINED_UINT64",
    "MAX_UINT32",
    "TIMEOUT_INDEFINITE",
    "TIMEOUT_DEFAULT",
    "BIT_ALL_32",
    "BIT_ALL_64",
    "BIT_NONE",
    "Timespec",
    "bit",
    "lb_max",
    "lb_min",
    "convert_to_timespec",
]

Strings = list[str]

UNDEFINED_UINT16 = 0xFFFF
"""A 'null' value for an uint16."""
UNDEFINED_UINT32 = 0xFFFFFFFF
"""A 'null' value for an uint32."""
UNDEFINED_UINT64 = 0xFFFFFFFFFFFFFFFF
"""A 'null' value for an uint64."""
MAX_UINT32 = 0xFFFFFFF0
"""The biggest usable value when using special uint32 values."""

TIMEOUT_INDEFINITE = 0xFFFFFFFF
"""Wait forever in methods taking a timeout."""
TIMEOUT_DEFAULT = 0xFFFFFFFE
"""Use the global default in methods taking a timeout."""

BIT_ALL_32 = 0xFFFFFFFF
BIT_ALL_64 = 0xFFFFFFFFFFFFFFFF
BIT_NONE = 0

SIZE_1KB = 1024
SIZE_10KB = 10240
SIZE_100KB = 102400
SIZE_1MB = 1048576
SIZE_10MB = 10485760
SIZE_100MB = 104857600
SIZE_1GB = 1073741824

SIZE_2KB = 2048
SIZE_4KB = 4096
SIZE_8KB = 8192
SIZE_16KB = 16384
SIZE_32KB = 32768
SIZE_64KB = 65536
SIZE_128KB = 131072
SIZE_256KB = 262144
SIZE_512KB = 524288
SIZE_2MB = 2097152
SIZE_4MB = 4194304
SIZE_8MB = 8388608
SIZE_16MB = 16777216
SIZE_32MB = 33554432
SIZE_48MB = 50331648
SIZE_64MB = 67108864
SIZE_128MB = 134217728
SIZE_256MB = 268435456
SIZE_512MB = 536870912
SIZE_4GB = 4294967296

_T = TypeVar("_T")


class Timespec(NamedTuple):
    """Seconds and nanoseconds, as in a unix timespec."""

    tv_sec: int
    tv_nsec: int


def bit(index: int) -> int:
    """Return the mask of bit *index*, counted from 1 up to 64."""
    if not 1 <= index <= 64:
        raise ValueError(f"bit index must be within 1..64, got {index}")
    return 1 << (index - 1)


def lb_max(a: _T, b: _T) -> _T:
    """Return *a* if it is greater than *b*, otherwise *b*."""
    return a if a > b else b


def lb_min(a: _T, b: _T) -> _T:
    """Return *a* if it is less than *b*, otherwise *b*."""
    return a if a < b else b


def convert_to_timespec(milliseconds: int) -> Timespec:
    """Convert an unsigned 32-bit millisecond count into a Timespec."""
    if not 0 <= milliseconds <= 0xFFFFFFFF:
        raise ValueError(f"milliseconds out of uint32 range: {milliseconds}")
    seconds, rest = divmod(milliseconds, 1000)
    return Timespec(seconds, rest * 1_000_000)