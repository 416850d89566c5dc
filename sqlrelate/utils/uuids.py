"""UUID byte encoding.

A UUID is stored as an opaque 16 byte column value: the most significant
64 bits first, then the least significant 64 bits, each half big-endian.
"""

import struct
from typing import Final
from uuid import UUID

__all__ = ("UUID_BYTE_LENGTH", "bytes_to_uuid", "uuid_to_bytes")

UUID_BYTE_LENGTH: Final[int] = 16

_HALVES: Final = struct.Struct(">QQ")
_LOW_MASK: Final[int] = 0xFFFFFFFFFFFFFFFF


def uuid_to_bytes(value: UUID) -> bytes:
    """Encode a UUID as 16 bytes.

    Args:
        value: The UUID to encode.

    Returns:
        The high 64 bits followed by the low 64 bits, big-endian.
    """
    bits = value.int
    return _HALVES.pack(bits >> 64, bits & _LOW_MASK)


def bytes_to_uuid(data: "bytes | bytearray | memoryview") -> UUID:
    """Decode 16 bytes produced by :func:`uuid_to_bytes`.

    Raises:
        ValueError: If ``data`` is not exactly 16 bytes long.
    """
    raw = bytes(data)
    if len(raw) != UUID_BYTE_LENGTH:
        msg = f"UUID columns must hold {UUID_BYTE_LENGTH} bytes, got {len(raw)}"
        raise ValueError(msg)
    most, least = _HALVES.unpack(raw)
    return UUID(int=(most << 64) | least)
