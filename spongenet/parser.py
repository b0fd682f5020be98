"""Network-byte-order integer parsing and serialisation."""

from __future__ import annotations

import enum
from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]


class ParseResult(enum.Enum):
    """Outcome of parsing a datagram, segment, frame or message."""

    NO_ERROR = 0
    BAD_CHECKSUM = 1
    PACKET_TOO_SHORT = 2
    WRONG_IP_VERSION = 3
    HEADER_TOO_SHORT = 4
    TRUNCATED_PACKET = 5
    UNSUPPORTED = 6


_NAMES = {
    ParseResult.NO_ERROR: "NoError",
    ParseResult.BAD_CHECKSUM: "BadChecksum",
    ParseResult.PACKET_TOO_SHORT: "PacketTooShort",
    ParseResult.WRONG_IP_VERSION: "WrongIPVersion",
    ParseResult.HEADER_TOO_SHORT: "HeaderTooShort",
    ParseResult.TRUNCATED_PACKET: "TruncatedPacket",
    ParseResult.UNSUPPORTED: "Unsupported",
}


def as_string(result: ParseResult) -> str:
    """The display name of a ParseResult."""
    return _NAMES[result]


class NetParser:
    """Reads big-endian integers from the front of a byte buffer.

    Running out of data sets ``error`` rather than raising; once an error is
    set, every further read returns 0 and consumes nothing.
    """

    def __init__(self, buffer: BytesLike) -> None:
        self._buffer = memoryview(bytes(buffer))
        self.error = ParseResult.NO_ERROR

    def buffer(self) -> bytes:
        """The bytes not yet consumed."""
        return bytes(self._buffer)

    def has_error(self) -> bool:
        return self.error is not ParseResult.NO_ERROR

    def _check_size(self, size: int) -> None:
        if size > len(self._buffer):
            self.error = ParseResult.PACKET_TOO_SHORT

    def _parse_int(self, size: int) -> int:
        self._check_size(size)
        if self.has_error():
            return 0
        value = int.from_bytes(self._buffer[:size], "big")
        self._buffer = self._buffer[size:]
        return value

    def u32(self) -> int:
        return self._parse_int(4)

    def u16(self) -> int:
        return self._parse_int(2)

    def u8(self) -> int:
        return self._parse_int(1)

    def remove_prefix(self, n: int) -> None:
        """Skip n bytes."""
        self._check_size(n)
        if self.has_error():
            return
        self._buffer = self._buffer[n:]


class NetUnparser:
    """Accumulates big-endian integers; values are truncated to their width."""

    def __init__(self) -> None:
        self._data = bytearray()

    def _unparse_int(self, val: int, size: int) -> NetUnparser:
        self._data += (val & ((1 << (8 * size)) - 1)).to_bytes(size, "big")
        return self

    def u32(self, val: int) -> NetUnparser:
        return self._unparse_int(val, 4)

    def u16(self, val: int) -> NetUnparser:
        return self._unparse_int(val, 2)

    def u8(self, val: int) -> NetUnparser:
        return self._unparse_int(val, 1)

    def __bytes__(self) -> bytes:
        return bytes(self._data)