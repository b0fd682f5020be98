"""Timing, randomness, Internet checksum and hexdump helpers."""

from __future__ import annotations

import functools
import os
import random
import sys
import time
from typing import TextIO, Union

BytesLike = Union[bytes, bytearray, memoryview, str]

_MT_STATE_WORDS = 624


def _as_bytes(data: BytesLike) -> bytes:
    if isinstance(data, str):
        return data.encode("latin-1")
    return bytes(data)


@functools.cache
def _program_start_ns() -> int:
    return time.monotonic_ns()


def timestamp_ms() -> int:
    """Milliseconds elapsed since the first call."""
    start = _program_start_ns()
    return (time.monotonic_ns() - start) // 1_000_000


def get_random_generator() -> random.Random:
    """A Mersenne Twister generator seeded from a full state's worth of entropy."""
    seed = int.from_bytes(os.urandom(_MT_STATE_WORDS * 4), "big")
    return random.Random(seed)


class InternetChecksum:
    """Incremental Internet (one's-complement) checksum, in host byte order."""

    def __init__(self, initial_sum: int = 0) -> None:
        self._sum = initial_sum & 0xFFFFFFFF
        self._parity = False

    def add(self, data: BytesLike) -> None:
        """Feed more bytes; data may be split anywhere, even mid-word."""
        for byte in _as_bytes(data):
            self._sum = (self._sum + (byte if self._parity else byte << 8)) & 0xFFFFFFFF
            self._parity = not self._parity

    def value(self) -> int:
        """The checksum of everything added so far."""
        total = self._sum
        while total > 0xFFFF:
            total = (total >> 16) + (total & 0xFFFF)
        return ~total & 0xFFFF


def _printable(byte: int) -> str:
    return chr(byte) if 0x20 <= byte <= 0x7E else "."


def format_hexdump(data: BytesLike, indent: int = 0) -> str:
    """Render bytes as offset, hex words and printable characters, 16 per line."""
    raw = _as_bytes(data)
    indent_string = " " * indent
    parts: list[str] = []
    chars: list[str] = []
    for printed, byte in enumerate(raw):
        if printed % 16 == 0:
            if printed:
                parts.append("    " + "".join(chars) + "\n")
                chars = []
            parts.append(f"{indent_string}{printed:08x}:    ")
        elif printed % 2 == 0:
            parts.append(" ")
        parts.append(f"{byte:02x}")
        chars.append(_printable(byte))
    remainder = (16 - len(raw) % 16) % 16
    parts.append(" " * (2 * remainder + remainder // 2 + 4))
    parts.append("".join(chars) or " ")
    parts.append("\n\n")
    return "".join(parts)


def hexdump(data: BytesLike, indent: int = 0, file: TextIO | None = None) -> None:
    """Write a hexdump of data to file (standard output by default)."""
    out = sys.stdout if file is None else file
    out.write(format_hexdump(data, indent))
    out.flush()