"""32-bit wrapping sequence numbers and their 64-bit absolute counterparts."""

from __future__ import annotations

from dataclasses import dataclass

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF
_INT32_RANGE = 1 << 32


@dataclass(frozen=True)
class WrappingInt32:
    """A 32-bit integer that wraps around on overflow and underflow."""

    raw_value: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "raw_value", self.raw_value & _MASK32)

    def __add__(self, other: int) -> WrappingInt32:
        if not isinstance(other, int):
            return NotImplemented
        return WrappingInt32(self.raw_value + other)

    def __sub__(self, other: WrappingInt32 | int) -> WrappingInt32 | int:
        """Subtract an offset, or get the signed 32-bit distance to another value."""
        if isinstance(other, WrappingInt32):
            diff = (self.raw_value - other.raw_value) & _MASK32
            return diff - _INT32_RANGE if diff >= _INT32_RANGE // 2 else diff
        if isinstance(other, int):
            return WrappingInt32(self.raw_value - other)
        return NotImplemented

    def __str__(self) -> str:
        return str(self.raw_value)


def wrap(n: int, isn: WrappingInt32) -> WrappingInt32:
    """Convert an absolute 64-bit sequence number to a wrapped 32-bit one."""
    return isn + (n & _MASK32)


def unwrap(n: WrappingInt32, isn: WrappingInt32, checkpoint: int) -> int:
    """Convert a wrapped sequence number to the absolute one closest to checkpoint."""
    offset = (n.raw_value - isn.raw_value) & _MASK32
    if checkpoint > offset:
        real_checkpoint = ((checkpoint - offset) + _INT32_RANGE // 2) & _MASK64
        wrap_num = real_checkpoint // _INT32_RANGE
        return (wrap_num * _INT32_RANGE + offset) & _MASK64
    return offset