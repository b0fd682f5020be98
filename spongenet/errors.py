"""Errors raised when operating-system calls fail."""

from __future__ import annotations

import os
from typing import TypeVar

T = TypeVar("T")


class TaggedError(OSError):
    """An operating-system error tagged with what was being attempted."""

    def __init__(self, attempt: str, error_code: int) -> None:
        super().__init__(error_code, os.strerror(error_code))
        self.attempt = attempt

    @property
    def error_code(self) -> int:
        return self.errno

    def __str__(self) -> str:
        return f"{self.attempt}: {self.strerror}"


class UnixError(TaggedError):
    """A TaggedError produced by a failed system call."""

    def __init__(self, attempt: str, error_code: int) -> None:
        super().__init__(attempt, error_code)


def check_system_call(attempt: str, return_value: int, error_code: int, errno_mask: int = 0) -> int:
    """Return return_value unless it signals failure with an unmasked error code."""
    if return_value >= 0 or error_code == errno_mask:
        return return_value
    raise UnixError(attempt, error_code)


def notnull(context: str, value: T | None) -> T:
    """Return value, raising RuntimeError if it is None."""
    if value is None:
        raise RuntimeError(f"{context}: returned null pointer")
    return value