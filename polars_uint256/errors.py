"""Typed failures raised by the uint256 codec and arithmetic engine."""

from __future__ import annotations


class UInt256Error(ArithmeticError):
    """Base class for uint256 failures.

    ``operands`` holds the offending operand(s) already rendered as text.
    """

    def __init__(self, message: str, *operands: str) -> None:
        super().__init__(message)
        self.operands = operands


class InvalidLength(UInt256Error, ValueError):
    """A byte buffer is longer than 32 bytes (or not exactly 32 where required)."""


class InvalidCast(UInt256Error, ValueError):
    """A source value cannot be read as a uint256."""


class OutOfRange(UInt256Error, ValueError):
    """A well-formed value does not fit in 256 bits."""


class Overflow(UInt256Error):
    """Addition or multiplication result exceeds 2**256 - 1."""


class Underflow(UInt256Error):
    """Subtraction result would be negative."""


class DivisionByZero(UInt256Error, ZeroDivisionError):
    """Divisor is zero."""


__all__ = [
    "UInt256Error",
    "InvalidLength",
    "InvalidCast",
    "OutOfRange",
    "Overflow",
    "Underflow",
    "DivisionByZero",
]
