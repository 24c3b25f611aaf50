"""Ordering and checked arithmetic over canonical 32-byte operands.

Addition propagates an 8-bit carry byte by byte. Subtraction, multiplication
and division go through Python's unbounded ``int`` and check the exact result
against the 256-bit range before re-encoding it.
"""

from __future__ import annotations

from typing import Iterable

from .codec import BYTE_LENGTH, ZERO, BytesLike, ensure_canonical, render
from .errors import DivisionByZero, Overflow, Underflow


def compare(left: BytesLike, right: BytesLike) -> int:
    """-1, 0 or 1; lexicographic byte order equals unsigned numeric order."""
    a = ensure_canonical(left)
    b = ensure_canonical(right)
    return (a > b) - (a < b)


def eq(left: BytesLike, right: BytesLike) -> bool:
    return compare(left, right) == 0


def ne(left: BytesLike, right: BytesLike) -> bool:
    return compare(left, right) != 0


def lt(left: BytesLike, right: BytesLike) -> bool:
    return compare(left, right) < 0


def le(left: BytesLike, right: BytesLike) -> bool:
    return compare(left, right) <= 0


def gt(left: BytesLike, right: BytesLike) -> bool:
    return compare(left, right) > 0


def ge(left: BytesLike, right: BytesLike) -> bool:
    return compare(left, right) >= 0


def add(left: BytesLike, right: BytesLike) -> bytes:
    a = ensure_canonical(left)
    b = ensure_canonical(right)
    out = bytearray(BYTE_LENGTH)
    carry = 0
    for i in range(BYTE_LENGTH - 1, -1, -1):
        # at most 255 + 255 + 1, so carry stays 0 or 1
        total = a[i] + b[i] + carry
        out[i] = total & 0xFF
        carry = total >> 8
    if carry:
        raise Overflow(
            f"uint256 addition overflow: {render(a)} + {render(b)}", render(a), render(b)
        )
    return bytes(out)


def subtract(left: BytesLike, right: BytesLike) -> bytes:
    a = ensure_canonical(left)
    b = ensure_canonical(right)
    result = int.from_bytes(a, "big") - int.from_bytes(b, "big")
    if result < 0:
        raise Underflow(
            f"uint256 subtraction underflow: {render(a)} - {render(b)}", render(a), render(b)
        )
    return result.to_bytes(BYTE_LENGTH, "big")


def multiply(left: BytesLike, right: BytesLike) -> bytes:
    a = ensure_canonical(left)
    b = ensure_canonical(right)
    result = int.from_bytes(a, "big") * int.from_bytes(b, "big")
    if result.bit_length() > 256:
        raise Overflow(
            f"uint256 multiplication overflow: {render(a)} * {render(b)}",
            render(a),
            render(b),
        )
    return result.to_bytes(BYTE_LENGTH, "big")


def divide(left: BytesLike, right: BytesLike) -> bytes:
    """Floor division; there is no remainder operation."""
    a = ensure_canonical(left)
    b = ensure_canonical(right)
    divisor = int.from_bytes(b, "big")
    if divisor == 0:
        raise DivisionByZero("Division by zero", render(a), render(b))
    return (int.from_bytes(a, "big") // divisor).to_bytes(BYTE_LENGTH, "big")


def bitwise_and(left: BytesLike, right: BytesLike) -> bytes:
    a = ensure_canonical(left)
    b = ensure_canonical(right)
    return bytes(x & y for x, y in zip(a, b))


def bitwise_or(left: BytesLike, right: BytesLike) -> bytes:
    a = ensure_canonical(left)
    b = ensure_canonical(right)
    return bytes(x | y for x, y in zip(a, b))


def bitwise_xor(left: BytesLike, right: BytesLike) -> bytes:
    a = ensure_canonical(left)
    b = ensure_canonical(right)
    return bytes(x ^ y for x, y in zip(a, b))


def bitwise_not(value: BytesLike) -> bytes:
    a = ensure_canonical(value)
    return bytes(~x & 0xFF for x in a)


def checked_sum(values: Iterable[BytesLike]) -> bytes:
    """Fold :func:`add` over ``values``; the empty sum is zero."""
    total = ZERO
    for value in values:
        total = add(total, value)
    return total
