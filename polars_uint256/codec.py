"""Canonical 32-byte big-endian encoding of unsigned 256-bit integers.

Every uint256 value is an immutable ``bytes`` object of exactly 32 bytes, most
significant byte first. Because of that layout, comparing two canonical values
byte by byte orders them exactly like the integers they encode.

>>> from_i64(258).hex()[-4:]
'0102'
>>> to_decimal_string(from_decimal_string("1000"))
'1000'
"""

from __future__ import annotations

import re
from typing import Union

from .config import diagnostic_format
from .errors import InvalidCast, InvalidLength, OutOfRange

BYTE_LENGTH = 32
MAX_VALUE = (1 << 256) - 1
ZERO = bytes(BYTE_LENGTH)
MAX = MAX_VALUE.to_bytes(BYTE_LENGTH, "big")

I64_MAX = (1 << 63) - 1
I64_MIN = -(1 << 63)

# 2**256 - 1 has 78 decimal digits
_MAX_DECIMAL_DIGITS = len(str(MAX_VALUE))
_DECIMAL = re.compile(r"[0-9]+")

BytesLike = Union[bytes, bytearray, memoryview]


def byte_length() -> int:
    return BYTE_LENGTH


def from_bytes(buf: BytesLike) -> bytes:
    """Decode a variable-length big-endian buffer.

    Shorter buffers are placed at the least significant end (left-padded with
    zeros). Buffers longer than 32 bytes are rejected rather than truncated.
    """
    if not isinstance(buf, (bytes, bytearray, memoryview)):
        raise InvalidCast(f"Invalid UINT256 binary value: {buf!r}", repr(buf))
    data = bytes(buf)
    size = len(data)
    if size > BYTE_LENGTH:
        raise InvalidLength(
            f"Invalid UINT256 binary length: {size} (max {BYTE_LENGTH})", str(size)
        )
    if size == BYTE_LENGTH:
        return data
    return bytes(BYTE_LENGTH - size) + data


def to_bytes(value: BytesLike) -> bytes:
    """Return the 32-byte exchange/storage form of a canonical value."""
    return ensure_canonical(value)


def ensure_canonical(value: BytesLike) -> bytes:
    """Validate an operand on entry: exactly 32 bytes or ``InvalidLength``."""
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise InvalidCast(f"Invalid UINT256 binary value: {value!r}", repr(value))
    data = bytes(value)
    if len(data) != BYTE_LENGTH:
        raise InvalidLength(
            f"UINT256 length should be {BYTE_LENGTH} bytes, got {len(data)}",
            str(len(data)),
        )
    return data


def from_i64(n: int) -> bytes:
    """Zero-extend a non-negative 64-bit signed integer into the low 8 bytes."""
    if not isinstance(n, int) or isinstance(n, bool) or n > I64_MAX or n < I64_MIN:
        raise InvalidCast(f"Invalid BIGINT value {n!r} for UINT256", repr(n))
    if n < 0:
        raise InvalidCast(f"Cannot cast negative BIGINT value {n} to UINT256", str(n))
    return bytes(BYTE_LENGTH - 8) + n.to_bytes(8, "big")


def to_i64(value: BytesLike) -> int:
    """Inverse of :func:`from_i64`; values above 2**63 - 1 cannot be cast."""
    n = to_int(value)
    if n > I64_MAX:
        raise InvalidCast(
            f"UINT256 value {render(value)} is out of range for BIGINT", render(value)
        )
    return n


def from_int(n: int) -> bytes:
    """Encode any Python int in [0, 2**256 - 1]."""
    if not isinstance(n, int) or isinstance(n, bool):
        raise InvalidCast(f"Invalid UINT256 value: {n!r}", repr(n))
    if n < 0:
        raise InvalidCast(f"Cannot cast negative value {n} to UINT256", str(n))
    if n > MAX_VALUE:
        raise OutOfRange("uint256 value out of range", str(n))
    return n.to_bytes(BYTE_LENGTH, "big")


def to_int(value: BytesLike) -> int:
    return int.from_bytes(ensure_canonical(value), "big")


def to_decimal_string(value: BytesLike) -> str:
    """Base-10 digits, no sign, no grouping, ``"0"`` for zero."""
    return str(to_int(value))


def from_decimal_string(s: Union[str, None]) -> bytes:
    """Strictly parse an unsigned base-10 integer.

    Only ASCII digits are accepted: no whitespace, sign, prefix or empty
    string. Magnitudes above 2**256 - 1 fail with ``OutOfRange``.
    """
    if s is None:
        raise InvalidCast("Invalid UINT256 value: missing decimal string", "NULL")
    if isinstance(s, (bytes, bytearray)):
        try:
            s = bytes(s).decode("ascii")
        except UnicodeDecodeError:
            raise InvalidCast(f"Invalid UINT256 value: {s!r}", repr(s)) from None
    if not isinstance(s, str) or _DECIMAL.fullmatch(s) is None:
        raise InvalidCast(f"Invalid UINT256 value: {s}", repr(s))
    digits = s.lstrip("0")
    # checked before int() so huge inputs never reach the str->int digit limit
    if len(digits) > _MAX_DECIMAL_DIGITS:
        raise OutOfRange("uint256 value out of range", s)
    n = int(digits or "0")
    if n > MAX_VALUE:
        raise OutOfRange("uint256 value out of range", s)
    return n.to_bytes(BYTE_LENGTH, "big")


def to_hex(value: BytesLike) -> str:
    """Diagnostic rendering; hex is not an exchange format for uint256."""
    return "0x" + bytes(value).hex()


def render(value: BytesLike) -> str:
    """Render an operand for error messages, per POLARS_UINT256_DIAGNOSTICS."""
    data = bytes(value)
    if diagnostic_format() == "decimal" and len(data) <= BYTE_LENGTH:
        return str(int.from_bytes(data, "big"))
    return to_hex(data)
