"""uint256 columns as Polars ``Binary`` series.

Non-null entries hold canonical 32-byte payloads; nulls live in the series'
validity mask and never reach the codec or arithmetic engine.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional

import polars as pl

from . import codec
from .errors import InvalidCast

DTYPE = pl.Binary


def coerce_value(value: Any) -> Optional[bytes]:
    """Python scalar -> canonical bytes (None passes through)."""
    if value is None:
        return None
    if isinstance(value, bool):
        raise InvalidCast(f"Invalid UINT256 value: {value!r}", repr(value))
    if isinstance(value, int):
        return codec.from_int(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return codec.from_bytes(value)
    if isinstance(value, str):
        return codec.from_decimal_string(value)
    raise InvalidCast(f"Invalid UINT256 value: {value!r}", repr(value))


def series(name: str, values: Iterable[Any]) -> pl.Series:
    """Build a uint256 column from ints, bytes, decimal strings and None."""
    return pl.Series(name, [coerce_value(v) for v in values], dtype=DTYPE)


def validate(s: pl.Series) -> pl.Series:
    """Strict check: every non-null entry is exactly 32 bytes."""
    if s.dtype != DTYPE:
        raise InvalidCast(
            f"Column {s.name!r} has dtype {s.dtype}, expected {DTYPE}", str(s.dtype)
        )
    for value in s:
        if value is not None:
            codec.ensure_canonical(value)
    return s


def canonicalize(s: pl.Series) -> pl.Series:
    """Left-pad every non-null varbinary entry to 32 bytes."""
    out = [None if v is None else codec.from_bytes(v) for v in s]
    return pl.Series(s.name, out, dtype=DTYPE)


def to_python(s: pl.Series) -> List[Optional[int]]:
    return [None if v is None else codec.to_int(v) for v in validate(s)]
