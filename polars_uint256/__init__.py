from __future__ import annotations

import logging
from typing import Any, Callable, List, Union

import polars as pl

from . import arithmetic, codec, column, dispatch
from .errors import (
    DivisionByZero,
    InvalidCast,
    InvalidLength,
    OutOfRange,
    Overflow,
    UInt256Error,
    Underflow,
)

logger = logging.getLogger(__name__)


def _broadcast(columns: List[pl.Series]) -> List[list]:
    # length-1 inputs (literals) stretch to the height of the other columns
    heights = {len(c) for c in columns if len(c) != 1}
    if len(heights) > 1:
        raise pl.exceptions.ShapeError(
            f"uint256 operands have mismatched lengths: {sorted(heights)}"
        )
    height = heights.pop() if heights else 1
    out = []
    for c in columns:
        values = c.to_list()
        if len(values) != height:
            values = values * height
        out.append(values)
    return out


def _wrap(name: str, fn: Callable, return_dtype: Any = pl.Binary) -> Callable:
    def batch(columns: List[pl.Series]) -> pl.Series:
        rows = _broadcast(columns)
        try:
            values = [
                None if any(v is None for v in row) else fn(*row) for row in zip(*rows)
            ]
        except UInt256Error as exc:
            logger.debug("uint256 %s failed: %s", name, type(exc).__name__)
            raise
        return pl.Series(name, values, dtype=return_dtype)

    def call(*args: Any) -> pl.Expr:
        coerced_args = [_coerce_arg(a) for a in args]
        return pl.map_batches(coerced_args, batch, return_dtype=return_dtype)

    call.__name__ = name
    return call


# Expression callables over the codec / arithmetic engine
from_bytes = _wrap("from_bytes", codec.from_bytes)
to_bytes = _wrap("to_bytes", codec.to_bytes)
from_ints = _wrap("from_ints", codec.from_i64)
to_int = _wrap("to_int", codec.to_i64, pl.Int64)
from_decimal = _wrap("from_decimal", codec.from_decimal_string)
to_decimal = _wrap("to_decimal", codec.to_decimal_string, pl.String)
add = _wrap("add", arithmetic.add)
sub = _wrap("sub", arithmetic.subtract)
mul = _wrap("mul", arithmetic.multiply)
div = _wrap("div", arithmetic.divide)
eq = _wrap("eq", arithmetic.eq, pl.Boolean)
ne = _wrap("ne", arithmetic.ne, pl.Boolean)
lt = _wrap("lt", arithmetic.lt, pl.Boolean)
le = _wrap("le", arithmetic.le, pl.Boolean)
gt = _wrap("gt", arithmetic.gt, pl.Boolean)
ge = _wrap("ge", arithmetic.ge, pl.Boolean)
bitand = _wrap("bitand", arithmetic.bitwise_and)
bitor = _wrap("bitor", arithmetic.bitwise_or)
bitxor = _wrap("bitxor", arithmetic.bitwise_xor)
bitnot = _wrap("bitnot", arithmetic.bitwise_not)


def _sum_batch(s: pl.Series) -> pl.Series:
    values = s.drop_nulls().to_list()
    try:
        total = arithmetic.checked_sum(values) if values else None
    except UInt256Error as exc:
        logger.debug("uint256 sum failed: %s", type(exc).__name__)
        raise
    return pl.Series(s.name, [total], dtype=pl.Binary)


def sum(expr: Any) -> pl.Expr:
    """Checked sum aggregation; null when every input is null."""
    return _coerce_arg(expr).map_batches(
        _sum_batch,
        return_dtype=pl.Binary,
        returns_scalar=True,  # Return a scalar in aggregation contexts (group_by/select)
    )


# ------- Convenience coercion helpers -------
def lit(value: Union[int, str, bytes]) -> pl.Expr:
    """Construct a uint256 literal expression.

    - int: converted to 32-byte big-endian (unsigned)
    - decimal str: parsed strictly as base 10
    - bytes: left-padded to 32 bytes
    """
    if isinstance(value, (int, str, bytes, bytearray)) and not isinstance(value, bool):
        return pl.lit(column.coerce_value(value), dtype=pl.Binary)
    raise TypeError("uint256.lit accepts int, decimal str, or bytes")


def from_int(value: Any) -> pl.Expr:
    """Convert a Python int (or an integer expression) into a uint256 expression."""
    if isinstance(value, pl.Expr):
        return from_ints(value)
    return pl.lit(codec.from_int(value), dtype=pl.Binary)


def _coerce_arg(arg: Any) -> Any:
    """Coerce Python scalars into uint256 expressions.

    - int -> 32-byte BE binary literal
    - bytes/bytearray -> padded 32 bytes binary literal
    - all-digit str -> decimal literal; any other str is a column name
    Otherwise returns the argument unchanged (assumed to be a Polars expr).
    """
    if isinstance(arg, bool):
        raise TypeError("uint256 does not accept bool operands")
    if isinstance(arg, (int, bytes, bytearray)):
        return lit(arg)
    if isinstance(arg, str):
        return lit(arg) if arg.isascii() and arg.isdigit() else pl.col(arg)
    return arg


@pl.api.register_expr_namespace("uint256")
class UInt256Namespace:
    """``pl.col("x").uint256`` operations and Python operators."""

    def __init__(self, expr: pl.Expr) -> None:
        self._expr = expr

    def __add__(self, other: Any) -> pl.Expr:
        return add(self._expr, other)

    def __sub__(self, other: Any) -> pl.Expr:
        return sub(self._expr, other)

    def __mul__(self, other: Any) -> pl.Expr:
        return mul(self._expr, other)

    def __truediv__(self, other: Any) -> pl.Expr:
        return div(self._expr, other)

    __floordiv__ = __truediv__

    def __and__(self, other: Any) -> pl.Expr:
        return bitand(self._expr, other)

    def __or__(self, other: Any) -> pl.Expr:
        return bitor(self._expr, other)

    def __xor__(self, other: Any) -> pl.Expr:
        return bitxor(self._expr, other)

    def __invert__(self) -> pl.Expr:
        return bitnot(self._expr)

    def __eq__(self, other: Any) -> pl.Expr:  # type: ignore[override]
        return eq(self._expr, other)

    def __ne__(self, other: Any) -> pl.Expr:  # type: ignore[override]
        return ne(self._expr, other)

    def __lt__(self, other: Any) -> pl.Expr:
        return lt(self._expr, other)

    def __le__(self, other: Any) -> pl.Expr:
        return le(self._expr, other)

    def __gt__(self, other: Any) -> pl.Expr:
        return gt(self._expr, other)

    def __ge__(self, other: Any) -> pl.Expr:
        return ge(self._expr, other)

    __hash__ = None  # type: ignore[assignment]

    def add(self, other: Any) -> pl.Expr:
        return add(self._expr, other)

    def sub(self, other: Any) -> pl.Expr:
        return sub(self._expr, other)

    def mul(self, other: Any) -> pl.Expr:
        return mul(self._expr, other)

    def div(self, other: Any) -> pl.Expr:
        return div(self._expr, other)

    def bitand(self, other: Any) -> pl.Expr:
        return bitand(self._expr, other)

    def bitor(self, other: Any) -> pl.Expr:
        return bitor(self._expr, other)

    def bitxor(self, other: Any) -> pl.Expr:
        return bitxor(self._expr, other)

    def bitnot(self) -> pl.Expr:
        return bitnot(self._expr)

    def to_decimal(self) -> pl.Expr:
        return to_decimal(self._expr)

    def to_int(self) -> pl.Expr:
        return to_int(self._expr)

    def to_bytes(self) -> pl.Expr:
        return to_bytes(self._expr)

    def sum(self) -> pl.Expr:
        return sum(self._expr)


# Import display utilities (this will auto-patch DataFrame class)
from .display import format_uint256_dataframe, print_uint256_dataframe  # noqa: E402

__all__ = [
    "arithmetic",
    "codec",
    "column",
    "dispatch",
    "from_bytes",
    "to_bytes",
    "from_int",
    "from_ints",
    "to_int",
    "from_decimal",
    "to_decimal",
    "add",
    "sub",
    "mul",
    "div",
    "eq",
    "ne",
    "lt",
    "le",
    "gt",
    "ge",
    "bitand",
    "bitor",
    "bitxor",
    "bitnot",
    "sum",
    "lit",
    "format_uint256_dataframe",
    "print_uint256_dataframe",
    "UInt256Error",
    "InvalidLength",
    "InvalidCast",
    "OutOfRange",
    "Overflow",
    "Underflow",
    "DivisionByZero",
]
