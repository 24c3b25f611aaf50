"""Operator and cast dispatch for uint256.

Maps SQL-level operator tokens and (source, target) cast pairs onto the
codec and arithmetic functions. Nulls are handled here: if any argument is
``None`` the result is ``None`` and the engine is never called.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Tuple

from . import arithmetic, codec

UINT256 = "uint256"


def uint256(value: Any) -> bytes:
    """Named constructor: ``uint256(varbinary)`` or ``uint256(bigint)``."""
    if isinstance(value, (bytes, bytearray, memoryview)):
        return codec.from_bytes(value)
    return codec.from_i64(value)


OPERATORS: Dict[str, Callable[..., Any]] = {
    "+": arithmetic.add,
    "-": arithmetic.subtract,
    "*": arithmetic.multiply,
    "/": arithmetic.divide,
    "=": arithmetic.eq,
    "<>": arithmetic.ne,
    "!=": arithmetic.ne,
    "<": arithmetic.lt,
    "<=": arithmetic.le,
    ">": arithmetic.gt,
    ">=": arithmetic.ge,
    "bitwise_and": arithmetic.bitwise_and,
    "bitwise_or": arithmetic.bitwise_or,
    "bitwise_xor": arithmetic.bitwise_xor,
    "bitwise_not": arithmetic.bitwise_not,
    UINT256: uint256,
}

CASTS: Dict[Tuple[str, str], Callable[[Any], Any]] = {
    ("varbinary", UINT256): codec.from_bytes,
    (UINT256, "varbinary"): codec.to_bytes,
    ("bigint", UINT256): codec.from_i64,
    (UINT256, "bigint"): codec.to_i64,
    ("varchar", UINT256): codec.from_decimal_string,
    (UINT256, "varchar"): codec.to_decimal_string,
}


class UnsupportedOperation(KeyError):
    """No uint256 implementation is registered for an operator or cast."""


def operator(token: str) -> Callable[..., Any]:
    try:
        return OPERATORS[token.lower()]
    except KeyError:
        raise UnsupportedOperation(f"uint256 has no operator {token!r}") from None


def _cast_key(source: str, target: str) -> Tuple[str, str]:
    # varchar(x) and friends collapse onto their base type name
    return source.split("(", 1)[0].strip().lower(), target.split("(", 1)[0].strip().lower()


def cast_function(source: str, target: str) -> Callable[[Any], Any]:
    try:
        return CASTS[_cast_key(source, target)]
    except KeyError:
        raise UnsupportedOperation(f"Cannot cast {source} to {target}") from None


def apply(token: str, *args: Any) -> Optional[Any]:
    """Dispatch ``token`` over ``args``, propagating null."""
    fn = operator(token)
    if any(a is None for a in args):
        return None
    return fn(*args)


def cast(value: Any, source: str, target: str) -> Optional[Any]:
    fn = cast_function(source, target)
    if value is None:
        return None
    return fn(value)
