import polars as pl
import pytest

from polars_uint256 import codec, column
from polars_uint256.errors import InvalidCast, InvalidLength


def test_series_from_mixed_values():
    s = column.series("v", [1, "2", b"\x03", None])
    assert s.dtype == pl.Binary
    assert s.null_count() == 1
    assert column.to_python(s) == [1, 2, 3, None]
    assert all(len(v) == 32 for v in s.drop_nulls())


def test_series_rejects_bad_values():
    with pytest.raises(InvalidCast):
        column.series("v", [-1])
    with pytest.raises(InvalidCast):
        column.series("v", [1.5])
    with pytest.raises(InvalidCast):
        column.series("v", [True])


def test_validate_is_strict():
    good = pl.Series("v", [codec.ZERO, None], dtype=pl.Binary)
    assert column.validate(good) is good
    with pytest.raises(InvalidLength):
        column.validate(pl.Series("v", [b"\x01"], dtype=pl.Binary))
    with pytest.raises(InvalidCast):
        column.validate(pl.Series("v", [1, 2]))


def test_canonicalize_pads_and_keeps_nulls():
    s = pl.Series("v", [b"\x01", None, bytes(32)], dtype=pl.Binary)
    out = column.canonicalize(s)
    assert out.name == "v"
    assert out.to_list() == [bytes(31) + b"\x01", None, bytes(32)]
    with pytest.raises(InvalidLength):
        column.canonicalize(pl.Series("v", [bytes(33)], dtype=pl.Binary))
