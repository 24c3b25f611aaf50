import polars as pl
import pytest

import polars_uint256 as u256


def test_uint256_namespace_ops_small():
    df = pl.DataFrame({"a": [1, 2, 3], "b": [4, 5, 6]}).with_columns(
        a=u256.from_ints(pl.col("a")),
        b=u256.from_ints(pl.col("b")),
    )
    out = df.with_columns(
        s=(pl.col("a").uint256 + pl.col("b")),
        d=(pl.col("b").uint256 - pl.col("a")),
        p=(pl.col("a").uint256 * 2),
        q=(pl.col("b").uint256 / 2),
    ).with_columns(
        s_i=u256.to_int(pl.col("s")),
        d_i=u256.to_int(pl.col("d")),
        p_i=u256.to_int(pl.col("p")),
        q_i=u256.to_int(pl.col("q")),
    )
    assert out["s_i"].to_list() == [5, 7, 9]
    assert out["d_i"].to_list() == [3, 3, 3]
    assert out["p_i"].to_list() == [2, 4, 6]
    assert out["q_i"].to_list() == [2, 2, 3]


def test_bitwise_namespace_ops():
    df = pl.DataFrame({"a": [0b1100], "b": [0b1010]}).with_columns(
        a=u256.from_ints(pl.col("a")),
        b=u256.from_ints(pl.col("b")),
    )
    out = df.select(
        x=(pl.col("a").uint256 & pl.col("b")).uint256.to_int(),
        y=(pl.col("a").uint256 | pl.col("b")).uint256.to_int(),
        z=(pl.col("a").uint256 ^ pl.col("b")).uint256.to_int(),
        n=(~pl.col("a").uint256).uint256.to_decimal(),
    )
    assert out.row(0) == (0b1000, 0b1110, 0b0110, str(2**256 - 1 - 0b1100))


def test_comparisons():
    df = pl.DataFrame({"a": u256.column.series("a", [1, 2**200, 5])})
    out = df.select(
        lt=pl.col("a").uint256 < 5,
        ge=u256.ge(pl.col("a"), 5),
        eq=pl.col("a").uint256 == 5,
    )
    assert out["lt"].to_list() == [True, False, False]
    assert out["ge"].to_list() == [False, True, True]
    assert out["eq"].to_list() == [False, False, True]


def test_nulls_propagate():
    df = pl.DataFrame({"a": [1, None, 3], "b": [None, 2, 3]}).with_columns(
        a=u256.from_ints(pl.col("a")),
        b=u256.from_ints(pl.col("b")),
    )
    out = df.select(s=u256.to_int(u256.add(pl.col("a"), pl.col("b"))))
    assert out["s"].to_list() == [None, None, 6]


def test_decimal_casts():
    big = str(2**255 + 12345)
    df = pl.DataFrame({"t": ["0", "42", big]})
    out = df.with_columns(v=u256.from_decimal(pl.col("t"))).with_columns(
        back=u256.to_decimal(pl.col("v"))
    )
    assert out["back"].to_list() == ["0", "42", big]


def test_from_bytes_pads_varbinary():
    df = pl.DataFrame({"b": [b"\x01\x00", b""]}, schema={"b": pl.Binary})
    out = df.select(v=u256.to_int(u256.from_bytes(pl.col("b"))))
    assert out["v"].to_list() == [256, 0]


def test_literals():
    df = pl.DataFrame({"x": [1]})
    out = df.select(
        a=u256.to_decimal(u256.lit(10**70)),
        b=u256.to_decimal(u256.lit("123")),
        c=u256.to_decimal(u256.lit(b"\x01\x00")),
    )
    assert out.row(0) == (str(10**70), "123", "256")
    with pytest.raises(TypeError):
        u256.lit(1.5)


def test_overflow_surfaces_as_query_error():
    df = pl.DataFrame({"a": u256.column.series("a", [2**256 - 1])})
    with pytest.raises(Exception, match="uint256 addition overflow"):
        df.select(pl.col("a").uint256 + 1)


def test_division_by_zero_surfaces_as_query_error():
    df = pl.DataFrame({"a": u256.column.series("a", [7])})
    with pytest.raises(Exception, match="Division by zero"):
        df.select(pl.col("a").uint256 / 0)


def test_negative_bigint_cast_fails():
    df = pl.DataFrame({"a": [-1]})
    with pytest.raises(Exception, match="Cannot cast negative BIGINT value -1"):
        df.select(u256.from_ints(pl.col("a")))


def test_sum_aggregation():
    df = pl.DataFrame({"v": u256.column.series("v", [2**200, 2**200, None, 1])})
    out = df.select(total=u256.sum(pl.col("v")))
    assert u256.codec.to_int(out["total"].item()) == 2**201 + 1


def test_sum_aggregation_by_group():
    df = pl.DataFrame(
        {
            "k": ["a", "b", "a"],
            "v": u256.column.series("v", [2**255, 7, 2**254]),
        }
    )
    out = (
        df.group_by("k")
        .agg(total=u256.sum(pl.col("v")))
        .sort("k")
        .with_columns(total=u256.to_decimal(pl.col("total")))
    )
    assert out["total"].to_list() == [str(2**255 + 2**254), "7"]


def test_sum_overflow():
    df = pl.DataFrame({"v": u256.column.series("v", [2**255, 2**255])})
    with pytest.raises(Exception, match="uint256 addition overflow"):
        df.select(u256.sum(pl.col("v")))


@pytest.mark.parametrize("value", [1.5, "12a", True])
def test_from_int_rejects_non_integers(value):
    with pytest.raises(u256.InvalidCast):
        u256.from_int(value)
