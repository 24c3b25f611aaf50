import polars as pl
import pytest

import polars_uint256 as u256


def _frame() -> pl.DataFrame:
    return pl.DataFrame(
        {
            "id": [1, 2],
            "v": u256.column.series("v", [10**30, None]),
            "raw": pl.Series("raw", [b"\x01", b"\x02"], dtype=pl.Binary),
        }
    )


def test_format_replace_autodetects_uint256_columns():
    out = u256.format_uint256_dataframe(_frame())
    assert out["v"].to_list() == [str(10**30), None]
    # short binary payloads are not treated as uint256
    assert out["raw"].dtype == pl.Binary


def test_format_add_mode():
    out = u256.format_uint256_dataframe(_frame(), ["v"], mode="add")
    assert out.columns == ["id", "v", "raw", "v_dec"]
    assert out["v_dec"][0] == str(10**30)


def test_format_rejects_unknown_mode():
    with pytest.raises(ValueError, match="Invalid mode"):
        u256.format_uint256_dataframe(_frame(), mode="hex")


def test_dataframe_helpers_are_patched():
    df = _frame()
    assert df.with_uint256_display("v").columns[-1] == "v_dec"
    assert df.show_uint256_decimal("v")["v"][0] == str(10**30)


def test_print(capsys):
    with pl.Config(fmt_str_lengths=80):
        u256.print_uint256_dataframe(_frame(), ["v"])
    assert str(10**30) in capsys.readouterr().out
