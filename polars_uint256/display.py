"""Display formatting utilities for uint256 columns."""

from __future__ import annotations

import polars as pl

from . import codec, to_decimal


class UInt256DisplayMixin:
    """Mixin class to add uint256 display formatting to DataFrames."""

    def with_uint256_display(self, *uint256_columns: str) -> pl.DataFrame:
        """Add decimal display columns for uint256 binary columns.

        Args:
            *uint256_columns: Names of uint256 binary columns to add display formatting for

        Returns:
            DataFrame with additional "{column}_dec" columns for readable display
        """
        return format_uint256_dataframe(self, list(uint256_columns), mode="add")

    def show_uint256_decimal(self, *uint256_columns: str) -> pl.DataFrame:
        """Replace uint256 binary columns with decimal text columns."""
        return format_uint256_dataframe(self, list(uint256_columns), mode="replace")


def detect_uint256_columns(df: pl.DataFrame) -> list[str]:
    # A Binary column whose first non-null entry is 32 bytes is treated as uint256
    found = []
    for col_name in df.columns:
        col = df[col_name]
        if col.dtype == pl.Binary:
            sample = col.drop_nulls().head(1)
            if len(sample) > 0 and len(sample.item(0)) == codec.BYTE_LENGTH:
                found.append(col_name)
    return found


def format_uint256_dataframe(
    df: pl.DataFrame, uint256_columns: list[str] | None = None, mode: str = "replace"
) -> pl.DataFrame:
    """Format a DataFrame to display uint256 columns as decimal strings.

    Args:
        df: Input DataFrame
        uint256_columns: List of uint256 binary column names. If None, attempts to auto-detect.
        mode: Either "replace" (replace binary columns with decimal) or "add" (add _dec columns)

    Returns:
        DataFrame with formatted uint256 display
    """
    if not isinstance(df, pl.DataFrame):
        raise ValueError("This method can only be used on DataFrames")
    if uint256_columns is None:
        uint256_columns = detect_uint256_columns(df)

    if mode == "replace":
        column_updates = {name: to_decimal(pl.col(name)) for name in uint256_columns}
    elif mode == "add":
        column_updates = {f"{name}_dec": to_decimal(pl.col(name)) for name in uint256_columns}
    else:
        raise ValueError(f"Invalid mode '{mode}'. Must be 'replace' or 'add'.")
    if not column_updates:
        return df
    return df.with_columns(**column_updates)


def print_uint256_dataframe(df: pl.DataFrame, uint256_columns: list[str] | None = None) -> None:
    """Print a DataFrame with uint256 columns formatted as decimal strings."""
    print(format_uint256_dataframe(df, uint256_columns, mode="replace"))


# Monkey patch DataFrame to add our display methods
def _patch_dataframe() -> None:
    pl.DataFrame.with_uint256_display = UInt256DisplayMixin.with_uint256_display
    pl.DataFrame.show_uint256_decimal = UInt256DisplayMixin.show_uint256_decimal


# Auto-patch when module is imported
_patch_dataframe()
