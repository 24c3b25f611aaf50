#!/usr/bin/env python3
"""Example: high-precision decimals using scaled integers with uint256.

We represent a Decimal d with scale S as an integer N = round(d * 10**S),
compute with exact integer arithmetic, then convert back for display.
"""

import polars as pl
import polars_uint256 as u256

S = 20  # scale (number of decimal places)
TEN_S = 10 ** S

df = pl.select(
    a=u256.from_int(3 * TEN_S // 2),  # 1.5 (S decimals)
    b=u256.from_int(TEN_S // 4),      # 0.25
)

# Multiply: (a*b)/10^S keeps scale S
df = df.with_columns(prod=u256.div(u256.mul(pl.col("a"), pl.col("b")), u256.from_int(TEN_S)))

# Divide: (a*10^S)/b keeps scale S
df = df.with_columns(div=u256.div(u256.mul(pl.col("a"), u256.from_int(TEN_S)), pl.col("b")))

# Show results as decimal text
out = df.with_uint256_display("a", "prod", "div")
print(out.select(["a_dec", "prod_dec", "div_dec"]))
