#!/usr/bin/env python3
"""
Group-by aggregation example - checked uint256 sums per account.

Token amounts in wei routinely exceed 64 bits. Summing them as uint256 keeps
the result exact, and an overflow past 2**256 - 1 fails the query instead of
wrapping around.
"""

import polars as pl
import polars_uint256 as u256

def main():
    print("🔗 Token Transfer Aggregation Example")
    print("=" * 50)

    transfers = pl.DataFrame({
        "account_id": ["alice", "bob", "alice", "charlie", "bob", "alice", "charlie"],
        "amount_wei": [
            "1000000000000000000",                      # 1 token (18 decimals)
            "2500000000000000000",
            "500000000000000000",
            "115792089237316195423570985008687907853269984665640564039457",  # > 2**192
            "1200000000000000000",
            "750000000000000000",
            "3300000000000000000",
        ],
        "block_number": [18500000, 18500001, 18500002, 18500003, 18500004, 18500005, 18500006]
    }).with_columns(amount=u256.from_decimal(pl.col("amount_wei")))

    print("📊 Raw transfer data:")
    print(transfers.select(["account_id", "amount_wei", "block_number"]))

    print("\n💰 Total per account (uint256 aggregation):")
    totals = transfers.group_by("account_id").agg([
        u256.sum(pl.col("amount")).alias("total"),
        pl.len().alias("tx_count"),
        pl.col("block_number").min().alias("first_block"),
    ]).sort("account_id")

    u256.print_uint256_dataframe(totals, ["total"])

    print("\n🔍 Ranking by total (byte order is numeric order):")
    ranked = totals.sort("total", descending=True).show_uint256_decimal("total")
    for row in ranked.iter_rows(named=True):
        print(f"{row['account_id']:8s}: {row['total']} wei ({row['tx_count']} txs)")

    print("\n🚫 Overflow is an error, not a wraparound:")
    try:
        pl.DataFrame({"v": u256.column.series("v", [2**256 - 1])}).select(
            pl.col("v").uint256 + 1
        )
    except Exception as exc:  # polars may wrap the uint256 error
        print(f"   {exc}")

if __name__ == "__main__":
    main()
