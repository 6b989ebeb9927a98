"""
Estimate Landed Costs for a CSV of Shipments
============================================

Reads shipments from a CSV file, calculates landed costs for every row and
writes the result to a CSV file.

Usage:
    python -m landed_cost.scripts.estimate_batch shipments.csv -o landed_costs.csv
    python -m landed_cost.scripts.estimate_batch shipments.csv --fallback-rates
    python -m landed_cost.scripts.estimate_batch shipments.csv --hs-codes my_codes.csv
"""

import argparse
import sys
from pathlib import Path

import polars as pl

from landed_cost import SHIPMENT_SCHEMA, calculate_costs
from shared.currency import HOME_CURRENCY, RateSnapshot, format_currency, get_rates
from shared.errors import LandedCostError
from shared.lookups import DutyTable, FreightRateTable, load_freight_costs, load_hs_codes


# =============================================================================
# CONFIGURATION
# =============================================================================

# Columns to write (identity, request, results)
OUTPUT_COLUMNS = list(SHIPMENT_SCHEMA) + [
    "duty_percentage",
    "product_cost_home",
    "freight_only_home",
    "total_freight_home",
    "assessable_value_home",
    "customs_duty_home",
    "total_landed_cost_home",
    "calculator_version",
]


def load_shipments(path: Path) -> pl.DataFrame:
    """
    Read shipments with every column as text.

    Numeric columns are parsed by the calculator, which reports rows that
    do not parse instead of failing on the first bad value.
    """
    return pl.read_csv(path, infer_schema_length=0)


def select_output(df: pl.DataFrame) -> pl.DataFrame:
    """Request and result columns first, then every itemized charge."""
    charges = sorted(c for c in df.columns if c.startswith("cost_"))
    columns = [c for c in OUTPUT_COLUMNS if c in df.columns]
    return df.select(columns[:-1] + charges + columns[-1:])


def print_summary(df: pl.DataFrame, rates: RateSnapshot) -> None:
    print("\n" + "=" * 50)
    print("BATCH SUMMARY")
    print("=" * 50)
    print(f"Exchange rates: {rates.source} ({rates.date or 'no date'}), USD = {rates.usd_rate:.4f} {HOME_CURRENCY}")

    summary = (
        df
        .group_by("shipping_mode")
        .agg([
            pl.len().alias("shipments"),
            pl.col("total_landed_cost_home").sum().alias("landed_cost"),
        ])
        .sort("shipping_mode")
    )

    for row in summary.iter_rows(named=True):
        print(f"  {row['shipping_mode']:<8} {row['shipments']:>6} shipment(s)  "
              f"{format_currency(row['landed_cost'], HOME_CURRENCY):>20}")

    total = df["total_landed_cost_home"].sum()
    print(f"  {'Total':<8} {len(df):>6} shipment(s)  {format_currency(total, HOME_CURRENCY):>20}")
    print()


def main():
    parser = argparse.ArgumentParser(
        description="Estimate landed costs for a CSV of shipments",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m landed_cost.scripts.estimate_batch shipments.csv
  python -m landed_cost.scripts.estimate_batch shipments.csv -o landed_costs.csv
  python -m landed_cost.scripts.estimate_batch shipments.csv --fallback-rates
        """
    )
    parser.add_argument(
        "input",
        type=Path,
        help="CSV file with one shipment per row"
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=None,
        help="Output CSV file (default: <input>_landed_costs.csv)"
    )
    parser.add_argument(
        "--hs-codes",
        type=Path,
        default=None,
        help="HS code duty table CSV (default: bundled table)"
    )
    parser.add_argument(
        "--freight-costs",
        type=Path,
        default=None,
        help="Sea FCL freight cost CSV (default: bundled table)"
    )
    parser.add_argument(
        "--fallback-rates",
        action="store_true",
        help="Use the built-in exchange rates instead of fetching"
    )

    args = parser.parse_args()
    output = args.output or args.input.with_name(f"{args.input.stem}_landed_costs.csv")

    print(f"Reading shipments from {args.input}...")
    shipments = load_shipments(args.input)
    print(f"  {len(shipments):,} shipment(s)")

    rates = RateSnapshot.fallback() if args.fallback_rates else get_rates()

    try:
        df = calculate_costs(
            shipments,
            duty_lookup=DutyTable(load_hs_codes(args.hs_codes)),
            freight_lookup=FreightRateTable(load_freight_costs(args.freight_costs)),
            rates=rates,
        )
    except LandedCostError as e:
        print(f"\nError: {e}")
        sys.exit(1)

    print_summary(df, rates)

    select_output(df).write_csv(output)
    print(f"Wrote {len(df):,} row(s) to {output}")


if __name__ == "__main__":
    main()
