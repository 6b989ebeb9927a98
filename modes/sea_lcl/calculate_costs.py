"""
Sea LCL Cost Calculator

Less-than-container-load sea freight, priced by volume. DataFrame in,
DataFrame out.

REQUIRED INPUT COLUMNS
----------------------
    incoterm            - EXW, FOB or CIF
    length, width, height - Package dimensions in meters
    package_count       - Number of packages
    product_cost_home   - Invoice value in home currency
    usd_rate            - Home currency per USD

OUTPUT COLUMNS ADDED
--------------------
    supplement_shipments() adds:
        - package_cbm, total_cbm

    calculate() adds:
        - cost_* per surcharge (null when not applicable)
        - freight_only_home, total_freight_home
"""

import polars as pl

from shared.containers import add_volume
from shared.surcharges import USD_RATE_COL, apply_surcharges, total_freight

from .data import FREIGHT_PER_CBM_USD, VOLUME_FIELD
from .surcharges import ALL


def calculate_costs(df: pl.DataFrame) -> pl.DataFrame:
    """Supplement and calculate in one call."""
    df = supplement_shipments(df)
    df = calculate(df)
    return df


def supplement_shipments(df: pl.DataFrame) -> pl.DataFrame:
    """
    Add package and total volume.

    No container counts: LCL shares containers, only volume matters.
    """
    return add_volume(df)


def calculate(df: pl.DataFrame) -> pl.DataFrame:
    """Surcharges, per-CBM freight and totals for supplemented shipments."""
    df = apply_surcharges(df, ALL)
    df = _calculate_freight(df)
    df = _calculate_total_freight(df)
    return df


def _calculate_freight(df: pl.DataFrame) -> pl.DataFrame:
    """Freight per CBM of total volume (not rounded)."""
    return df.with_columns(
        (pl.col(VOLUME_FIELD) * (FREIGHT_PER_CBM_USD * pl.col(USD_RATE_COL)))
        .alias("freight_only_home")
    )


def _calculate_total_freight(df: pl.DataFrame) -> pl.DataFrame:
    return df.with_columns(total_freight(ALL).alias("total_freight_home"))


__all__ = [
    "calculate_costs",
    "supplement_shipments",
    "calculate",
]
