"""
Air Cost Calculator

Air freight priced on chargeable weight. DataFrame in, DataFrame out.

REQUIRED INPUT COLUMNS
----------------------
    incoterm            - EXW, FOB or CIF
    length, width, height - Package dimensions in centimeters
    package_count       - Number of packages
    gross_weight_kg     - Actual shipment weight in kg
    product_cost_home   - Invoice value in home currency
    usd_rate            - Home currency per USD

OUTPUT COLUMNS ADDED
--------------------
    supplement_shipments() adds:
        - total_cubic_cm, volumetric_weight_kg
        - uses_volumetric_weight, chargeable_weight_kg

    calculate() adds:
        - air_rate_usd
        - cost_* per surcharge (null when not applicable)
        - freight_only_home, total_freight_home

PRICING BRANCHES
----------------
    chargeable <= 80 kg   flat 12 USD/kg, transactional charge only
    chargeable >  80 kg   weight tier rate, rounded, plus clearance,
                          trucking and incoterm charge
    ... and CIF           freight line absorbed into the CIF charge:
                          freight_only_home is 0
"""

import polars as pl

from shared.surcharges import USD_RATE_COL, apply_surcharges, round_half_up, total_freight
from shared.terms import Incoterm

from .data import BASE_RATE_USD, DIM_FACTOR, FACTOR_FIELD, tier_rate
from .surcharges import ALL, uses_tiered_rate


def calculate_costs(df: pl.DataFrame) -> pl.DataFrame:
    """Supplement and calculate in one call."""
    df = supplement_shipments(df)
    df = calculate(df)
    return df


# =============================================================================
# SUPPLEMENT SHIPMENTS
# =============================================================================

def supplement_shipments(df: pl.DataFrame) -> pl.DataFrame:
    """Add volumetric and chargeable weight."""
    df = df.with_columns(
        (pl.col("length") * pl.col("width") * pl.col("height") * pl.col("package_count"))
        .alias("total_cubic_cm")
    )

    df = df.with_columns(
        (pl.col(FACTOR_FIELD) / DIM_FACTOR).alias("volumetric_weight_kg")
    )

    df = df.with_columns([
        (pl.col("volumetric_weight_kg") > pl.col("gross_weight_kg")).alias("uses_volumetric_weight"),
        pl.max_horizontal("gross_weight_kg", "volumetric_weight_kg").alias("chargeable_weight_kg"),
    ])

    return df


# =============================================================================
# CALCULATE COSTS
# =============================================================================

def calculate(df: pl.DataFrame) -> pl.DataFrame:
    """
    Calculate air freight and surcharges for supplemented shipments.

    Processing order:
        1. Rate           - flat base rate or weight tier
        2. Surcharges     - transactional, then tiered-only charges
        3. Freight        - per-kg freight, CIF zeroing
        4. Totals         - freight plus all applied surcharges
    """
    df = _add_rate(df)
    df = apply_surcharges(df, ALL)
    df = _calculate_freight(df)
    df = _calculate_total_freight(df)
    return df


def _add_rate(df: pl.DataFrame) -> pl.DataFrame:
    return df.with_columns(
        pl.when(uses_tiered_rate())
        .then(tier_rate("chargeable_weight_kg"))
        .otherwise(pl.lit(BASE_RATE_USD))
        .alias("air_rate_usd")
    )


def _calculate_freight(df: pl.DataFrame) -> pl.DataFrame:
    """
    Freight in home currency.

    Flat-rate freight is not rounded; tiered freight is converted from a
    USD total and rounded. Tiered CIF shipments carry no freight line.
    """
    flat = pl.col("chargeable_weight_kg") * (BASE_RATE_USD * pl.col(USD_RATE_COL))
    tiered = round_half_up(
        pl.col("chargeable_weight_kg") * pl.col("air_rate_usd") * pl.col(USD_RATE_COL)
    )
    absorbed_by_cif = uses_tiered_rate() & (pl.col("incoterm") == Incoterm.CIF.value)

    return df.with_columns(
        pl.when(absorbed_by_cif).then(pl.lit(0.0))
        .when(uses_tiered_rate()).then(tiered)
        .otherwise(flat)
        .alias("freight_only_home")
    )


def _calculate_total_freight(df: pl.DataFrame) -> pl.DataFrame:
    return df.with_columns(total_freight(ALL).alias("total_freight_home"))


__all__ = [
    "calculate_costs",
    "supplement_shipments",
    "calculate",
]
