"""
Air Data

Reference configuration for air freight: chargeable weight rules and
per-kg rates.
"""

import polars as pl

from .reference.billable_weight import DIM_FACTOR, FACTOR_FIELD, FIXED_RATE_MAX_KG
from .reference.weight_tiers import (
    ABOVE_TOP_TIER_RATE_USD,
    BASE_RATE_USD,
    WEIGHT_TIERS,
)


def tier_rate(weight_col: str) -> pl.Expr:
    """
    Polars expression for the per-kg USD rate of a chargeable weight.

    Args:
        weight_col: Column name for chargeable weight in kg
    """
    upper, rate = WEIGHT_TIERS[0]
    expr = pl.when(pl.col(weight_col) <= upper).then(pl.lit(rate))
    for upper, rate in WEIGHT_TIERS[1:]:
        expr = expr.when(pl.col(weight_col) <= upper).then(pl.lit(rate))
    return expr.otherwise(pl.lit(ABOVE_TOP_TIER_RATE_USD))


__all__ = [
    "DIM_FACTOR",
    "FACTOR_FIELD",
    "FIXED_RATE_MAX_KG",
    "BASE_RATE_USD",
    "WEIGHT_TIERS",
    "ABOVE_TOP_TIER_RATE_USD",
    "tier_rate",
]
