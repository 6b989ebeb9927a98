"""
Tiered Branch Condition

Destination and incoterm charges only apply to air shipments priced on the
weight tiers (chargeable weight above the fixed-rate limit).
"""

import polars as pl

from ..data import FIXED_RATE_MAX_KG


def uses_tiered_rate() -> pl.Expr:
    return pl.col("chargeable_weight_kg") > FIXED_RATE_MAX_KG
