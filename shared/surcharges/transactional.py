"""
Transactional Charges

Flat percentage of the invoice value, charged on every shipment regardless
of mode. Already in home currency: the base is the converted product cost.
"""

import polars as pl

from .base import Surcharge, round_half_up


class TRANSACTIONAL(Surcharge):
    """Transactional charges - 3% of invoice value, rounded."""

    # Identity
    name = "TRANSACTIONAL_CHARGES"

    # Pricing (percentage of product_cost_home)
    list_price = 3
    in_usd = False

    @classmethod
    def cost(cls) -> pl.Expr:
        return round_half_up(pl.col("product_cost_home") * (cls.list_price / 100))
