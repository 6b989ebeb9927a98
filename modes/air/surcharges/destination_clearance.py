"""
Destination Clearance (Air)

Customs clearance at the destination airport, per shipment.
Tiered shipments only.
"""

import polars as pl

from shared.surcharges import Surcharge

from .tiered import uses_tiered_rate


class DESTINATION_CLEARANCE(Surcharge):
    """Destination clearance - flat per shipment above the fixed-rate limit."""

    # Identity
    name = "DESTINATION_CLEARANCE"

    # Pricing (USD)
    list_price = 61.00

    @classmethod
    def conditions(cls) -> pl.Expr:
        return uses_tiered_rate()
