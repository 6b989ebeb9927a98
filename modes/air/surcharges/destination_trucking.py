"""
Destination Trucking (Air)

Trucking and delivery order from the destination airport, charged as one
flat amount per shipment. Tiered shipments only.
"""

import polars as pl

from shared.surcharges import Surcharge

from .tiered import uses_tiered_rate


class DESTINATION_TRUCKING(Surcharge):
    """Destination trucking - flat per shipment above the fixed-rate limit."""

    # Identity
    name = "DESTINATION_TRUCKING"

    # Pricing (USD)
    list_price = 36.00

    @classmethod
    def conditions(cls) -> pl.Expr:
        return uses_tiered_rate()
