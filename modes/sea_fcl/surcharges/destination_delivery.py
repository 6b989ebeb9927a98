"""
Destination Delivery Charges (FCL)

Delivery from the destination port, priced by container size.
"""

import polars as pl

from shared.surcharges import Surcharge
from shared.terms import ContainerType


class DESTINATION_DELIVERY(Surcharge):
    """Destination delivery - 20 ft and 40 ft containers priced separately."""

    # Identity
    name = "DESTINATION_DELIVERY_CHARGES"

    # Pricing (USD, 20 ft price; 40 ft below)
    list_price = 241.00
    PRICE_40FT = 362.00

    @classmethod
    def cost(cls) -> pl.Expr:
        return (
            pl.when(pl.col("container_type") == ContainerType.FT20.value)
            .then(pl.lit(cls.list_price))
            .otherwise(pl.lit(cls.PRICE_40FT))
        )
