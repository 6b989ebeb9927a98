"""
Destination Order Charges (FCL)

Delivery order issued by the line at destination, per shipment.
"""

from shared.surcharges import Surcharge


class DESTINATION_ORDER(Surcharge):
    """Destination order - flat per shipment."""

    # Identity
    name = "DESTINATION_ORDER_CHARGES"

    # Pricing (USD)
    list_price = 121.00
