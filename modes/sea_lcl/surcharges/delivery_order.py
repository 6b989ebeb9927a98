"""
Delivery Order Charges (LCL)

Delivery order issued by the consolidator, per shipment.
"""

from shared.surcharges import Surcharge


class DELIVERY_ORDER(Surcharge):
    """Delivery order - flat per shipment."""

    # Identity
    name = "DELIVERY_ORDER_CHARGES"

    # Pricing (USD)
    list_price = 121.00
