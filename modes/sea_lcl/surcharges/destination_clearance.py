"""
Destination Clearance (LCL)

Customs clearance at destination, per shipment. Same rate as FCL.
"""

from shared.surcharges import Surcharge


class DESTINATION_CLEARANCE(Surcharge):
    """Destination clearance - flat per shipment."""

    # Identity
    name = "DESTINATION_CLEARANCE"

    # Pricing (USD)
    list_price = 241.00
