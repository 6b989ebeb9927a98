"""
Terminal Handling Charge (THC)

Charged at the destination terminal, per shipment.
"""

from shared.surcharges import Surcharge


class THC(Surcharge):
    """Terminal handling - flat per shipment."""

    # Identity
    name = "THC"

    # Pricing (USD)
    list_price = 725.00
