"""
Inland Handling Charge (IHC)

Moving the container from terminal to inland depot, per shipment.
"""

from shared.surcharges import Surcharge


class IHC(Surcharge):
    """Inland handling - flat per shipment."""

    # Identity
    name = "IHC"

    # Pricing (USD)
    list_price = 302.00
