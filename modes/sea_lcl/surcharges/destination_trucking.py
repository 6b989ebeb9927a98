"""
Destination Trucking (LCL)

Trucking from the destination CFS, charged per CBM of total volume.
"""

from shared.surcharges import Surcharge

from ..data import VOLUME_FIELD


class DESTINATION_TRUCKING(Surcharge):
    """Destination trucking - per CBM."""

    # Identity
    name = "DESTINATION_TRUCKING"

    # Pricing (USD per CBM)
    list_price = 49.00
    per_unit_col = VOLUME_FIELD
