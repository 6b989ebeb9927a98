"""
Sea LCL Surcharges Package

Per-CBM trucking, flat clearance and delivery order, the transactional
charge, and the EXW/FOB incoterm charges.
"""

from shared.surcharges import EXW, FOB, TRANSACTIONAL, Surcharge

from .destination_trucking import DESTINATION_TRUCKING
from .destination_clearance import DESTINATION_CLEARANCE
from .delivery_order import DELIVERY_ORDER


ALL = [
    DESTINATION_TRUCKING,
    DESTINATION_CLEARANCE,
    DELIVERY_ORDER,
    TRANSACTIONAL,
    EXW,
    FOB,
]


__all__ = [
    "Surcharge",
    "DESTINATION_TRUCKING",
    "DESTINATION_CLEARANCE",
    "DELIVERY_ORDER",
    "TRANSACTIONAL",
    "EXW",
    "FOB",
    "ALL",
]
