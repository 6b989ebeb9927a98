"""
Sea FCL Surcharges Package

Destination-side container charges, the transactional charge, and the
EXW/FOB incoterm charges. CIF is not itemized for sea freight.

All surcharges apply unconditionally except the incoterm charges. Container
charges are quoted for one container and are not multiplied by the
number of containers required.
"""

from shared.surcharges import EXW, FOB, TRANSACTIONAL, Surcharge

from .terminal_handling import THC
from .inland_handling import IHC
from .destination_clearance import DESTINATION_CLEARANCE
from .destination_delivery import DESTINATION_DELIVERY
from .destination_order import DESTINATION_ORDER


# Order matches the itemized breakdown
ALL = [
    THC,
    IHC,
    DESTINATION_CLEARANCE,
    DESTINATION_DELIVERY,
    DESTINATION_ORDER,
    TRANSACTIONAL,
    EXW,
    FOB,
]


__all__ = [
    "Surcharge",
    "THC",
    "IHC",
    "DESTINATION_CLEARANCE",
    "DESTINATION_DELIVERY",
    "DESTINATION_ORDER",
    "TRANSACTIONAL",
    "EXW",
    "FOB",
    "ALL",
]
