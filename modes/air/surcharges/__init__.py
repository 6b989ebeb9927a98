"""
Air Surcharges Package

Transactional charge on every shipment. Destination clearance, destination
trucking and incoterm charges only above the fixed-rate weight limit.
"""

from shared.surcharges import TRANSACTIONAL, Surcharge

from .destination_clearance import DESTINATION_CLEARANCE
from .destination_trucking import DESTINATION_TRUCKING
from .incoterm import AIR_CIF, AIR_EXW, AIR_FOB
from .tiered import uses_tiered_rate


ALL = [
    TRANSACTIONAL,
    DESTINATION_CLEARANCE,
    DESTINATION_TRUCKING,
    AIR_EXW,
    AIR_FOB,
    AIR_CIF,
]


__all__ = [
    "Surcharge",
    "TRANSACTIONAL",
    "DESTINATION_CLEARANCE",
    "DESTINATION_TRUCKING",
    "AIR_EXW",
    "AIR_FOB",
    "AIR_CIF",
    "uses_tiered_rate",
    "ALL",
]
