"""
Shared Surcharges

Base class, helpers and the surcharges every shipping mode uses.
"""

from .base import (
    Surcharge,
    USD_RATE_COL,
    apply_surcharges,
    round_half_up,
    total_freight,
)
from .incoterm import CIF, EXW, FOB, INCOTERM_CHARGES_USD, IncotermCharge
from .transactional import TRANSACTIONAL

__all__ = [
    "Surcharge",
    "USD_RATE_COL",
    "apply_surcharges",
    "round_half_up",
    "total_freight",
    "IncotermCharge",
    "INCOTERM_CHARGES_USD",
    "EXW",
    "FOB",
    "CIF",
    "TRANSACTIONAL",
]
