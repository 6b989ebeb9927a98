"""
Shipping Terms

Enumerations for the categorical shipment fields. Values match the strings
used in shipment frames and CSV inputs.
"""

from enum import Enum


class ShippingMode(str, Enum):
    SEA_FCL = "Sea FCL"
    SEA_LCL = "Sea LCL"
    AIR = "Air"


class Incoterm(str, Enum):
    EXW = "EXW"
    FOB = "FOB"
    CIF = "CIF"


class ContainerType(str, Enum):
    FT20 = "20 ft"
    FT40 = "40 ft"


SHIPPING_MODES = [m.value for m in ShippingMode]
INCOTERMS = [t.value for t in Incoterm]
CONTAINER_TYPES = [c.value for c in ContainerType]


__all__ = [
    "ShippingMode",
    "Incoterm",
    "ContainerType",
    "SHIPPING_MODES",
    "INCOTERMS",
    "CONTAINER_TYPES",
]
