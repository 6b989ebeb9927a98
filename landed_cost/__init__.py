"""
Landed Cost Engine

Total cost of importing a shipment in home currency: invoice value,
freight and surcharges per shipping mode, and customs duty.
"""

from .calculate_costs import (
    REQUIRED_COLUMNS,
    calculate,
    calculate_costs,
    compute_landed_cost,
    supplement_shipments,
)
from .models import (
    SHIPMENT_SCHEMA,
    AirShipment,
    CostBreakdown,
    SeaFCLShipment,
    SeaLCLShipment,
    Shipment,
    ShipmentDetails,
)
from .version import VERSION

__all__ = [
    "calculate_costs",
    "compute_landed_cost",
    "supplement_shipments",
    "calculate",
    "REQUIRED_COLUMNS",
    "SHIPMENT_SCHEMA",
    "Shipment",
    "SeaFCLShipment",
    "SeaLCLShipment",
    "AirShipment",
    "ShipmentDetails",
    "CostBreakdown",
    "VERSION",
]
