"""
Air Mode

Air freight priced on chargeable weight with a flat rate for small
shipments and weight tiers above 80 kg.
"""

from .calculate_costs import calculate, calculate_costs, supplement_shipments

__all__ = ["calculate_costs", "supplement_shipments", "calculate"]
