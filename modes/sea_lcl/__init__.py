"""
Sea LCL Mode

Part-container sea freight priced per CBM.
"""

from .calculate_costs import calculate, calculate_costs, supplement_shipments

__all__ = ["calculate_costs", "supplement_shipments", "calculate"]
