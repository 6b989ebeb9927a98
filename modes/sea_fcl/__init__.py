"""
Sea FCL Mode

Full-container-load sea freight: route-based freight for the container plus
destination charges, with container planning.
"""

from .calculate_costs import calculate, calculate_costs, supplement_shipments

__all__ = ["calculate_costs", "supplement_shipments", "calculate"]
