"""
Sea LCL Data

Reference configuration for part-container sea freight.
"""

from .reference.freight import FREIGHT_PER_CBM_USD, VOLUME_FIELD

__all__ = [
    "FREIGHT_PER_CBM_USD",
    "VOLUME_FIELD",
]
