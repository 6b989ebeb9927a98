"""
Container Capacities

Usable volume per container size, in cubic meters (CBM).
"""

CONTAINER_20FT_CAPACITY_CBM = 33
CONTAINER_40FT_CAPACITY_CBM = 67

EXCEEDS_CONTAINER = "Package size exceeds container capacity"
EXCEEDS_20FT = "Package size exceeds 20ft container capacity"
