"""
Sea LCL Freight Configuration

Consolidated freight is charged per cubic meter of total shipment volume.
"""

FREIGHT_PER_CBM_USD = 60      # USD per CBM
VOLUME_FIELD = "total_cbm"    # Freight and trucking are charged per unit of this field
