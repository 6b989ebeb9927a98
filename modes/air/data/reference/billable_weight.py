"""
Chargeable Weight Configuration

Air freight charges the greater of actual and volumetric weight.
Volumetric weight uses the standard IATA divisor on dimensions in cm.
"""

DIM_FACTOR = 6000                 # Cubic centimeters per kg
FACTOR_FIELD = "total_cubic_cm"   # Divide this field by DIM_FACTOR for volumetric weight

# At or below this chargeable weight a flat per-kg rate applies and no
# destination charges are added; above it the weight tiers apply
FIXED_RATE_MAX_KG = 80
