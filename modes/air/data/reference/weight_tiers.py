"""
Air Freight Rates

Per-kg USD rates. Flat rate for small shipments, weight tiers above
FIXED_RATE_MAX_KG.
"""

BASE_RATE_USD = 12.0   # USD per kg, chargeable weight <= FIXED_RATE_MAX_KG

# (upper bound kg inclusive, USD per kg)
WEIGHT_TIERS = [
    (2, 12.0),
    (10, 11.0),
    (40, 10.0),
    (99, 9.0),
    (200, 3.2),
    (300, 2.8),
    (500, 2.5),
    (5000, 2.1),
]
ABOVE_TOP_TIER_RATE_USD = 1.8   # Above 5000 kg
