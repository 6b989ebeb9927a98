"""
Unit Tests for the Air Cost Calculator

Run with: pytest modes/air/tests/test_air.py -v
"""

import pytest
import polars as pl

from modes.air import calculate_costs, supplement_shipments
from modes.air.data import WEIGHT_TIERS, tier_rate


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def base_shipment():
    """Small 50 kg box, 1000 USD invoice at 83 INR per USD."""
    return pl.DataFrame({
        "incoterm": ["FOB"],
        "gross_weight_kg": [50.0],
        "length": [60.0],
        "width": [50.0],
        "height": [30.0],
        "package_count": [2],
        "product_cost_home": [83000.0],
        "usd_rate": [83.0],
    })


def with_weight(df: pl.DataFrame, weight: float, incoterm: str = "FOB") -> pl.DataFrame:
    return df.with_columns([
        pl.lit(weight).alias("gross_weight_kg"),
        pl.lit(incoterm).alias("incoterm"),
    ])


# =============================================================================
# CHARGEABLE WEIGHT TESTS
# =============================================================================

class TestChargeableWeight:

    def test_volumetric_weight(self, base_shipment):
        """60 x 50 x 30 cm x 2 / 6000 = 30 kg."""
        df = supplement_shipments(base_shipment)
        assert df["volumetric_weight_kg"][0] == pytest.approx(30.0)

    def test_gross_weight_wins(self, base_shipment):
        df = supplement_shipments(base_shipment)
        assert df["chargeable_weight_kg"][0] == pytest.approx(50.0)
        assert df["uses_volumetric_weight"][0] == False

    def test_volumetric_weight_wins(self, base_shipment):
        shipment = base_shipment.with_columns([
            pl.lit(100.0).alias("length"),
            pl.lit(100.0).alias("width"),
            pl.lit(100.0).alias("height"),
            pl.lit(1).alias("package_count"),
            pl.lit(10.0).alias("gross_weight_kg"),
        ])
        df = supplement_shipments(shipment)
        assert df["chargeable_weight_kg"][0] == pytest.approx(1_000_000 / 6000)
        assert df["uses_volumetric_weight"][0] == True


# =============================================================================
# TIER TESTS
# =============================================================================

class TestTierRate:

    @pytest.mark.parametrize("weight,rate", [
        (2.0, 12.0), (2.01, 11.0), (10.0, 11.0), (40.0, 10.0), (99.0, 9.0),
        (150.0, 3.2), (300.0, 2.8), (500.0, 2.5), (5000.0, 2.1), (5000.5, 1.8),
    ])
    def test_tier_boundaries(self, weight, rate):
        df = pl.DataFrame({"w": [weight]}).select(tier_rate("w").alias("rate"))
        assert df["rate"][0] == rate

    def test_tiers_ascending(self):
        uppers = [upper for upper, _ in WEIGHT_TIERS]
        assert uppers == sorted(uppers)


# =============================================================================
# FIXED-RATE BRANCH TESTS
# =============================================================================

class TestFixedRate:

    def test_freight(self, base_shipment):
        df = calculate_costs(base_shipment)
        assert df["freight_only_home"][0] == pytest.approx(50 * 12 * 83)

    def test_only_transactional_charge(self, base_shipment):
        df = calculate_costs(base_shipment)
        assert df["cost_transactional_charges"][0] == 2490.0
        for col in ["cost_destination_clearance", "cost_destination_trucking",
                    "cost_exw_charges", "cost_fob_charges", "cost_cif_charges"]:
            assert df[col][0] is None
        assert df["total_freight_home"][0] == pytest.approx(49800 + 2490)

    def test_80kg_is_fixed_rate(self, base_shipment):
        df = calculate_costs(with_weight(base_shipment, 80.0))
        assert df["air_rate_usd"][0] == 12.0
        assert df["freight_only_home"][0] == pytest.approx(79680.0)
        assert df["cost_destination_clearance"][0] is None

    def test_cif_keeps_freight(self, base_shipment):
        df = calculate_costs(with_weight(base_shipment, 50.0, "CIF"))
        assert df["freight_only_home"][0] == pytest.approx(49800.0)
        assert df["cost_cif_charges"][0] is None


# =============================================================================
# TIERED BRANCH TESTS
# =============================================================================

class TestTieredRate:

    def test_just_above_80kg_is_tiered(self, base_shipment):
        df = calculate_costs(with_weight(base_shipment, 80.01))
        assert df["air_rate_usd"][0] == 9.0
        assert df["freight_only_home"][0] == 59767.0

    def test_destination_charges(self, base_shipment):
        df = calculate_costs(with_weight(base_shipment, 150.0))
        assert df["cost_destination_clearance"][0] == pytest.approx(5063.0)
        assert df["cost_destination_trucking"][0] == pytest.approx(2988.0)

    def test_exw_total(self, base_shipment):
        df = calculate_costs(with_weight(base_shipment, 150.0, "EXW"))
        assert df["freight_only_home"][0] == 39840.0
        assert df["cost_exw_charges"][0] == pytest.approx(24900.0)
        assert df["total_freight_home"][0] == pytest.approx(39840 + 24900 + 5063 + 2988 + 2490)

    def test_cif_zeroes_freight(self, base_shipment):
        """150 kg CIF: tier 3.2, freight line absorbed, CIF itemized at zero."""
        df = calculate_costs(with_weight(base_shipment, 150.0, "CIF"))
        assert df["air_rate_usd"][0] == 3.2
        assert df["freight_only_home"][0] == 0.0
        assert df["cost_cif_charges"][0] == 0.0
        assert df["total_freight_home"][0] == pytest.approx(10541.0)
