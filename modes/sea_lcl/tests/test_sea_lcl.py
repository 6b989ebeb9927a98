"""
Unit Tests for the Sea LCL Cost Calculator

Run with: pytest modes/sea_lcl/tests/test_sea_lcl.py -v
"""

import pytest
import polars as pl

from modes.sea_lcl import calculate_costs, supplement_shipments


@pytest.fixture
def base_shipment():
    """Five 1 m cubes, CIF, 1000 USD at 83 INR per USD."""
    return pl.DataFrame({
        "incoterm": ["CIF"],
        "length": [1.0],
        "width": [1.0],
        "height": [1.0],
        "package_count": [5],
        "product_cost_home": [83000.0],
        "usd_rate": [83.0],
    })


class TestSupplementShipments:

    def test_volume(self, base_shipment):
        df = supplement_shipments(base_shipment)
        assert df["package_cbm"][0] == pytest.approx(1.0)
        assert df["total_cbm"][0] == pytest.approx(5.0)

    def test_no_container_plan(self, base_shipment):
        df = supplement_shipments(base_shipment)
        assert "required_20ft" not in df.columns


class TestCalculate:

    def test_freight_per_cbm(self, base_shipment):
        df = calculate_costs(base_shipment)
        assert df["freight_only_home"][0] == pytest.approx(24900.0)

    def test_freight_not_rounded(self):
        # 0.06 CBM x 10 = 0.6 CBM at 60 USD
        df = pl.DataFrame({
            "incoterm": ["CIF"], "length": [0.5], "width": [0.4], "height": [0.3],
            "package_count": [10], "product_cost_home": [1000.0], "usd_rate": [83.0],
        })
        df = calculate_costs(df)
        assert df["freight_only_home"][0] == pytest.approx(0.6 * 60 * 83)

    def test_charges(self, base_shipment):
        df = calculate_costs(base_shipment)
        assert df["cost_destination_trucking"][0] == pytest.approx(20335.0)
        assert df["cost_destination_clearance"][0] == pytest.approx(20003.0)
        assert df["cost_delivery_order_charges"][0] == pytest.approx(10043.0)
        assert df["cost_transactional_charges"][0] == 2490.0

    def test_no_container_charges(self, base_shipment):
        df = calculate_costs(base_shipment)
        assert "cost_thc" not in df.columns
        assert "cost_ihc" not in df.columns

    def test_cif_total_freight(self, base_shipment):
        df = calculate_costs(base_shipment)
        assert df["total_freight_home"][0] == pytest.approx(24900 + 20335 + 20003 + 10043 + 2490)

    @pytest.mark.parametrize("incoterm,charge", [("EXW", 24900.0), ("FOB", 16600.0)])
    def test_incoterm_charge(self, base_shipment, incoterm, charge):
        shipment = base_shipment.with_columns(pl.lit(incoterm).alias("incoterm"))
        df = calculate_costs(shipment)
        assert df[f"cost_{incoterm.lower()}_charges"][0] == pytest.approx(charge)
        assert df["total_freight_home"][0] == pytest.approx(77771 + charge)
