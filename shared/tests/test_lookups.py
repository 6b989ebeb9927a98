"""
Unit Tests for the Reference Lookups

Run with: pytest shared/tests/test_lookups.py -v
"""

import pytest
import polars as pl

from shared.errors import InvalidClassification, NotFound, RouteNotFound
from shared.lookups import DutyTable, FreightRateTable, load_freight_costs, load_hs_codes
from shared.reference import HSN_CODES


# =============================================================================
# LOADER TESTS
# =============================================================================

class TestLoaders:

    def test_hs_codes_schema(self):
        df = load_hs_codes()
        assert df.columns == ["hsn_code", "description", "duty_percentage"]
        assert df["hsn_code"].dtype == pl.Utf8
        assert df["duty_percentage"].dtype == pl.Float64

    def test_every_offered_code_has_a_duty(self):
        codes = set(load_hs_codes()["hsn_code"].to_list())
        assert set(HSN_CODES) <= codes

    def test_freight_costs_schema(self):
        df = load_freight_costs()
        assert df["freight_cost_usd"].dtype == pl.Float64
        assert set(df["container_type"].unique().to_list()) == {"20 ft", "40 ft"}

    def test_load_from_path(self, tmp_path):
        path = tmp_path / "codes.csv"
        path.write_text("hsn_code,description,duty_percentage\n0101,Horses,30\n")
        df = load_hs_codes(path)
        assert df["hsn_code"][0] == "0101"


# =============================================================================
# DUTY LOOKUP TESTS
# =============================================================================

class TestDutyTable:

    def test_known_codes(self):
        lookup = DutyTable()
        assert lookup("8471") == 0.0
        assert lookup("8517") == 20.0
        assert lookup("9503") == 70.0

    def test_code_is_stripped(self):
        assert DutyTable()(" 2208 ") == 150.0

    def test_unknown_code(self):
        with pytest.raises(InvalidClassification, match="0000"):
            DutyTable()("0000")

    def test_missing_duty_is_not_found(self):
        table = pl.DataFrame(
            {"hsn_code": ["1234"], "description": ["?"], "duty_percentage": [None]},
            schema={"hsn_code": pl.Utf8, "description": pl.Utf8, "duty_percentage": pl.Float64},
        )
        with pytest.raises(InvalidClassification):
            DutyTable(table)("1234")

    def test_taxonomy(self):
        """Lookup failures are NotFound and LookupError."""
        with pytest.raises(LookupError):
            DutyTable()("0000")
        assert issubclass(InvalidClassification, NotFound)


# =============================================================================
# FREIGHT LOOKUP TESTS
# =============================================================================

class TestFreightRateTable:

    def test_known_route(self):
        lookup = FreightRateTable()
        assert lookup("China", "Shanghai", "Chennai", "20 ft") == 1500.0
        assert lookup("China", "Shanghai", "Chennai", "40 ft") == 2400.0

    def test_unknown_route(self):
        with pytest.raises(RouteNotFound, match="Atlantis"):
            FreightRateTable()("Atlantis", "Shanghai", "Chennai", "20 ft")

    def test_container_type_must_match(self):
        with pytest.raises(RouteNotFound):
            FreightRateTable()("China", "Shanghai", "Chennai", "45 ft")

    def test_custom_table(self):
        table = pl.DataFrame({
            "country": ["USA"],
            "origin_port": ["houston"],
            "destination_port": ["Mundra"],
            "container_type": ["40 ft"],
            "freight_cost_usd": [3100.0],
            "alternate_routes": [None],
        })
        assert FreightRateTable(table)("USA", "houston", "Mundra", "40 ft") == 3100.0
