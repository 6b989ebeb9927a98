"""
Unit Tests for the Container Planner

Run with: pytest shared/tests/test_containers.py -v
"""

import pytest
import polars as pl

from shared.containers import (
    EXCEEDS_20FT,
    EXCEEDS_CONTAINER,
    add_container_requirements,
    add_volume,
    plan_containers,
)


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def cube_shipment():
    """Forty 1 m cubes."""
    return pl.DataFrame({
        "length": [1.0],
        "width": [1.0],
        "height": [1.0],
        "package_count": [40],
    })


# =============================================================================
# VOLUME TESTS
# =============================================================================

class TestVolume:

    def test_package_and_total_cbm(self):
        df = pl.DataFrame({
            "length": [1.2], "width": [0.8], "height": [0.5], "package_count": [10],
        })
        df = add_volume(df)
        assert df["package_cbm"][0] == pytest.approx(0.48)
        assert df["total_cbm"][0] == pytest.approx(4.8)


# =============================================================================
# CONTAINER COUNT TESTS
# =============================================================================

class TestContainerRequirements:

    def test_both_sizes_computed(self, cube_shipment):
        """33 cubes fit a 20ft, 67 fit a 40ft."""
        df = add_container_requirements(cube_shipment)
        assert df["packages_per_20ft"][0] == 33
        assert df["packages_per_40ft"][0] == 67
        assert df["required_20ft"][0] == 2
        assert df["required_40ft"][0] == 1
        assert df["container_error"][0] is None

    def test_counts_are_integers(self, cube_shipment):
        df = add_container_requirements(cube_shipment)
        for col in ["packages_per_20ft", "packages_per_40ft", "required_20ft", "required_40ft"]:
            assert df[col].dtype == pl.Int64

    def test_package_at_20ft_capacity_fits(self):
        """Exactly 33 CBM still fits a 20ft container."""
        plan = plan_containers(1.0, 1.0, 33.0, 3)
        assert plan.packages_per_20ft == 1
        assert plan.required_20ft == 3
        assert plan.error is None

    def test_package_exceeds_20ft_only(self):
        """40 CBM package: one per 40ft, no 20ft option."""
        plan = plan_containers(2.0, 4.0, 5.0, 3)
        assert plan.package_cbm == pytest.approx(40.0)
        assert plan.packages_per_20ft == 0
        assert plan.required_20ft == 0
        assert plan.packages_per_40ft == 1
        assert plan.required_40ft == 3
        assert plan.error == EXCEEDS_20FT

    def test_package_exceeds_all_containers(self):
        """75 CBM package fits nothing: all counts zero."""
        plan = plan_containers(5.0, 5.0, 3.0, 2)
        assert plan.packages_per_20ft == 0
        assert plan.packages_per_40ft == 0
        assert plan.required_20ft == 0
        assert plan.required_40ft == 0
        assert plan.error == EXCEEDS_CONTAINER

    def test_mixed_batch(self):
        """Each row gets its own plan."""
        df = pl.DataFrame({
            "length": [1.0, 2.0, 5.0],
            "width": [1.0, 4.0, 5.0],
            "height": [1.0, 5.0, 3.0],
            "package_count": [40, 1, 1],
        })
        df = add_container_requirements(df)
        assert df["container_error"].to_list() == [None, EXCEEDS_20FT, EXCEEDS_CONTAINER]
        assert df["required_40ft"].to_list() == [1, 1, 0]

    def test_no_temporary_columns_left(self, cube_shipment):
        df = add_container_requirements(cube_shipment)
        assert not [c for c in df.columns if c.startswith("_")]
