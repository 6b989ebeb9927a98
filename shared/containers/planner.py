"""
Container Planner

Package volume, shipment volume and container counts for sea shipments.

REQUIRED INPUT COLUMNS
----------------------
    length, width, height   - Package dimensions in meters
    package_count           - Number of packages (>= 1)

OUTPUT COLUMNS ADDED
--------------------
    add_volume() adds:
        - package_cbm, total_cbm

    add_container_requirements() also adds:
        - packages_per_20ft, packages_per_40ft
        - required_20ft, required_40ft
        - container_error (null when the package fits both sizes)
"""

from dataclasses import dataclass

import polars as pl

from .reference import (
    CONTAINER_20FT_CAPACITY_CBM,
    CONTAINER_40FT_CAPACITY_CBM,
    EXCEEDS_20FT,
    EXCEEDS_CONTAINER,
)


@dataclass(frozen=True)
class ContainerRequirement:
    """Container plan for one shipment."""

    package_cbm: float
    total_cbm: float
    packages_per_20ft: int
    packages_per_40ft: int
    required_20ft: int
    required_40ft: int
    error: str | None = None


def add_volume(df: pl.DataFrame) -> pl.DataFrame:
    """Add single-package and total shipment volume in CBM."""
    df = df.with_columns(
        (pl.col("length") * pl.col("width") * pl.col("height")).alias("package_cbm")
    )
    return df.with_columns(
        (pl.col("package_cbm") * pl.col("package_count")).alias("total_cbm")
    )


def add_container_requirements(df: pl.DataFrame) -> pl.DataFrame:
    """
    Add container counts for 20ft and 40ft containers.

    EDGE CASES (in priority order)
    ------------------------------
    1. Package larger than a 40ft container: all counts 0, error set
    2. Package larger than a 20ft container only: 20ft counts 0, error set
    3. Otherwise both sizes computed, no error
    """
    df = add_volume(df)

    # Per-container counts; a package larger than the container gives 0 here
    # and an infinite requirement below, both masked out in the final step
    df = df.with_columns([
        (pl.lit(CONTAINER_20FT_CAPACITY_CBM) / pl.col("package_cbm")).floor().alias("_per_20ft"),
        (pl.lit(CONTAINER_40FT_CAPACITY_CBM) / pl.col("package_cbm")).floor().alias("_per_40ft"),
    ])
    df = df.with_columns([
        (pl.col("package_count") / pl.col("_per_20ft")).ceil().alias("_required_20ft"),
        (pl.col("package_count") / pl.col("_per_40ft")).ceil().alias("_required_40ft"),
    ])

    exceeds_40ft = pl.col("package_cbm") > CONTAINER_40FT_CAPACITY_CBM
    exceeds_20ft = pl.col("package_cbm") > CONTAINER_20FT_CAPACITY_CBM

    df = df.with_columns([
        pl.when(exceeds_20ft).then(pl.lit(0.0)).otherwise(pl.col("_per_20ft"))
        .cast(pl.Int64).alias("packages_per_20ft"),

        pl.when(exceeds_40ft).then(pl.lit(0.0)).otherwise(pl.col("_per_40ft"))
        .cast(pl.Int64).alias("packages_per_40ft"),

        pl.when(exceeds_20ft).then(pl.lit(0.0)).otherwise(pl.col("_required_20ft"))
        .cast(pl.Int64).alias("required_20ft"),

        pl.when(exceeds_40ft).then(pl.lit(0.0)).otherwise(pl.col("_required_40ft"))
        .cast(pl.Int64).alias("required_40ft"),

        pl.when(exceeds_40ft).then(pl.lit(EXCEEDS_CONTAINER))
        .when(exceeds_20ft).then(pl.lit(EXCEEDS_20FT))
        .otherwise(pl.lit(None, dtype=pl.Utf8))
        .alias("container_error"),
    ])

    return df.drop(["_per_20ft", "_per_40ft", "_required_20ft", "_required_40ft"])


def plan_containers(
    length: float,
    width: float,
    height: float,
    package_count: int,
) -> ContainerRequirement:
    """
    Plan containers for a single shipment.

    Args:
        length, width, height: Package dimensions in meters (each > 0)
        package_count: Number of packages (>= 1)

    Returns:
        ContainerRequirement for the shipment
    """
    df = pl.DataFrame([{
        "length": float(length),
        "width": float(width),
        "height": float(height),
        "package_count": int(package_count),
    }])
    row = add_container_requirements(df).row(0, named=True)

    return ContainerRequirement(
        package_cbm=row["package_cbm"],
        total_cbm=row["total_cbm"],
        packages_per_20ft=row["packages_per_20ft"],
        packages_per_40ft=row["packages_per_40ft"],
        required_20ft=row["required_20ft"],
        required_40ft=row["required_40ft"],
        error=row["container_error"],
    )
