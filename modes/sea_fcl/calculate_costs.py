"""
Sea FCL Cost Calculator

Full-container-load sea freight. DataFrame in, DataFrame out.

REQUIRED INPUT COLUMNS
----------------------
    origin_country      - Origin country (route lookup)
    origin_port         - Origin sea port
    destination_port    - Destination sea port
    container_type      - "20 ft" or "40 ft"
    incoterm            - EXW, FOB or CIF
    length, width, height - Package dimensions in meters
    package_count       - Number of packages
    product_cost_home   - Invoice value in home currency
    usd_rate            - Home currency per USD

OUTPUT COLUMNS ADDED
--------------------
    supplement_shipments() adds:
        - freight_cost_usd (from the freight lookup)
        - package_cbm, total_cbm, packages_per_20ft, packages_per_40ft,
          required_20ft, required_40ft, container_error

    calculate() adds:
        - cost_* per surcharge (null when not applicable)
        - freight_only_home, total_freight_home

USAGE
-----
    from modes.sea_fcl import calculate_costs
    result = calculate_costs(df, freight_lookup)
"""

import logging
import numbers
from decimal import Decimal

import polars as pl

from shared.containers import add_container_requirements
from shared.errors import RouteNotFound
from shared.lookups import FreightLookup
from shared.surcharges import USD_RATE_COL, apply_surcharges, round_half_up, total_freight

from .surcharges import ALL

logger = logging.getLogger(__name__)

ROUTE_COLUMNS = ["origin_country", "origin_port", "destination_port", "container_type"]


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def calculate_costs(df: pl.DataFrame, freight_lookup: FreightLookup) -> pl.DataFrame:
    """
    Calculate Sea FCL freight and surcharges.

    Args:
        df: Sea FCL shipments with required columns (see module docstring)
        freight_lookup: Route -> base freight in USD

    Returns:
        DataFrame with route freight, container plan and costs
    """
    df = supplement_shipments(df, freight_lookup)
    df = calculate(df)
    return df


# =============================================================================
# SUPPLEMENT SHIPMENTS
# =============================================================================

def supplement_shipments(df: pl.DataFrame, freight_lookup: FreightLookup) -> pl.DataFrame:
    """Add route freight and the container plan."""
    df = _lookup_freight(df, freight_lookup)
    df = add_container_requirements(df)
    return df


def _lookup_freight(df: pl.DataFrame, freight_lookup: FreightLookup) -> pl.DataFrame:
    """
    Add freight_cost_usd per route.

    The lookup is called once per distinct route. Missing routes raise
    RouteNotFound from the lookup itself.
    """
    routes = df.select(ROUTE_COLUMNS).unique()

    rows = []
    for route in routes.iter_rows(named=True):
        freight = freight_lookup(
            route["origin_country"],
            route["origin_port"],
            route["destination_port"],
            route["container_type"],
        )
        if isinstance(freight, bool) or not isinstance(freight, (numbers.Real, Decimal)):
            raise RouteNotFound(
                f"Invalid freight cost data received for route: "
                f"{route['origin_country']} - {route['origin_port']} to {route['destination_port']}"
            )
        logger.debug("Freight for %s: %.2f USD", route, freight)
        rows.append({**route, "freight_cost_usd": float(freight)})

    freight = pl.DataFrame(
        rows,
        schema={
            **{c: pl.Utf8 for c in ROUTE_COLUMNS},
            "freight_cost_usd": pl.Float64,
        },
    )

    return df.join(freight, on=ROUTE_COLUMNS, how="left")


# =============================================================================
# CALCULATE COSTS
# =============================================================================

def calculate(df: pl.DataFrame) -> pl.DataFrame:
    """
    Calculate costs for supplemented Sea FCL shipments.

    Processing order:
        1. Surcharges   - container charges, transactional, incoterm
        2. Freight      - base freight in home currency
        3. Totals       - freight plus all applied surcharges
    """
    df = apply_surcharges(df, ALL)
    df = _calculate_freight(df)
    df = _calculate_total_freight(df)
    return df


def _calculate_freight(df: pl.DataFrame) -> pl.DataFrame:
    """Base freight converted from USD, rounded."""
    return df.with_columns(
        round_half_up(pl.col("freight_cost_usd") * pl.col(USD_RATE_COL))
        .alias("freight_only_home")
    )


def _calculate_total_freight(df: pl.DataFrame) -> pl.DataFrame:
    return df.with_columns(total_freight(ALL).alias("total_freight_home"))


__all__ = [
    "calculate_costs",
    "supplement_shipments",
    "calculate",
    "ROUTE_COLUMNS",
]
