"""
Reference Lookups

Contracts for the two external lookups the engine consumes, plus CSV-backed
implementations used by the scripts and tests.

    DutyLookup(classification_code) -> duty percentage
    FreightLookup(country, origin_port, destination_port, container_type) -> freight USD

Any callable with these signatures can be injected (database client, API
wrapper, test stub). Lookups raise InvalidClassification / RouteNotFound
when nothing matches.
"""

from pathlib import Path
from typing import Callable

import polars as pl

from shared.errors import InvalidClassification, RouteNotFound


REFERENCE_DIR = Path(__file__).parent / "reference"

DutyLookup = Callable[[str], float]
FreightLookup = Callable[[str, str, str, str], float]


# =============================================================================
# LOADERS
# =============================================================================

def load_hs_codes(path: Path | None = None) -> pl.DataFrame:
    """
    Load the duty classification table.

    Returns:
        DataFrame with columns: hsn_code, description, duty_percentage
    """
    return pl.read_csv(
        path or REFERENCE_DIR / "hs_codes.csv",
        schema_overrides={
            "hsn_code": pl.Utf8,  # Codes are identifiers, keep leading zeros
            "duty_percentage": pl.Float64,
        }
    )


def load_freight_costs(path: Path | None = None) -> pl.DataFrame:
    """
    Load Sea FCL freight costs per route.

    Returns:
        DataFrame with columns: country, origin_port, destination_port,
        container_type, freight_cost_usd, alternate_routes
    """
    return pl.read_csv(
        path or REFERENCE_DIR / "freight_costs.csv",
        schema_overrides={
            "container_type": pl.Utf8,
            "freight_cost_usd": pl.Float64,
            "alternate_routes": pl.Utf8,
        }
    )


# =============================================================================
# TABLE-BACKED LOOKUPS
# =============================================================================

class DutyTable:
    """
    Duty lookup backed by an HS code table.

    Example:
        lookup = DutyTable()
        lookup("8471")  ->  0.0
    """

    def __init__(self, table: pl.DataFrame | None = None):
        self.table = table if table is not None else load_hs_codes()

    def __call__(self, classification_code: str) -> float:
        code = str(classification_code).strip()
        match = self.table.filter(pl.col("hsn_code") == code)

        if match.is_empty() or match["duty_percentage"][0] is None:
            raise InvalidClassification(
                f"Invalid HSN code or duty percentage not found: '{code}'"
            )

        return match["duty_percentage"][0]


class FreightRateTable:
    """
    Sea FCL freight lookup backed by a route table.

    Matching is exact on all four route fields.
    """

    def __init__(self, table: pl.DataFrame | None = None):
        self.table = table if table is not None else load_freight_costs()

    def __call__(
        self,
        country: str,
        origin_port: str,
        destination_port: str,
        container_type: str,
    ) -> float:
        match = self.table.filter(
            (pl.col("country") == country) &
            (pl.col("origin_port") == origin_port) &
            (pl.col("destination_port") == destination_port) &
            (pl.col("container_type") == container_type)
        )

        if match.is_empty() or match["freight_cost_usd"][0] is None:
            raise RouteNotFound(
                f"No freight cost found for the given route: "
                f"{country} - {origin_port} to {destination_port} ({container_type})"
            )

        return match["freight_cost_usd"][0]


__all__ = [
    "DutyLookup",
    "FreightLookup",
    "DutyTable",
    "FreightRateTable",
    "load_hs_codes",
    "load_freight_costs",
    "REFERENCE_DIR",
]
