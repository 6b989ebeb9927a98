"""
Surcharge Base Class

Shared base class for all shipping-mode surcharges.
"""

from abc import ABC
import polars as pl


# Column holding the USD -> home currency rate for every shipment row
USD_RATE_COL = "usd_rate"


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def round_half_up(expr: pl.Expr) -> pl.Expr:
    """
    Round to the nearest whole unit, halves rounding up.

    Charges are rounded the way the published rate sheets round them
    (2.5 -> 3), not with banker's rounding (2.5 -> 2).

    Args:
        expr: Polars expression with non-negative amounts

    Returns:
        Polars expression rounded to whole units
    """
    return (expr + 0.5).floor()


# =============================================================================
# BASE CLASS
# =============================================================================

class Surcharge(ABC):
    """
    Base class for all surcharges.

    Attributes:
        IDENTITY
            name            - Key in the itemized charges (e.g., "THC")

        PRICING
            list_price      - Published rate in USD (or percentage, see below)
            in_usd          - True if cost() is USD and must be converted
            per_unit_col    - Column the USD price is charged per
                              (e.g., "total_cbm"); None for a flat charge

    Cost columns are named cost_<name>, and hold null when the surcharge
    does not apply. A null is "not applicable", 0.0 is "applies, costs nothing".
    """

    # -------------------------------------------------------------------------
    # IDENTITY
    # -------------------------------------------------------------------------
    name: str

    # -------------------------------------------------------------------------
    # PRICING
    # -------------------------------------------------------------------------
    list_price: float
    in_usd: bool = True
    per_unit_col: str | None = None

    # -------------------------------------------------------------------------
    # METHODS
    # -------------------------------------------------------------------------

    @classmethod
    def key(cls) -> str:
        """Key used in the itemized charges map."""
        return cls.name.lower()

    @classmethod
    def column(cls) -> str:
        """Frame column holding the home currency cost."""
        return f"cost_{cls.key()}"

    @classmethod
    def cost(cls) -> float | pl.Expr:
        """Cost per shipment before currency conversion."""
        return cls.list_price

    @classmethod
    def home_cost(cls) -> pl.Expr:
        """Cost per shipment in home currency."""
        cost = cls.cost()
        if not isinstance(cost, pl.Expr):
            cost = pl.lit(cost)

        if not cls.in_usd:
            return cost

        home = cost * pl.col(USD_RATE_COL)
        if cls.per_unit_col is not None:
            return pl.col(cls.per_unit_col) * home
        return home

    @classmethod
    def conditions(cls) -> pl.Expr:
        """
        Polars expression for when this surcharge triggers.

        Default returns True. Override for mode- or term-specific charges.
        """
        return pl.lit(True)


# =============================================================================
# APPLICATION
# =============================================================================

def apply_surcharges(df: pl.DataFrame, surcharges: list) -> pl.DataFrame:
    """
    Add a cost_<name> column per surcharge.

    Rows where the surcharge does not trigger get null, so downstream
    consumers can tell "not applicable" apart from an explicit zero charge.
    """
    return df.with_columns([
        pl.when(s.conditions())
        .then(s.home_cost())
        .otherwise(pl.lit(None, dtype=pl.Float64))
        .cast(pl.Float64)
        .alias(s.column())
        for s in surcharges
    ])


def total_freight(surcharges: list, freight_col: str = "freight_only_home") -> pl.Expr:
    """Freight plus every applied surcharge (nulls count as zero)."""
    return pl.sum_horizontal(
        [pl.col(freight_col)] + [pl.col(s.column()) for s in surcharges]
    )
