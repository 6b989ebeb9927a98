"""
Incoterm Charges

Fixed USD charge added on top of freight depending on the trade term.
Sea modes itemize EXW and FOB only; CIF carries no charge there.
"""

import polars as pl

from .base import Surcharge


INCOTERM_CHARGES_USD = {
    "EXW": 300.0,
    "FOB": 200.0,
    "CIF": 0.0,
}


class IncotermCharge(Surcharge):
    """Base for incoterm charges - triggers when the shipment uses INCOTERM."""

    INCOTERM: str

    @classmethod
    def conditions(cls) -> pl.Expr:
        return pl.col("incoterm") == cls.INCOTERM


class EXW(IncotermCharge):
    """Ex Works - buyer arranges pickup at the seller's premises."""

    name = "EXW_CHARGES"
    INCOTERM = "EXW"
    list_price = INCOTERM_CHARGES_USD["EXW"]


class FOB(IncotermCharge):
    """Free On Board - seller delivers to the origin port."""

    name = "FOB_CHARGES"
    INCOTERM = "FOB"
    list_price = INCOTERM_CHARGES_USD["FOB"]


class CIF(IncotermCharge):
    """Cost, Insurance and Freight - freight is included in the invoice."""

    name = "CIF_CHARGES"
    INCOTERM = "CIF"
    list_price = INCOTERM_CHARGES_USD["CIF"]
