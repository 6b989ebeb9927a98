"""
Air Incoterm Charges

Same fixed charges as sea, but only on tiered shipments, and CIF is
itemized (as an explicit zero) since it absorbs the freight line.
"""

import polars as pl

from shared.surcharges import CIF, EXW, FOB

from .tiered import uses_tiered_rate


class AIR_EXW(EXW):
    @classmethod
    def conditions(cls) -> pl.Expr:
        return super().conditions() & uses_tiered_rate()


class AIR_FOB(FOB):
    @classmethod
    def conditions(cls) -> pl.Expr:
        return super().conditions() & uses_tiered_rate()


class AIR_CIF(CIF):
    @classmethod
    def conditions(cls) -> pl.Expr:
        return super().conditions() & uses_tiered_rate()
