"""
Landed Cost Calculator

DataFrame in, DataFrame out. The input can come from any source (CSV,
a web form, manual creation) as long as it contains the required columns.
The output is the same DataFrame with calculation columns and costs
appended, in input row order.

REQUIRED INPUT COLUMNS
----------------------
    product_cost        - Invoice value in the invoice currency (>= 0)
    currency            - Invoice currency code (e.g., "USD")
    shipping_mode       - "Sea FCL", "Sea LCL" or "Air"
    incoterm            - EXW, FOB or CIF
    origin_country      - Origin country
    origin_port         - Origin port (sea) or airport (air)
    destination_port    - Destination port (sea) or airport (air)
    classification_code - HSN code (duty lookup)
    gross_weight_kg     - Actual shipment weight in kg (>= 0)
    package_count       - Number of packages (integer >= 1)
    length, width, height - Package dimensions, meters (sea) or cm (air)

OPTIONAL INPUT COLUMNS
----------------------
    container_type      - "20 ft" / "40 ft"; required for Sea FCL rows only
    customer_name, company_name, contact_number, email, product_name

OUTPUT COLUMNS ADDED
--------------------
    supplement_shipments() adds:
        - duty_percentage (from the duty lookup)
        - currency_rate, usd_rate, product_cost_home

    calculate() adds:
        - mode columns (container plan, volumes, chargeable weight)
        - cost_* per surcharge (null when not applicable)
        - freight_only_home, total_freight_home
        - assessable_value_home, customs_duty_home, total_landed_cost_home
        - calculator_version

USAGE
-----
    from landed_cost import calculate_costs
    from shared.lookups import DutyTable, FreightRateTable
    result = calculate_costs(df, DutyTable(), FreightRateTable())
"""

import logging
import numbers
from decimal import Decimal

import polars as pl

from modes import air, sea_fcl, sea_lcl
from shared.currency import RateSnapshot, get_rates
from shared.errors import InvalidClassification, ValidationError
from shared.lookups import DutyLookup, FreightLookup
from shared.surcharges import USD_RATE_COL, round_half_up
from shared.terms import CONTAINER_TYPES, INCOTERMS, SHIPPING_MODES, ShippingMode

from .models import CostBreakdown, IDENTITY_FIELDS, SHIPMENT_SCHEMA, Shipment
from .version import VERSION

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = [
    "product_cost",
    "currency",
    "shipping_mode",
    "incoterm",
    "origin_country",
    "origin_port",
    "destination_port",
    "classification_code",
    "gross_weight_kg",
    "package_count",
    "length",
    "width",
    "height",
]

OPTIONAL_COLUMNS = IDENTITY_FIELDS + ["container_type"]

TEXT_COLUMNS = [
    "currency", "shipping_mode", "incoterm", "container_type",
    "origin_country", "origin_port", "destination_port", "classification_code",
]

NUMERIC_COLUMNS = ["product_cost", "gross_weight_kg", "package_count", "length", "width", "height"]

_is_fcl = pl.col("shipping_mode") == ShippingMode.SEA_FCL.value


def _not_finite(column: str) -> pl.Expr:
    return pl.col(column).is_null() | pl.col(column).is_nan() | pl.col(column).is_infinite()


# (rows failing the check, description)
VALIDATION_RULES = [
    (_not_finite("product_cost") | (pl.col("product_cost") < 0),
     "product_cost must be a non-negative number"),
    (pl.col("currency").is_null(),
     "currency is required"),
    (pl.col("shipping_mode").is_null() | ~pl.col("shipping_mode").is_in(SHIPPING_MODES),
     f"shipping_mode must be one of {', '.join(SHIPPING_MODES)}"),
    (pl.col("incoterm").is_null() | ~pl.col("incoterm").is_in(INCOTERMS),
     f"incoterm must be one of {', '.join(INCOTERMS)}"),
    (_is_fcl & (pl.col("container_type").is_null() | ~pl.col("container_type").is_in(CONTAINER_TYPES)),
     f"Sea FCL container_type must be one of {', '.join(CONTAINER_TYPES)}"),
    (~_is_fcl & pl.col("container_type").is_not_null(),
     "container_type only applies to Sea FCL shipments"),
    (pl.col("origin_country").is_null(), "origin_country is required"),
    (pl.col("origin_port").is_null(), "origin_port is required"),
    (pl.col("destination_port").is_null(), "destination_port is required"),
    (pl.col("classification_code").is_null(), "classification_code is required"),
    (_not_finite("gross_weight_kg") | (pl.col("gross_weight_kg") < 0),
     "gross_weight_kg must be a non-negative number"),
    (_not_finite("package_count") | (pl.col("package_count") < 1) |
     (pl.col("package_count") != pl.col("package_count").floor()),
     "package_count must be an integer of at least 1"),
    (pl.any_horizontal([
        _not_finite(c) | (pl.col(c) <= 0) for c in ("length", "width", "height")
     ]),
     "length, width and height must be greater than 0"),
]


# =============================================================================
# MAIN ENTRY POINTS
# =============================================================================

def calculate_costs(
    df: pl.DataFrame,
    duty_lookup: DutyLookup,
    freight_lookup: FreightLookup | None = None,
    rates: RateSnapshot | None = None,
) -> pl.DataFrame:
    """
    Calculate landed costs for a shipment DataFrame.

    This is the main entry point. Takes raw shipment data and returns
    the same DataFrame with all calculation columns and costs appended.

    Args:
        df: Raw shipment DataFrame with required columns (see module docstring)
        duty_lookup: Classification code -> duty percentage
        freight_lookup: Sea FCL route -> freight USD (required for Sea FCL rows)
        rates: Exchange rates (process-wide cache if not provided)

    Returns:
        DataFrame with supplemented data and costs

    Raises:
        ValidationError: Missing columns or invalid rows (whole batch fails)
        InvalidClassification, RouteNotFound: From the injected lookups
    """
    df = supplement_shipments(df, duty_lookup, rates)
    df = calculate(df, freight_lookup)
    return df


def compute_landed_cost(
    request: Shipment,
    duty_lookup: DutyLookup,
    freight_lookup: FreightLookup | None = None,
    rates: RateSnapshot | None = None,
) -> CostBreakdown:
    """
    Calculate the landed cost of a single shipment request.

    Example:
        request = SeaFCLShipment(product_cost=1000, currency="USD", ...)
        breakdown = compute_landed_cost(request, DutyTable(), FreightRateTable())
        breakdown.total_landed_cost_home
    """
    df = calculate_costs(request.to_frame(), duty_lookup, freight_lookup, rates)
    return CostBreakdown.from_row(df.row(0, named=True))


# =============================================================================
# SUPPLEMENT SHIPMENTS
# =============================================================================

def supplement_shipments(
    df: pl.DataFrame,
    duty_lookup: DutyLookup,
    rates: RateSnapshot | None = None,
) -> pl.DataFrame:
    """
    Validate shipments, look up duty and convert the invoice value.

    Args:
        df: Raw shipment DataFrame
        duty_lookup: Classification code -> duty percentage
        rates: Exchange rates (process-wide cache if not provided)

    Returns:
        DataFrame with added columns:
            - _row_id (input order, dropped by calculate)
            - duty_percentage
            - currency_rate, usd_rate, product_cost_home
    """
    if rates is None:
        rates = get_rates()

    df = _normalize_columns(df)
    _validate_shipments(df)

    df = df.with_columns(pl.col("package_count").cast(pl.Int64))
    df = df.with_row_index("_row_id")

    df = _lookup_duty(df, duty_lookup)
    df = _convert_product_cost(df, rates)

    return df


def _normalize_columns(df: pl.DataFrame) -> pl.DataFrame:
    """
    Check required columns and bring every column to its expected type.

    Blank text is treated as missing. Values that do not parse as numbers
    become null and are reported by validation.
    """
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValidationError(f"Missing required columns: {', '.join(missing)}")

    if df.is_empty():
        raise ValidationError("No shipments to calculate")

    df = df.with_columns([
        pl.lit("" if c in IDENTITY_FIELDS else None, dtype=pl.Utf8).alias(c)
        for c in OPTIONAL_COLUMNS
        if c not in df.columns
    ])

    df = df.with_columns(
        [pl.col(c).cast(pl.Utf8).fill_null("") for c in IDENTITY_FIELDS] +
        [_blank_to_null(pl.col(c).cast(pl.Utf8).str.strip_chars()).alias(c) for c in TEXT_COLUMNS] +
        [pl.col(c).cast(pl.Float64, strict=False) for c in NUMERIC_COLUMNS]
    )

    return df.with_columns(pl.col("currency").str.to_uppercase())


def _blank_to_null(expr: pl.Expr) -> pl.Expr:
    return pl.when(expr == "").then(pl.lit(None, dtype=pl.Utf8)).otherwise(expr)


def _validate_shipments(df: pl.DataFrame) -> None:
    """Raise ValidationError naming the first failing rule and its row count."""
    for failing, description in VALIDATION_RULES:
        count = df.filter(failing).height
        if count:
            raise ValidationError(f"{count} shipment(s) failed validation: {description}")


def _lookup_duty(df: pl.DataFrame, duty_lookup: DutyLookup) -> pl.DataFrame:
    """
    Add duty_percentage per classification code.

    The lookup is called once per distinct code.
    """
    duties = {}
    for code in df["classification_code"].unique().to_list():
        duty = duty_lookup(code)
        if isinstance(duty, bool) or not isinstance(duty, (numbers.Real, Decimal)):
            raise InvalidClassification(
                f"Invalid HSN code or duty percentage not found: '{code}'"
            )
        logger.debug("Duty for HSN %s: %s%%", code, duty)
        duties[code] = float(duty)

    duty_table = pl.DataFrame(
        {"classification_code": list(duties), "duty_percentage": list(duties.values())},
        schema={"classification_code": pl.Utf8, "duty_percentage": pl.Float64},
    )

    return df.join(duty_table, on="classification_code", how="left")


def _convert_product_cost(df: pl.DataFrame, rates: RateSnapshot) -> pl.DataFrame:
    """
    Convert the invoice value to home currency.

    Every other monetary constant is USD, so the USD rate is attached too,
    whatever the invoice currency.
    """
    unsupported = sorted(set(df["currency"].unique().to_list()) - set(rates.rates))
    if unsupported:
        raise ValidationError(f"Unsupported currency: {', '.join(unsupported)}")

    df = df.join(
        rates.to_frame().rename({"rate": "currency_rate"}),
        on="currency",
        how="left",
    )

    return df.with_columns([
        pl.lit(rates.usd_rate, dtype=pl.Float64).alias(USD_RATE_COL),
        (pl.col("product_cost") * pl.col("currency_rate")).alias("product_cost_home"),
    ])


# =============================================================================
# CALCULATE COSTS
# =============================================================================

def calculate(df: pl.DataFrame, freight_lookup: FreightLookup | None = None) -> pl.DataFrame:
    """
    Calculate landed costs for supplemented shipments.

    Args:
        df: Supplemented shipment DataFrame from supplement_shipments
        freight_lookup: Sea FCL route -> freight USD (required for Sea FCL rows)

    Returns:
        DataFrame with mode costs, customs duty and totals

    Processing order:
        1. Modes         - each mode's freight and surcharges on its own rows
        2. Customs duty  - on product cost plus base freight
        3. Total         - assessable value, duty and total freight
    """
    df = _dispatch_modes(df, freight_lookup)
    df = _calculate_customs_duty(df)
    df = _calculate_total(df)
    df = _stamp_version(df)
    return df.sort("_row_id").drop("_row_id")


def _dispatch_modes(df: pl.DataFrame, freight_lookup: FreightLookup | None) -> pl.DataFrame:
    """Run each mode calculator on its rows and put the rows back together."""
    parts = []

    for mode in ShippingMode:
        part = df.filter(pl.col("shipping_mode") == mode.value)
        if part.is_empty():
            continue

        logger.debug("Calculating %d %s shipment(s)", part.height, mode.value)

        if mode is ShippingMode.SEA_FCL:
            if freight_lookup is None:
                raise ValueError(
                    f"{part.height} Sea FCL shipment(s) need a freight lookup, none was given"
                )
            part = sea_fcl.calculate_costs(part, freight_lookup)
        elif mode is ShippingMode.SEA_LCL:
            part = sea_lcl.calculate_costs(part)
        else:
            part = air.calculate_costs(part)

        parts.append(part)

    return pl.concat(parts, how="diagonal_relaxed")


def _calculate_customs_duty(df: pl.DataFrame) -> pl.DataFrame:
    """Duty on the assessable value (product cost plus base freight), rounded."""
    df = df.with_columns(
        (pl.col("product_cost_home") + pl.col("freight_only_home")).alias("assessable_value_home")
    )
    return df.with_columns(
        round_half_up(pl.col("assessable_value_home") * (pl.col("duty_percentage") / 100))
        .alias("customs_duty_home")
    )


def _calculate_total(df: pl.DataFrame) -> pl.DataFrame:
    """
    Landed cost = assessable value + duty + total freight.

    Base freight is part of both the assessable value and total freight,
    so it is counted twice.
    """
    return df.with_columns(
        (
            pl.col("assessable_value_home") +
            pl.col("customs_duty_home") +
            pl.col("total_freight_home")
        ).alias("total_landed_cost_home")
    )


def _stamp_version(df: pl.DataFrame) -> pl.DataFrame:
    """Stamp calculator version on output."""
    return df.with_columns(pl.lit(VERSION).alias("calculator_version"))


__all__ = [
    "calculate_costs",
    "compute_landed_cost",
    "supplement_shipments",
    "calculate",
    "REQUIRED_COLUMNS",
    "SHIPMENT_SCHEMA",
]
