"""
Request and Result Models

Single-shipment value objects around the frame pipeline.

    Shipment            - base request (validated on construction)
        SeaFCLShipment  - carries container_type
        SeaLCLShipment
        AirShipment     - dimensions in centimeters
    ShipmentDetails     - mode-specific calculation details
    CostBreakdown       - itemized result read back from an output row

Sea dimensions are meters, air dimensions are centimeters.
"""

import math
import numbers
from dataclasses import dataclass, field
from typing import Any, ClassVar, Mapping

import polars as pl

from shared.errors import ValidationError
from shared.terms import ContainerType, Incoterm, ShippingMode


# Frame columns for one shipment, in output order
SHIPMENT_SCHEMA = {
    "customer_name": pl.Utf8,
    "company_name": pl.Utf8,
    "contact_number": pl.Utf8,
    "email": pl.Utf8,
    "product_name": pl.Utf8,
    "product_cost": pl.Float64,
    "currency": pl.Utf8,
    "shipping_mode": pl.Utf8,
    "incoterm": pl.Utf8,
    "container_type": pl.Utf8,
    "origin_country": pl.Utf8,
    "origin_port": pl.Utf8,
    "destination_port": pl.Utf8,
    "classification_code": pl.Utf8,
    "gross_weight_kg": pl.Float64,
    "package_count": pl.Int64,
    "length": pl.Float64,
    "width": pl.Float64,
    "height": pl.Float64,
}

IDENTITY_FIELDS = ["customer_name", "company_name", "contact_number", "email", "product_name"]

REQUIRED_TEXT_FIELDS = {
    "classification_code": "HSN code is required",
    "origin_country": "Origin country is required",
    "origin_port": "Origin port is required",
    "destination_port": "Destination port is required",
}


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool) and math.isfinite(value)


def _coerce(enum_cls, value, label: str):
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValidationError(f"Invalid {label}: {value!r} (expected one of {allowed})") from None


# =============================================================================
# REQUESTS
# =============================================================================

@dataclass(frozen=True, kw_only=True)
class Shipment:
    """
    Shipment request common to every mode.

    Fields are validated on construction; enum-valued fields accept either
    the enum member or its string value.
    """

    shipping_mode: ClassVar[ShippingMode]

    product_cost: float
    currency: str
    incoterm: Incoterm
    origin_country: str
    origin_port: str
    destination_port: str
    classification_code: str
    gross_weight_kg: float
    package_count: int
    length: float
    width: float
    height: float

    product_name: str = ""
    customer_name: str = ""
    company_name: str = ""
    contact_number: str = ""
    email: str = ""

    def __post_init__(self):
        if type(self) is Shipment:
            raise ValidationError(
                "Shipment is abstract; use SeaFCLShipment, SeaLCLShipment, AirShipment or Shipment.from_dict"
            )

        if not _is_number(self.product_cost) or self.product_cost < 0:
            raise ValidationError("Product cost must be a non-negative number")

        if not isinstance(self.currency, str) or not self.currency.strip():
            raise ValidationError("Currency is required")
        object.__setattr__(self, "currency", self.currency.strip().upper())

        object.__setattr__(self, "incoterm", _coerce(Incoterm, self.incoterm, "incoterm"))

        for name, message in REQUIRED_TEXT_FIELDS.items():
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise ValidationError(message)
            object.__setattr__(self, name, value.strip())

        if not _is_number(self.gross_weight_kg) or self.gross_weight_kg < 0:
            raise ValidationError("Gross weight must be a non-negative number")

        if not _is_number(self.package_count) or not float(self.package_count).is_integer():
            raise ValidationError("Number of packages must be an integer")
        if self.package_count < 1:
            raise ValidationError("Number of packages must be at least 1")
        object.__setattr__(self, "package_count", int(self.package_count))

        for name in ("length", "width", "height"):
            value = getattr(self, name)
            if not _is_number(value) or value <= 0:
                raise ValidationError(f"{name.capitalize()} must be greater than 0")

    @property
    def container(self) -> ContainerType | None:
        return None

    def to_row(self) -> dict:
        """Frame row for this request (see SHIPMENT_SCHEMA)."""
        return {
            "customer_name": self.customer_name,
            "company_name": self.company_name,
            "contact_number": self.contact_number,
            "email": self.email,
            "product_name": self.product_name,
            "product_cost": float(self.product_cost),
            "currency": self.currency,
            "shipping_mode": self.shipping_mode.value,
            "incoterm": self.incoterm.value,
            "container_type": self.container.value if self.container else None,
            "origin_country": self.origin_country,
            "origin_port": self.origin_port,
            "destination_port": self.destination_port,
            "classification_code": self.classification_code,
            "gross_weight_kg": float(self.gross_weight_kg),
            "package_count": self.package_count,
            "length": float(self.length),
            "width": float(self.width),
            "height": float(self.height),
        }

    def to_frame(self) -> pl.DataFrame:
        return pl.DataFrame([self.to_row()], schema=SHIPMENT_SCHEMA)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Shipment":
        """
        Build the request variant matching data["shipping_mode"].

        Raises:
            ValidationError: Unknown mode, or container_type given for a
                mode other than Sea FCL
        """
        fields = dict(data)
        mode = _coerce(ShippingMode, fields.pop("shipping_mode", None), "shipping mode")
        container_type = fields.pop("container_type", None)

        if mode is ShippingMode.SEA_FCL:
            return SeaFCLShipment(container_type=container_type, **fields)

        if container_type not in (None, ""):
            raise ValidationError("Container type only applies to Sea FCL shipments")
        return SHIPMENT_TYPES[mode](**fields)


@dataclass(frozen=True, kw_only=True)
class SeaFCLShipment(Shipment):
    shipping_mode: ClassVar[ShippingMode] = ShippingMode.SEA_FCL

    container_type: ContainerType

    def __post_init__(self):
        if self.container_type in (None, ""):
            raise ValidationError("Container type is required for Sea FCL")
        object.__setattr__(
            self, "container_type", _coerce(ContainerType, self.container_type, "container type")
        )
        super().__post_init__()

    @property
    def container(self) -> ContainerType:
        return self.container_type


@dataclass(frozen=True, kw_only=True)
class SeaLCLShipment(Shipment):
    shipping_mode: ClassVar[ShippingMode] = ShippingMode.SEA_LCL


@dataclass(frozen=True, kw_only=True)
class AirShipment(Shipment):
    shipping_mode: ClassVar[ShippingMode] = ShippingMode.AIR


SHIPMENT_TYPES = {
    ShippingMode.SEA_FCL: SeaFCLShipment,
    ShippingMode.SEA_LCL: SeaLCLShipment,
    ShippingMode.AIR: AirShipment,
}


# =============================================================================
# RESULTS
# =============================================================================

@dataclass(frozen=True)
class ShipmentDetails:
    """Mode-specific details. Fields a mode does not compute stay None."""

    container_type: str | None = None
    package_cbm: float | None = None
    total_cbm: float | None = None
    packages_per_20ft: int | None = None
    packages_per_40ft: int | None = None
    required_20ft: int | None = None
    required_40ft: int | None = None
    volumetric_weight_kg: float | None = None
    chargeable_weight_kg: float | None = None
    uses_volumetric_weight: bool | None = None
    error: str | None = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "ShipmentDetails":
        mode = row["shipping_mode"]

        if mode == ShippingMode.SEA_FCL.value:
            return cls(
                container_type=row["container_type"],
                package_cbm=row["package_cbm"],
                total_cbm=row["total_cbm"],
                packages_per_20ft=row["packages_per_20ft"],
                packages_per_40ft=row["packages_per_40ft"],
                required_20ft=row["required_20ft"],
                required_40ft=row["required_40ft"],
                error=row["container_error"],
            )

        if mode == ShippingMode.SEA_LCL.value:
            return cls(package_cbm=row["package_cbm"], total_cbm=row["total_cbm"])

        return cls(
            volumetric_weight_kg=row["volumetric_weight_kg"],
            chargeable_weight_kg=row["chargeable_weight_kg"],
            uses_volumetric_weight=row["uses_volumetric_weight"],
        )


@dataclass(frozen=True)
class CostBreakdown:
    """
    Itemized landed cost of one shipment, in home currency.

    other_charges holds only the surcharges that applied; an explicit
    0.0 means the charge applied at no cost (CIF air).
    """

    shipping_mode: str
    incoterm: str
    product_cost_home: float
    freight_only_home: float
    total_freight_home: float
    customs_duty_home: float
    duty_percentage: float
    total_landed_cost_home: float
    other_charges: Mapping[str, float] = field(default_factory=dict)
    details: ShipmentDetails | None = None
    calculator_version: str = ""

    product_name: str = ""
    customer_name: str = ""
    company_name: str = ""
    contact_number: str = ""
    email: str = ""

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "CostBreakdown":
        """Read a calculated output row back into a breakdown."""
        other_charges = {
            name[len("cost_"):]: value
            for name, value in row.items()
            if name.startswith("cost_") and value is not None
        }

        return cls(
            shipping_mode=row["shipping_mode"],
            incoterm=row["incoterm"],
            product_cost_home=row["product_cost_home"],
            freight_only_home=row["freight_only_home"],
            total_freight_home=row["total_freight_home"],
            customs_duty_home=row["customs_duty_home"],
            duty_percentage=row["duty_percentage"],
            total_landed_cost_home=row["total_landed_cost_home"],
            other_charges=other_charges,
            details=ShipmentDetails.from_row(row),
            calculator_version=row["calculator_version"],
            **{name: row.get(name) or "" for name in IDENTITY_FIELDS},
        )


__all__ = [
    "Shipment",
    "SeaFCLShipment",
    "SeaLCLShipment",
    "AirShipment",
    "SHIPMENT_TYPES",
    "SHIPMENT_SCHEMA",
    "IDENTITY_FIELDS",
    "ShipmentDetails",
    "CostBreakdown",
]
