"""
Landed Cost Errors

Exception taxonomy shared by the engine, the lookups and the currency layer.

    LandedCostError
        ValidationError         - malformed or missing request fields
        NotFound                - a reference lookup had no matching row
            InvalidClassification   - unknown classification (HSN) code
            RouteNotFound           - no Sea FCL freight rate for the route
        RateSourceUnavailable   - a single exchange-rate source failed
"""


class LandedCostError(Exception):
    """Base class for all landed cost errors."""


class ValidationError(LandedCostError, ValueError):
    """Shipment request fails field or invariant checks."""


class NotFound(LandedCostError, LookupError):
    """Reference lookup returned no usable row."""


class InvalidClassification(NotFound):
    """Classification code unknown or its duty percentage is not numeric."""


class RouteNotFound(NotFound):
    """No freight cost row for the requested Sea FCL route."""


class RateSourceUnavailable(LandedCostError):
    """Exchange-rate source could not be fetched or parsed."""


__all__ = [
    "LandedCostError",
    "ValidationError",
    "NotFound",
    "InvalidClassification",
    "RouteNotFound",
    "RateSourceUnavailable",
]
