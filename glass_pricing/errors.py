from __future__ import annotations


class PricingError(ValueError):
    """Base class for every error raised by the pricing engine."""


class InvalidDimensionError(PricingError):
    """Width or height is not a positive number of millimeters."""


class InvalidColorMultiplierError(PricingError):
    """Color multiplier below 1.0; points at bad surcharge data upstream."""


class InvalidMarginError(PricingError):
    pass


class InvalidMoneyError(PricingError):
    pass


class UnknownUnitError(PricingError):
    pass


class CatalogError(PricingError):
    """A catalog lookup or catalog rule failed for an item request."""
