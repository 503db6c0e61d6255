from __future__ import annotations

from decimal import Decimal
from typing import Optional

from ..errors import UnknownUnitError
from ..utils import round_half_up, to_decimal
from ..values import Dimensions


def fixed_quantity(quantity_override: Optional[Decimal] = None) -> Decimal:
    """Fixed services bill one unit unless the request names a count (10 screws, 4 hinges)."""
    if quantity_override is None:
        return Decimal(1)
    return to_decimal(quantity_override)


def area_quantity(dimensions: Dimensions) -> Decimal:
    width_m, height_m = dimensions.to_meters()
    return round_half_up(width_m * height_m)


def perimeter_quantity(dimensions: Dimensions) -> Decimal:
    width_m, height_m = dimensions.to_meters()
    return round_half_up(2 * (width_m + height_m))


def for_unit(unit: str, dimensions: Dimensions, quantity_override: Optional[Decimal] = None) -> Decimal:
    if unit == "unit":
        return fixed_quantity(quantity_override)
    if unit == "sqm":
        return area_quantity(dimensions)
    if unit == "ml":
        return perimeter_quantity(dimensions)
    raise UnknownUnitError(f"Unknown billing unit: {unit!r}")


def apply_minimum_billing_unit(quantity: Decimal, minimum_billing_unit: Optional[Decimal] = None) -> Decimal:
    # A minimum of 0 means "no minimum"
    if not minimum_billing_unit:
        return quantity
    return max(quantity, to_decimal(minimum_billing_unit))
