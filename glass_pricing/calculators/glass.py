from __future__ import annotations

from decimal import Decimal
from typing import Optional

from ..utils import MM2_PER_SQM
from ..values import Dimensions, Money


def billable_area(
    dimensions: Dimensions,
    discount_width_mm: Optional[int] = 0,
    discount_height_mm: Optional[int] = 0,
) -> Decimal:
    """Glass area in m² after the profile discounts, unrounded.

    The frame covers part of the opening, so a 1000x1000 window with 50 mm
    discounts bills 950x950 mm of glass. Negative discounts enlarge the pane.
    """
    eff_width = max(dimensions.width_mm - (discount_width_mm or 0), 0)
    eff_height = max(dimensions.height_mm - (discount_height_mm or 0), 0)
    return Decimal(eff_width) * Decimal(eff_height) / MM2_PER_SQM


def compute(
    price_per_sqm: Money,
    dimensions: Dimensions,
    discount_width_mm: Optional[int] = 0,
    discount_height_mm: Optional[int] = 0,
) -> Money:
    # Frame color never changes the glass price
    area = billable_area(dimensions, discount_width_mm, discount_height_mm)
    return Money(price_per_sqm.multiply(area).rounded())
