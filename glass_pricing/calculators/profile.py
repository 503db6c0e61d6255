from __future__ import annotations

from decimal import Decimal

from ..values import Dimensions, Money


def base_cost(base_price: Money, color_multiplier: Decimal) -> Money:
    return base_price.multiply(color_multiplier)


def width_cost(cost_per_mm_width: Money, extra_width_mm: int, color_multiplier: Decimal) -> Money:
    return cost_per_mm_width.multiply(extra_width_mm).multiply(color_multiplier)


def height_cost(cost_per_mm_height: Money, extra_height_mm: int, color_multiplier: Decimal) -> Money:
    return cost_per_mm_height.multiply(extra_height_mm).multiply(color_multiplier)


def compute(
    base_price: Money,
    cost_per_mm_width: Money,
    cost_per_mm_height: Money,
    dimensions: Dimensions,
    color_multiplier: Decimal,
) -> Money:
    """Profile (frame) cost for the requested size.

    Per-mm costs only apply to the millimeters above the model minimum. The
    color multiplier scales the whole profile cost.
    """
    return (
        base_cost(base_price, color_multiplier)
        .add(width_cost(cost_per_mm_width, dimensions.effective_width(), color_multiplier))
        .add(height_cost(cost_per_mm_height, dimensions.effective_height(), color_multiplier))
    )
