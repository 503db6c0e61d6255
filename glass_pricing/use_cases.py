from __future__ import annotations

import logging
from decimal import Decimal

from .calculators import pricing
from .errors import InvalidColorMultiplierError, InvalidDimensionError, InvalidMarginError
from .utils import PERCENT, to_decimal
from .values import PriceCalculationInput, PriceCalculationResult


logger = logging.getLogger(__name__)


def _validate(data: PriceCalculationInput) -> None:
    dims = data.dimensions
    if dims.width_mm <= 0:
        logger.info("Rejected item: width %s mm", dims.width_mm)
        raise InvalidDimensionError("Width must be greater than 0")
    if dims.height_mm <= 0:
        logger.info("Rejected item: height %s mm", dims.height_mm)
        raise InvalidDimensionError("Height must be greater than 0")

    if to_decimal(data.color_multiplier) < Decimal(1):
        # Percentages are converted upstream, so this is a data bug rather than user input
        logger.error("Color multiplier %s below 1.0; check color surcharge data", data.color_multiplier)
        raise InvalidColorMultiplierError("Color multiplier must be at least 1.0")

    m = data.profit_margin_percentage
    if m is not None and not (0 <= to_decimal(m) < PERCENT):
        raise InvalidMarginError("Profit margin must be between 0 and 100")


def calculate_item_price(data: PriceCalculationInput) -> PriceCalculationResult:
    """Validate raw item input, then price it."""
    _validate(data)
    result = pricing.calculate(data)
    logger.debug(
        "Priced %sx%s mm item: subtotal %s",
        data.dimensions.width_mm,
        data.dimensions.height_mm,
        result.subtotal.rounded(),
    )
    return result
