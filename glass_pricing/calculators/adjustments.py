from __future__ import annotations

from typing import Iterable, List

from ..values import AdjustmentLine, AdjustmentResult, Dimensions, Money
from . import quantity as qty


def compute(adjustment: AdjustmentLine, dimensions: Dimensions) -> AdjustmentResult:
    quantity = qty.for_unit(adjustment.unit, dimensions)
    # The sign flag carries the direction; value is a magnitude
    amount = Money(abs(adjustment.value)).multiply(quantity)
    if not adjustment.is_positive:
        amount = amount.negate()
    return AdjustmentResult(
        adjustment_id=adjustment.adjustment_id,
        concept=adjustment.concept,
        unit=adjustment.unit,
        quantity=quantity,
        amount=Money(amount.rounded()),
    )


def compute_all(adjustments: Iterable[AdjustmentLine], dimensions: Dimensions) -> List[AdjustmentResult]:
    return [compute(a, dimensions) for a in adjustments]
