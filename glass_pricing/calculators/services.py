from __future__ import annotations

from typing import Iterable, List

from ..values import Dimensions, Money, ServiceLine, ServiceResult
from . import quantity as qty


def compute(service: ServiceLine, dimensions: Dimensions) -> ServiceResult:
    """Bill one service line: quantity by unit, clamped up to the minimum billing unit.

    Services are not affected by the frame color or the profit margin.
    """
    quantity = qty.for_unit(service.unit, dimensions, service.quantity_override)
    quantity = qty.apply_minimum_billing_unit(quantity, service.minimum_billing_unit)
    amount = service.rate.multiply(quantity)
    return ServiceResult(
        service_id=service.service_id,
        name=service.name,
        unit=service.unit,
        quantity=quantity,
        amount=Money(amount.rounded()),
    )


def compute_all(services: Iterable[ServiceLine], dimensions: Dimensions) -> List[ServiceResult]:
    return [compute(s, dimensions) for s in services]
