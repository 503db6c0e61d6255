from __future__ import annotations

from decimal import Decimal
from typing import Optional

from ..utils import PERCENT, to_decimal
from ..values import Money


def sales_price(cost: Money, margin_percentage: Decimal) -> Money:
    """Price such that ``margin_percentage`` of it is profit.

    ``cost / (1 - margin/100)``: 100 at 20% gives 125, not 120.
    """
    return cost.divide(Decimal(1) - to_decimal(margin_percentage) / PERCENT)


def model_sales_price(model_cost: Money, margin_percentage: Optional[Decimal]) -> Money:
    if not margin_percentage or margin_percentage <= 0:
        return model_cost
    return sales_price(model_cost, margin_percentage)
