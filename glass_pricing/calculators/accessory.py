from __future__ import annotations

from decimal import Decimal
from typing import Optional

from ..values import Money


def compute(accessory_price: Optional[Money], color_multiplier: Decimal) -> Money:
    if accessory_price is None:
        return Money.zero()
    return accessory_price.multiply(color_multiplier)
