"""Domain value objects for the pricing engine.

Everything here is immutable. Money keeps full decimal precision internally and
only rounds when converted for display or transport.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, DivisionByZero, InvalidOperation
from typing import Literal, Optional, Tuple, Union

from .errors import InvalidMoneyError
from .utils import MM2_PER_SQM, MM_PER_METER, ROUND_SCALE, round_half_up, to_decimal


ServiceUnit = Literal["unit", "sqm", "ml"]
SERVICE_UNITS: Tuple[str, ...] = ("unit", "sqm", "ml")

Numeric = Union[int, float, str, Decimal]


def _factor(value: Union[Numeric, "Money"]) -> Decimal:
    if isinstance(value, Money):
        return value.amount
    return to_decimal(value)


@dataclass(frozen=True, order=True, init=False, repr=False)
class Money:
    amount: Decimal

    def __init__(self, amount: Union[Numeric, "Money"]) -> None:
        object.__setattr__(self, "amount", _factor(amount))

    @classmethod
    def zero(cls) -> "Money":
        return cls(0)

    def add(self, other: "Money") -> "Money":
        return Money(self.amount + other.amount)

    def subtract(self, other: "Money") -> "Money":
        return Money(self.amount - other.amount)

    def multiply(self, factor: Union[Numeric, "Money"]) -> "Money":
        return Money(self.amount * _factor(factor))

    def divide(self, divisor: Union[Numeric, "Money"]) -> "Money":
        d = _factor(divisor)
        try:
            return Money(self.amount / d)
        except (DivisionByZero, InvalidOperation):
            raise InvalidMoneyError("Cannot divide money by zero") from None

    def negate(self) -> "Money":
        return Money(-self.amount)

    def is_zero(self) -> bool:
        return self.amount == 0

    def rounded(self, places: int = ROUND_SCALE) -> Decimal:
        return round_half_up(self.amount, places)

    def to_number(self) -> float:
        return float(self.rounded())

    def __repr__(self) -> str:
        return f"Money({str(self.amount)!r})"


@dataclass(frozen=True)
class Dimensions:
    """Requested opening size plus the model's minimum size, in millimeters.

    Non-positive sizes are accepted here; the use case rejects them.
    """

    width_mm: int
    height_mm: int
    min_width_mm: int = 0
    min_height_mm: int = 0

    def effective_width(self) -> int:
        return max(self.width_mm - self.min_width_mm, 0)

    def effective_height(self) -> int:
        return max(self.height_mm - self.min_height_mm, 0)

    def to_meters(self) -> Tuple[Decimal, Decimal]:
        return Decimal(self.width_mm) / MM_PER_METER, Decimal(self.height_mm) / MM_PER_METER

    def area_sqm(self) -> Decimal:
        return Decimal(self.width_mm) * Decimal(self.height_mm) / MM2_PER_SQM

    def perimeter_m(self) -> Decimal:
        return 2 * (Decimal(self.width_mm) + Decimal(self.height_mm)) / MM_PER_METER


@dataclass(frozen=True)
class ModelPrices:
    base_price: Money
    cost_per_mm_width: Money
    cost_per_mm_height: Money
    accessory_price: Optional[Money] = None


@dataclass(frozen=True)
class GlassPricing:
    price_per_sqm: Money
    # Negative means the pane is larger than the opening
    discount_width_mm: Optional[int] = None
    discount_height_mm: Optional[int] = None


@dataclass(frozen=True)
class ServiceLine:
    service_id: str
    name: str
    unit: ServiceUnit
    rate: Money
    minimum_billing_unit: Optional[Decimal] = None
    quantity_override: Optional[Decimal] = None


@dataclass(frozen=True)
class AdjustmentLine:
    adjustment_id: str
    concept: str
    unit: ServiceUnit
    # Magnitude per unit; is_positive alone decides the sign
    value: Decimal
    is_positive: bool = True


@dataclass(frozen=True)
class ServiceResult:
    service_id: str
    name: str
    unit: ServiceUnit
    quantity: Decimal
    amount: Money


@dataclass(frozen=True)
class AdjustmentResult:
    adjustment_id: str
    concept: str
    unit: ServiceUnit
    quantity: Decimal
    amount: Money


@dataclass(frozen=True)
class PriceCalculationInput:
    dimensions: Dimensions
    model_prices: ModelPrices
    color_multiplier: Decimal
    glass: Optional[GlassPricing] = None
    services: Optional[Tuple[ServiceLine, ...]] = None
    adjustments: Optional[Tuple[AdjustmentLine, ...]] = None
    profit_margin_percentage: Optional[Decimal] = None


@dataclass(frozen=True)
class PriceCalculationResult:
    profile_cost: Money
    glass_cost: Money
    accessory_cost: Money
    model_cost: Money
    model_sales_price: Money
    services: Tuple[ServiceResult, ...] = field(default_factory=tuple)
    adjustments: Tuple[AdjustmentResult, ...] = field(default_factory=tuple)
    subtotal: Money = field(default_factory=Money.zero)
