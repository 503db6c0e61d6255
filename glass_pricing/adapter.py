"""Transport <-> domain mapping for item price calculation.

The transport shape is what JSON/YAML clients send: plain numbers, a color
surcharge percentage and ``sign: positive|negative`` on adjustments. The
domain works with Money, Dimensions and a color multiplier.

Missing optional blocks stay ``None`` on the domain side; explicit empty lists
are kept as empty tuples. The calculation treats both as "no lines".
"""
from __future__ import annotations

from decimal import Decimal
from typing import Any, Mapping, Optional, Union

from .models import AdjustmentOutput, PriceItemInput, PriceItemOutput, ServiceOutput
from .use_cases import calculate_item_price
from .utils import PERCENT, to_decimal
from .values import (
    AdjustmentLine,
    Dimensions,
    GlassPricing,
    ModelPrices,
    Money,
    PriceCalculationInput,
    PriceCalculationResult,
    ServiceLine,
)


BASE_MULTIPLIER = Decimal(1)


def percentage_to_multiplier(percentage: Optional[Any]) -> Decimal:
    """10 -> 1.1, 0 or None -> exactly 1."""
    if percentage is None:
        return BASE_MULTIPLIER
    pct = to_decimal(percentage)
    if pct == 0:
        return BASE_MULTIPLIER
    return BASE_MULTIPLIER + pct / PERCENT


def _as_input(payload: Union[PriceItemInput, Mapping[str, Any]]) -> PriceItemInput:
    if isinstance(payload, PriceItemInput):
        return payload
    return PriceItemInput.model_validate(payload)


def to_domain(payload: Union[PriceItemInput, Mapping[str, Any]]) -> PriceCalculationInput:
    data = _as_input(payload)
    mp = data.model_prices

    dimensions = Dimensions(
        width_mm=data.width_mm,
        height_mm=data.height_mm,
        min_width_mm=mp.min_width_mm,
        min_height_mm=mp.min_height_mm,
    )

    model_prices = ModelPrices(
        base_price=Money(mp.base_price),
        cost_per_mm_width=Money(mp.cost_per_mm_width),
        cost_per_mm_height=Money(mp.cost_per_mm_height),
        accessory_price=Money(mp.accessory_price) if data.include_accessory and mp.accessory_price else None,
    )

    glass = None
    if data.glass is not None:
        glass = GlassPricing(
            price_per_sqm=Money(data.glass.price_per_sqm),
            discount_width_mm=data.glass.discount_width_mm,
            discount_height_mm=data.glass.discount_height_mm,
        )

    services = None
    if data.services is not None:
        services = tuple(
            ServiceLine(
                service_id=s.service_id,
                name=s.name or s.service_id,
                unit=s.unit,
                rate=Money(s.rate),
                minimum_billing_unit=s.minimum_billing_unit,
                quantity_override=s.quantity_override,
            )
            for s in data.services
        )

    adjustments = None
    if data.adjustments is not None:
        adjustments = tuple(
            AdjustmentLine(
                adjustment_id=a.adjustment_id or f"adj-{a.concept}",
                concept=a.concept,
                unit=a.unit,
                value=a.value,
                is_positive=a.sign == "positive",
            )
            for a in data.adjustments
        )

    return PriceCalculationInput(
        dimensions=dimensions,
        model_prices=model_prices,
        color_multiplier=percentage_to_multiplier(data.color_surcharge_percentage),
        glass=glass,
        services=services,
        adjustments=adjustments,
        profit_margin_percentage=data.profit_margin_percentage,
    )


def color_surcharge_amount(profile_cost: Money, multiplier: Decimal) -> Money:
    # Surcharge carried by the profile only; the accessory surcharge is not reported
    return profile_cost.subtract(profile_cost.divide(multiplier))


def to_output(result: PriceCalculationResult, color_surcharge_percentage: Optional[Any] = None) -> PriceItemOutput:
    out = PriceItemOutput(
        profile_cost=result.profile_cost.to_number(),
        glass_cost=result.glass_cost.to_number(),
        accessory_cost=result.accessory_cost.to_number(),
        model_cost=result.model_cost.to_number(),
        model_sales_price=result.model_sales_price.to_number(),
        dim_price=result.profile_cost.add(result.glass_cost).to_number(),
        acc_price=result.accessory_cost.to_number(),
        services=[
            ServiceOutput(
                service_id=s.service_id,
                name=s.name,
                unit=s.unit,
                quantity=float(s.quantity),
                amount=s.amount.to_number(),
            )
            for s in result.services
        ],
        adjustments=[
            AdjustmentOutput(
                adjustment_id=a.adjustment_id,
                concept=a.concept,
                unit=a.unit,
                amount=a.amount.to_number(),
            )
            for a in result.adjustments
        ],
        subtotal=result.subtotal.to_number(),
    )

    if color_surcharge_percentage is not None:
        pct = to_decimal(color_surcharge_percentage)
        out.color_surcharge_percentage = float(pct)
        if pct > 0:
            multiplier = percentage_to_multiplier(color_surcharge_percentage)
            out.color_surcharge_amount = color_surcharge_amount(result.profile_cost, multiplier).to_number()

    return out


def calculate_item_price_adapter(payload: Union[PriceItemInput, Mapping[str, Any]]) -> PriceItemOutput:
    """Price a transport payload end to end: validate, map, calculate, map back."""
    data = _as_input(payload)
    result = calculate_item_price(to_domain(data))
    return to_output(result, data.color_surcharge_percentage)
