from __future__ import annotations

from ..values import Money, PriceCalculationInput, PriceCalculationResult
from . import accessory, adjustments, glass, margin, profile, services


def calculate(data: PriceCalculationInput) -> PriceCalculationResult:
    """Compose every cost component into a full item price breakdown.

    Order matters for the business rules:
    - profile and accessory carry the color surcharge, glass does not;
    - the profit margin applies to the model cost (profile + glass + accessory);
    - services and adjustments are added after the margin.
    """
    dims = data.dimensions
    prices = data.model_prices

    profile_cost = profile.compute(
        prices.base_price,
        prices.cost_per_mm_width,
        prices.cost_per_mm_height,
        dims,
        data.color_multiplier,
    )

    if data.glass is not None:
        glass_cost = glass.compute(
            data.glass.price_per_sqm,
            dims,
            data.glass.discount_width_mm,
            data.glass.discount_height_mm,
        )
    else:
        glass_cost = Money.zero()

    accessory_cost = accessory.compute(prices.accessory_price, data.color_multiplier)

    model_cost = profile_cost.add(glass_cost).add(accessory_cost)
    model_sales_price = margin.model_sales_price(model_cost, data.profit_margin_percentage)

    service_results = services.compute_all(data.services or (), dims)
    adjustment_results = adjustments.compute_all(data.adjustments or (), dims)

    subtotal = model_sales_price
    for s in service_results:
        subtotal = subtotal.add(s.amount)
    # Adjustments may be negative
    for a in adjustment_results:
        subtotal = subtotal.add(a.amount)

    return PriceCalculationResult(
        profile_cost=profile_cost,
        glass_cost=glass_cost,
        accessory_cost=accessory_cost,
        model_cost=model_cost,
        model_sales_price=model_sales_price,
        services=tuple(service_results),
        adjustments=tuple(adjustment_results),
        subtotal=subtotal,
    )
