from __future__ import annotations

from decimal import Decimal

from glass_pricing.calculators.pricing import calculate
from glass_pricing.values import (
    AdjustmentLine,
    Dimensions,
    GlassPricing,
    ModelPrices,
    Money,
    PriceCalculationInput,
    ServiceLine,
)


DIMS = Dimensions(1000, 2000, min_width_mm=800, min_height_mm=800)


def _input(**kwargs) -> PriceCalculationInput:
    params = dict(
        dimensions=DIMS,
        model_prices=ModelPrices(
            base_price=Money(100),
            cost_per_mm_width=Money(0.5),
            cost_per_mm_height=Money(0.3),
            accessory_price=kwargs.pop("accessory_price", None),
        ),
        color_multiplier=Decimal(1),
    )
    params.update(kwargs)
    return PriceCalculationInput(**params)


GLASS = GlassPricing(price_per_sqm=Money(50), discount_width_mm=10, discount_height_mm=10)


def test_profile_only():
    result = calculate(_input())
    assert result.profile_cost == Money(560)
    assert result.glass_cost == Money(0)
    assert result.accessory_cost == Money(0)
    assert result.services == ()
    assert result.adjustments == ()
    assert result.subtotal == Money(560)


def test_with_glass():
    result = calculate(_input(glass=GLASS))
    assert result.glass_cost == Money("98.51")
    assert result.subtotal == Money("658.51")


def test_color_multiplier_hits_profile_and_accessory():
    result = calculate(_input(color_multiplier=Decimal("1.1"), accessory_price=Money(50)))
    assert result.profile_cost == Money(616)
    assert result.accessory_cost == Money(55)


def test_glass_cost_ignores_color():
    plain = calculate(_input(glass=GLASS))
    colored = calculate(_input(glass=GLASS, color_multiplier=Decimal("1.1")))
    assert plain.glass_cost == colored.glass_cost


def test_full_composition():
    result = calculate(
        _input(
            color_multiplier=Decimal("1.1"),
            accessory_price=Money(50),
            glass=GLASS,
            services=(
                ServiceLine(service_id="svc-1", name="Instalación", unit="unit", rate=Money(100)),
            ),
            adjustments=(
                AdjustmentLine(
                    adjustment_id="adj-1",
                    concept="Descuento cliente frecuente",
                    unit="unit",
                    value=Decimal(30),
                    is_positive=False,
                ),
            ),
        )
    )
    assert result.profile_cost == Money(616)
    assert result.glass_cost == Money("98.51")
    assert result.accessory_cost == Money(55)
    assert len(result.services) == 1
    assert len(result.adjustments) == 1
    assert result.subtotal.to_number() == 839.51


def test_margin_applies_to_model_cost_only():
    result = calculate(
        _input(
            glass=GLASS,
            profit_margin_percentage=Decimal(20),
            services=(ServiceLine(service_id="svc-1", name="Instalación", unit="unit", rate=Money(100)),),
        )
    )
    assert result.model_cost == Money("658.51")
    assert result.model_sales_price == Money("658.51").divide(Decimal("0.8"))
    assert result.subtotal == result.model_sales_price.add(Money(100))


def test_empty_and_missing_lines_are_equivalent():
    missing = calculate(_input())
    empty = calculate(_input(services=(), adjustments=()))
    assert missing == empty


def test_deterministic():
    data = _input(glass=GLASS, color_multiplier=Decimal("1.15"), accessory_price=Money("42.5"))
    assert calculate(data) == calculate(data)


def test_adjustment_signs():
    lines = (
        AdjustmentLine(adjustment_id="a", concept="Recargo", unit="sqm", value=Decimal(10)),
        AdjustmentLine(adjustment_id="b", concept="Descuento", unit="ml", value=Decimal(5), is_positive=False),
    )
    result = calculate(_input(adjustments=lines))
    positive, negative = result.adjustments
    assert positive.amount.amount >= 0
    assert negative.amount.amount <= 0
    assert result.subtotal == Money(560).add(positive.amount).add(negative.amount)
