from __future__ import annotations

import logging
from datetime import date, timedelta
from decimal import Decimal
from typing import Optional

from .adapter import calculate_item_price_adapter
from .catalog import Catalog
from .models import ItemRequest, PolicyConfig, PriceItemOutput, QuoteLine, QuoteRequest, QuoteSummary
from .utils import round_half_up, to_decimal


logger = logging.getLogger(__name__)


def price_item(request: ItemRequest, catalog: Catalog) -> PriceItemOutput:
    return calculate_item_price_adapter(catalog.build_item_input(request))


def build_quote(
    request: QuoteRequest,
    catalog: Catalog,
    policy: PolicyConfig,
    created_at: Optional[date] = None,
) -> QuoteSummary:
    """Price every item of a quote request and total it.

    The item subtotal is the unit price; the line subtotal multiplies it by the
    item quantity. The quote expires ``policy.validity_days`` after creation.
    """
    created_at = created_at or date.today()
    lines: list[QuoteLine] = []
    total = Decimal(0)
    units = 0

    for item in request.items:
        breakdown = price_item(item, catalog)
        model = catalog.model(item.model_id)
        color = catalog.color(item.color_id)
        unit_price = round_half_up(to_decimal(breakdown.subtotal))
        line_subtotal = round_half_up(unit_price * item.quantity)
        lines.append(
            QuoteLine(
                model_id=item.model_id,
                model_name=model.name,
                glass_name=catalog.glass_type(item.glass_type_id).name,
                color_name=color.name if color else None,
                room_location=item.room_location,
                width_mm=item.width_mm,
                height_mm=item.height_mm,
                quantity=item.quantity,
                unit_price=unit_price,
                subtotal=line_subtotal,
                breakdown=breakdown,
            )
        )
        total += line_subtotal
        units += item.quantity

    logger.info("Built quote '%s': %d line(s), total %s", request.project_name, len(lines), total)

    return QuoteSummary(
        project_name=request.project_name,
        client_name=request.client_name,
        currency=policy.currency,
        created_at=created_at,
        valid_until=created_at + timedelta(days=policy.validity_days),
        items=lines,
        total=total,
        total_units=units,
    )
