from __future__ import annotations

import logging
from typing import List, Optional

from .errors import CatalogError
from .models import (
    CatalogColor,
    CatalogConfig,
    CatalogGlassType,
    CatalogModel,
    GlassInput,
    ItemRequest,
    ModelPricesInput,
    PriceItemInput,
    ServiceInput,
)


logger = logging.getLogger(__name__)


class Catalog:
    """Looks up models, glass types, services and colors and turns an item
    request into a priceable payload.

    Catalog rules enforced here: the model must be published, the glass type
    must be compatible with it and the size must fall inside the model's range.
    """

    def __init__(self, config: CatalogConfig) -> None:
        self.config = config

    def model(self, model_id: str) -> CatalogModel:
        model = self.config.models.get(model_id)
        if model is None or model.status != "published":
            raise CatalogError(f"Model '{model_id}' not found or not available")
        return model

    def glass_type(self, glass_type_id: str) -> CatalogGlassType:
        glass = self.config.glass_types.get(glass_type_id)
        if glass is None:
            raise CatalogError(f"Glass type '{glass_type_id}' not found")
        return glass

    def color(self, color_id: Optional[str]) -> Optional[CatalogColor]:
        if not color_id:
            return None
        color = self.config.colors.get(color_id)
        if color is None:
            raise CatalogError(f"Color '{color_id}' not found")
        return color

    def _check_size(self, model: CatalogModel, width_mm: int, height_mm: int) -> None:
        if not model.min_width_mm <= width_mm <= model.max_width_mm:
            raise CatalogError(
                f"Width must be between {model.min_width_mm}mm and {model.max_width_mm}mm"
            )
        if not model.min_height_mm <= height_mm <= model.max_height_mm:
            raise CatalogError(
                f"Height must be between {model.min_height_mm}mm and {model.max_height_mm}mm"
            )

    def _services(self, request: ItemRequest) -> List[ServiceInput]:
        out: List[ServiceInput] = []
        for sel in request.services:
            svc = self.config.services.get(sel.service_id)
            if svc is None:
                raise CatalogError(f"Service '{sel.service_id}' not found")
            out.append(
                ServiceInput(
                    service_id=sel.service_id,
                    name=svc.name,
                    unit=svc.unit,
                    rate=svc.rate,
                    minimum_billing_unit=svc.minimum_billing_unit,
                    quantity_override=sel.quantity,
                )
            )
        return out

    def build_item_input(self, request: ItemRequest) -> PriceItemInput:
        model = self.model(request.model_id)
        if request.glass_type_id not in model.compatible_glass_types:
            raise CatalogError(
                f"Glass type '{request.glass_type_id}' is not compatible with model '{request.model_id}'"
            )
        glass = self.glass_type(request.glass_type_id)
        self._check_size(model, request.width_mm, request.height_mm)
        color = self.color(request.color_id)

        logger.debug("Resolved %s / %s for %sx%s mm", request.model_id, request.glass_type_id, request.width_mm, request.height_mm)

        return PriceItemInput(
            width_mm=request.width_mm,
            height_mm=request.height_mm,
            model_prices=ModelPricesInput(
                base_price=model.base_price,
                cost_per_mm_width=model.cost_per_mm_width,
                cost_per_mm_height=model.cost_per_mm_height,
                min_width_mm=model.min_width_mm,
                min_height_mm=model.min_height_mm,
                accessory_price=model.accessory_price,
            ),
            color_surcharge_percentage=color.surcharge_percentage if color else None,
            profit_margin_percentage=model.profit_margin_percentage,
            include_accessory=request.include_accessory,
            glass=GlassInput(
                price_per_sqm=glass.price_per_sqm,
                discount_width_mm=model.glass_discount_width_mm,
                discount_height_mm=model.glass_discount_height_mm,
            ),
            services=self._services(request),
            adjustments=list(request.adjustments),
        )
