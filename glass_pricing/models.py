from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Annotated, Any, Dict, List, Literal, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .utils import to_decimal


def _decimal_or_none(v: Any) -> Any:
    return None if v is None else to_decimal(v)


# Accepts ints, floats (through str), numeric strings and Decimals alike
DecimalLike = Annotated[Decimal, BeforeValidator(_decimal_or_none)]

Unit = Literal["unit", "sqm", "ml"]
Sign = Literal["positive", "negative"]
Currency = Literal["COP", "USD", "EUR", "MXN", "AUD"]
ModelStatus = Literal["draft", "published"]


class WireModel(BaseModel):
    """camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, protected_namespaces=())


# ---- Item price payload ----


class ModelPricesInput(WireModel):
    base_price: DecimalLike
    cost_per_mm_width: DecimalLike
    cost_per_mm_height: DecimalLike
    min_width_mm: int = 0
    min_height_mm: int = 0
    accessory_price: Optional[DecimalLike] = None


class GlassInput(WireModel):
    price_per_sqm: DecimalLike
    discount_width_mm: Optional[int] = None
    discount_height_mm: Optional[int] = None


class ServiceInput(WireModel):
    service_id: str
    name: Optional[str] = None
    unit: Unit
    rate: DecimalLike
    minimum_billing_unit: Optional[DecimalLike] = None
    quantity_override: Optional[DecimalLike] = None


class AdjustmentInput(WireModel):
    adjustment_id: Optional[str] = None
    concept: str = Field(min_length=1)
    unit: Unit
    value: DecimalLike = Field(ge=0)
    sign: Sign = "positive"


class PriceItemInput(WireModel):
    width_mm: int
    height_mm: int
    model_prices: ModelPricesInput
    color_surcharge_percentage: Optional[DecimalLike] = None
    profit_margin_percentage: Optional[DecimalLike] = None
    # false drops modelPrices.accessoryPrice from the calculation
    include_accessory: bool = True
    glass: Optional[GlassInput] = None
    services: Optional[List[ServiceInput]] = None
    adjustments: Optional[List[AdjustmentInput]] = None


class ServiceOutput(WireModel):
    service_id: str
    name: str
    unit: Unit
    quantity: float
    amount: float


class AdjustmentOutput(WireModel):
    adjustment_id: str
    concept: str
    unit: Unit
    amount: float


class PriceItemOutput(WireModel):
    profile_cost: float
    glass_cost: float
    accessory_cost: float
    model_cost: float
    model_sales_price: float
    # dim_price/acc_price keep the names older clients read
    dim_price: float
    acc_price: float
    color_surcharge_percentage: Optional[float] = None
    color_surcharge_amount: Optional[float] = None
    services: List[ServiceOutput] = Field(default_factory=list)
    adjustments: List[AdjustmentOutput] = Field(default_factory=list)
    subtotal: float


# ---- Catalog-driven requests ----


class ServiceSelection(WireModel):
    service_id: str
    quantity: Optional[DecimalLike] = None


class ItemRequest(WireModel):
    model_id: str
    glass_type_id: str
    width_mm: int
    height_mm: int
    color_id: Optional[str] = None
    include_accessory: bool = True
    quantity: int = Field(default=1, ge=1)
    room_location: Optional[str] = Field(default=None, max_length=100)
    services: List[ServiceSelection] = Field(default_factory=list)
    adjustments: List[AdjustmentInput] = Field(default_factory=list)


class QuoteRequest(WireModel):
    project_name: str = "Quote"
    client_name: Optional[str] = None
    items: List[ItemRequest] = Field(default_factory=list)


class QuoteLine(WireModel):
    model_id: str
    model_name: str
    glass_name: str
    color_name: Optional[str] = None
    room_location: Optional[str] = None
    width_mm: int
    height_mm: int
    quantity: int
    unit_price: Decimal
    subtotal: Decimal
    breakdown: PriceItemOutput


class QuoteSummary(WireModel):
    project_name: str
    client_name: Optional[str] = None
    currency: Currency
    created_at: date
    valid_until: date
    items: List[QuoteLine] = Field(default_factory=list)
    total: Decimal
    total_units: int


# ---- Configuration (YAML) ----


class CompanyInfo(BaseModel):
    name: str = "Glass Pricing"
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None


class PolicyConfig(BaseModel):
    currency: Currency = "COP"
    currency_symbol: str = "$"
    validity_days: int = Field(default=15, ge=0)
    company: CompanyInfo = Field(default_factory=CompanyInfo)
    log_level: str = "INFO"


class CatalogModel(BaseModel):
    name: str
    status: ModelStatus = "published"
    base_price: DecimalLike
    cost_per_mm_width: DecimalLike
    cost_per_mm_height: DecimalLike
    accessory_price: Optional[DecimalLike] = None
    min_width_mm: int
    max_width_mm: int
    min_height_mm: int
    max_height_mm: int
    glass_discount_width_mm: int = 0
    glass_discount_height_mm: int = 0
    profit_margin_percentage: Optional[DecimalLike] = None
    compatible_glass_types: List[str] = Field(default_factory=list)


class CatalogGlassType(BaseModel):
    name: str
    price_per_sqm: DecimalLike
    thickness_mm: Optional[int] = None


class CatalogService(BaseModel):
    name: str
    unit: Unit
    rate: DecimalLike
    minimum_billing_unit: Optional[DecimalLike] = None


class CatalogColor(BaseModel):
    name: str
    surcharge_percentage: DecimalLike = Decimal(0)
    hex_code: Optional[str] = None


class CatalogConfig(BaseModel):
    models: Dict[str, CatalogModel] = Field(default_factory=dict)
    glass_types: Dict[str, CatalogGlassType] = Field(default_factory=dict)
    services: Dict[str, CatalogService] = Field(default_factory=dict)
    colors: Dict[str, CatalogColor] = Field(default_factory=dict)
