from __future__ import annotations

import logging
from functools import lru_cache
from typing import Dict

import yaml
from fastapi import Depends, FastAPI, HTTPException
from pydantic import ValidationError

from ..adapter import calculate_item_price_adapter
from ..catalog import Catalog
from ..config import configs_dir_from_env, load_catalog, load_policy
from ..errors import PricingError
from ..models import ItemRequest, PolicyConfig, PriceItemInput, PriceItemOutput, QuoteRequest, QuoteSummary
from ..quote import build_quote, price_item


logger = logging.getLogger(__name__)

app = FastAPI(title="Glass Pricing API")

# Config load failures map to 503
CONFIG_ERRORS = (OSError, yaml.YAMLError, ValidationError)


@lru_cache(maxsize=1)
def _load_policy() -> PolicyConfig:
    return load_policy(configs_dir_from_env())


@lru_cache(maxsize=1)
def _load_catalog() -> Catalog:
    configs_dir = configs_dir_from_env()
    logger.info("Loading catalog from %s", configs_dir)
    return Catalog(load_catalog(configs_dir))


def _config_unavailable(e: Exception) -> HTTPException:
    logger.error("Pricing configuration unavailable: %s", e)
    return HTTPException(status_code=503, detail=f"Pricing configuration unavailable: {e}")


def get_policy() -> PolicyConfig:
    try:
        return _load_policy()
    except CONFIG_ERRORS as e:
        raise _config_unavailable(e)


def get_catalog() -> Catalog:
    try:
        return _load_catalog()
    except CONFIG_ERRORS as e:
        raise _config_unavailable(e)


def _bad_request(e: PricingError) -> HTTPException:
    logger.info("Rejected request: %s", e)
    return HTTPException(status_code=400, detail=str(e))


@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "ok"}


@app.post("/quote/calculate-item", response_model=PriceItemOutput, response_model_by_alias=True)
def calculate_item(payload: PriceItemInput) -> PriceItemOutput:
    try:
        return calculate_item_price_adapter(payload)
    except PricingError as e:
        raise _bad_request(e)


@app.post("/quote/catalog-item", response_model=PriceItemOutput, response_model_by_alias=True)
def catalog_item(request: ItemRequest, catalog: Catalog = Depends(get_catalog)) -> PriceItemOutput:
    try:
        return price_item(request, catalog)
    except PricingError as e:
        raise _bad_request(e)


@app.post("/quote", response_model=QuoteSummary, response_model_by_alias=True)
def create_quote(
    request: QuoteRequest,
    catalog: Catalog = Depends(get_catalog),
    policy: PolicyConfig = Depends(get_policy),
) -> QuoteSummary:
    try:
        return build_quote(request, catalog, policy)
    except PricingError as e:
        raise _bad_request(e)
