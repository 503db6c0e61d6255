from __future__ import annotations

import copy
import logging
from pathlib import Path

import pytest
import yaml

from glass_pricing.catalog import Catalog
from glass_pricing.models import CatalogConfig, PolicyConfig


CATALOG = {
    "models": {
        "corredera": {
            "name": "Corredera 5500",
            "status": "published",
            "base_price": 100,
            "cost_per_mm_width": 0.5,
            "cost_per_mm_height": 0.3,
            "accessory_price": 50,
            "min_width_mm": 800,
            "max_width_mm": 3000,
            "min_height_mm": 800,
            "max_height_mm": 2400,
            "glass_discount_width_mm": 10,
            "glass_discount_height_mm": 10,
            "compatible_glass_types": ["templado"],
        },
        "borrador": {
            "name": "Modelo en borrador",
            "status": "draft",
            "base_price": 100,
            "cost_per_mm_width": 0.5,
            "cost_per_mm_height": 0.3,
            "min_width_mm": 800,
            "max_width_mm": 3000,
            "min_height_mm": 800,
            "max_height_mm": 2400,
            "compatible_glass_types": ["templado"],
        },
    },
    "glass_types": {
        "templado": {"name": "Templado 6mm", "price_per_sqm": 50, "thickness_mm": 6},
        "laminado": {"name": "Laminado 3+3", "price_per_sqm": 80, "thickness_mm": 6},
    },
    "services": {
        "instalacion": {"name": "Instalación", "unit": "sqm", "rate": 50, "minimum_billing_unit": 2},
        "sellado": {"name": "Sellado perimetral", "unit": "ml", "rate": 10},
        "retiro": {"name": "Retiro de ventana", "unit": "unit", "rate": 30},
    },
    "colors": {
        "blanco": {"name": "Blanco", "surcharge_percentage": 0},
        "antracita": {"name": "Gris Antracita", "surcharge_percentage": 10},
    },
}

POLICY = {
    "currency": "COP",
    "currency_symbol": "$",
    "validity_days": 15,
    "company": {"name": "Vidrios de Prueba"},
}


@pytest.fixture
def catalog_data() -> dict:
    return copy.deepcopy(CATALOG)


@pytest.fixture
def catalog(catalog_data) -> Catalog:
    return Catalog(CatalogConfig(**catalog_data))


@pytest.fixture
def policy() -> PolicyConfig:
    return PolicyConfig(**POLICY)


@pytest.fixture
def configs_dir(tmp_path: Path, catalog_data) -> Path:
    d = tmp_path / "configs"
    d.mkdir()
    (d / "catalog.yaml").write_text(yaml.safe_dump(catalog_data, allow_unicode=True), encoding="utf-8")
    (d / "policy.yaml").write_text(yaml.safe_dump(POLICY), encoding="utf-8")
    return d


@pytest.fixture(autouse=True)
def _reset_root_logger():
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    yield
    for h in list(root.handlers):
        if h not in before:
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
