from __future__ import annotations

from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest

from glass_pricing.catalog import Catalog
from glass_pricing.config import DEFAULT_CONFIGS_DIR, load_catalog, load_document, load_policy
from glass_pricing.errors import CatalogError
from glass_pricing.models import QuoteRequest
from glass_pricing.quote import build_quote
from glass_pricing.render import render_quote_html, write_quote_html


SAMPLES_DIR = Path(__file__).resolve().parents[1] / "samples"


def _quote_request(**extra) -> QuoteRequest:
    data = {
        "projectName": "Casa Chapinero",
        "clientName": "Ana Pérez",
        "items": [
            {
                "modelId": "corredera",
                "glassTypeId": "templado",
                "widthMm": 1000,
                "heightMm": 2000,
                "colorId": "antracita",
                "quantity": 2,
                "roomLocation": "Sala",
            },
            {"modelId": "corredera", "glassTypeId": "templado", "widthMm": 1000, "heightMm": 2000},
        ],
    }
    data.update(extra)
    return QuoteRequest.model_validate(data)


def test_quote_lines_and_totals(catalog, policy):
    summary = build_quote(_quote_request(), catalog, policy, created_at=date(2026, 1, 10))

    first, second = summary.items
    assert first.model_name == "Corredera 5500"
    assert first.glass_name == "Templado 6mm"
    assert first.color_name == "Gris Antracita"
    assert first.unit_price == Decimal("769.51")
    assert first.subtotal == Decimal("1539.02")
    assert second.color_name is None
    assert second.unit_price == Decimal("708.51")

    assert summary.total == Decimal("2247.53")
    assert summary.total_units == 3
    assert summary.currency == "COP"


def test_quote_validity(catalog, policy):
    summary = build_quote(_quote_request(), catalog, policy, created_at=date(2026, 1, 10))
    assert summary.created_at == date(2026, 1, 10)
    assert summary.valid_until == date(2026, 1, 25)


def test_quote_defaults_to_today(catalog, policy):
    summary = build_quote(_quote_request(), catalog, policy)
    assert summary.created_at == date.today()


def test_empty_quote(catalog, policy):
    summary = build_quote(QuoteRequest(), catalog, policy)
    assert summary.items == []
    assert summary.total == 0
    assert summary.project_name == "Quote"


def test_quote_fails_on_first_bad_item(catalog, policy):
    request = _quote_request(items=[{"modelId": "nope", "glassTypeId": "templado", "widthMm": 1000, "heightMm": 2000}])
    with pytest.raises(CatalogError):
        build_quote(request, catalog, policy)


def test_quote_serializes_camel_case(catalog, policy):
    dumped = build_quote(_quote_request(), catalog, policy).model_dump(by_alias=True)
    assert dumped["totalUnits"] == 3
    assert dumped["items"][0]["unitPrice"] == Decimal("769.51")
    assert dumped["items"][0]["breakdown"]["dimPrice"] == 714.51


def test_render_html(catalog, policy):
    summary = build_quote(_quote_request(), catalog, policy, created_at=date(2026, 1, 10))
    html = render_quote_html(summary, policy)
    assert "Casa Chapinero" in html
    assert "Ana Pérez" in html
    assert "Vidrios de Prueba" in html
    assert "$1,539.02" in html
    assert "$2,247.53" in html
    assert "2026-01-25" in html


def test_render_escapes_user_text(catalog, policy):
    summary = build_quote(_quote_request(clientName="<script>x</script>"), catalog, policy)
    html = render_quote_html(summary, policy)
    assert "<script>x</script>" not in html
    assert "&lt;script&gt;" in html


def test_write_html(tmp_path, catalog, policy):
    summary = build_quote(_quote_request(), catalog, policy)
    out = write_quote_html(summary, policy, tmp_path / "out" / "quote.html")
    assert out.exists()
    assert "Corredera 5500" in out.read_text(encoding="utf-8")


def test_sample_request_prices_against_shipped_catalog():
    catalog = Catalog(load_catalog(DEFAULT_CONFIGS_DIR))
    policy = load_policy(DEFAULT_CONFIGS_DIR)
    request = QuoteRequest.model_validate(load_document(SAMPLES_DIR / "quote_request.yaml"))
    summary = build_quote(request, catalog, policy)
    assert summary.total_units == 3
    assert summary.total > 0
    assert summary.items[1].breakdown.adjustments[0].amount == -20000
