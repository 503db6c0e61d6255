from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .models import PolicyConfig, QuoteSummary
from .utils import money, to_decimal


TEMPLATES_DIR = Path(__file__).parent / "templates"


def _env() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "j2"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )


def render_quote_html(summary: QuoteSummary, policy: PolicyConfig) -> str:
    template = _env().get_template("quote.html.j2")

    def format_money(x: Any) -> str:
        return money(to_decimal(x), policy.currency_symbol)

    ctx = {
        "policy": policy,
        "company": policy.company,
        "quote": summary,
        "format_money": format_money,
    }
    return template.render(**ctx)


def write_quote_html(summary: QuoteSummary, policy: PolicyConfig, out_path: Path) -> Path:
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(render_quote_html(summary, policy), encoding="utf-8")
    return out_path
