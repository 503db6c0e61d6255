from __future__ import annotations

import json
from pathlib import Path
from typing import NoReturn, Optional

import typer
import yaml
from pydantic import ValidationError

from .adapter import calculate_item_price_adapter
from .catalog import Catalog
from .config import load_catalog, load_document, load_policy
from .errors import PricingError
from .log import setup_logging
from .models import PolicyConfig, QuoteRequest
from .quote import build_quote
from .render import write_quote_html
from .utils import money


app = typer.Typer(help="Glass pricing CLI", add_completion=False, no_args_is_help=True)

DEFAULT_LOG_LEVEL = "WARNING"

# Reported as "Error: ..." with exit code 2
INPUT_ERRORS = (PricingError, ValidationError, json.JSONDecodeError, yaml.YAMLError, OSError)


@app.callback()
def main(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Logging level (DEBUG, INFO, WARNING, ...); defaults to policy.yaml, then WARNING"
    ),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Also log to this file (rotating)"),
):
    log_path = Path(log_file) if log_file else None
    ctx.obj = {"log_level": log_level, "log_file": log_path}
    setup_logging(log_level or DEFAULT_LOG_LEVEL, log_path)


def _apply_policy_logging(ctx: typer.Context, policy: PolicyConfig) -> None:
    # An explicit --log-level wins over the policy file
    opts = ctx.obj or {}
    if opts.get("log_level") is None:
        setup_logging(policy.log_level, opts.get("log_file"))


def _fail(message: str) -> NoReturn:
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(code=2)


def _load_request(path: str) -> QuoteRequest:
    return QuoteRequest.model_validate(load_document(Path(path)))


@app.command()
def calculate(payload: str = typer.Argument(..., help="Item payload file (YAML or JSON)")):
    """Price a single transport payload and print the breakdown as JSON."""
    try:
        out = calculate_item_price_adapter(load_document(Path(payload)))
    except INPUT_ERRORS as e:
        _fail(str(e))
    typer.echo(out.model_dump_json(by_alias=True, indent=2))


@app.command()
def price(
    ctx: typer.Context,
    request: str = typer.Argument(..., help="Quote request file (YAML or JSON)"),
    configs: str = typer.Option("configs", help="Configs folder (policy.yaml, catalog.yaml)"),
    out: Optional[str] = typer.Option(None, help="Write the quote as JSON here"),
    html: Optional[str] = typer.Option(None, help="Write the client HTML quote here"),
):
    """Price a quote request against the catalog.

    Prints one line per item plus the total; ``--out`` and ``--html`` write the
    full quote as JSON and as a client-facing HTML page.
    """
    cfg_dir = Path(configs)
    try:
        policy = load_policy(cfg_dir)
        _apply_policy_logging(ctx, policy)
        catalog = Catalog(load_catalog(cfg_dir))
        summary = build_quote(_load_request(request), catalog, policy)
    except INPUT_ERRORS as e:
        _fail(str(e))

    sym = policy.currency_symbol
    for idx, line in enumerate(summary.items, start=1):
        typer.echo(
            f"{idx}. {line.model_name} {line.width_mm}x{line.height_mm} "
            f"x{line.quantity} @ {money(line.unit_price, sym)} = {money(line.subtotal, sym)}"
        )
    typer.echo(f"Total ({summary.total_units} units): {money(summary.total, sym)} {summary.currency}")
    typer.echo(f"Valid until: {summary.valid_until.isoformat()}")

    try:
        if out:
            out_path = Path(out)
            out_path.parent.mkdir(parents=True, exist_ok=True)
            out_path.write_text(summary.model_dump_json(by_alias=True, indent=2), encoding="utf-8")
            typer.echo(f"Wrote {out_path}")
        if html:
            typer.echo(f"Wrote {write_quote_html(summary, policy, Path(html))}")
    except OSError as e:
        _fail(str(e))


@app.command()
def validate(
    ctx: typer.Context,
    request: str = typer.Argument(..., help="Quote request file (YAML or JSON)"),
    configs: str = typer.Option("configs", help="Configs folder"),
):
    """Resolve every item against the catalog and report problems."""
    cfg_dir = Path(configs)
    try:
        _apply_policy_logging(ctx, load_policy(cfg_dir))
        catalog = Catalog(load_catalog(cfg_dir))
        req = _load_request(request)
    except INPUT_ERRORS as e:
        _fail(str(e))

    problems = []
    for idx, item in enumerate(req.items, start=1):
        try:
            catalog.build_item_input(item)
        except PricingError as e:
            problems.append(f"item {idx} ({item.model_id}): {e}")
    if problems:
        for p in problems:
            typer.echo(p)
        raise typer.Exit(code=2)
    typer.echo(f"OK: {len(req.items)} item(s) resolved.")


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", help="Bind address"),
    port: int = typer.Option(8000, help="Bind port"),
):
    """Run the HTTP API."""
    import uvicorn

    uvicorn.run("glass_pricing.web.app:app", host=host, port=port)


if __name__ == "__main__":  # pragma: no cover
    app()
