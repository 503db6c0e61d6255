from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict

import yaml

from .models import CatalogConfig, PolicyConfig


BASE_DIR = Path(__file__).resolve().parents[1]
DEFAULT_CONFIGS_DIR = BASE_DIR / "configs"
CONFIGS_ENV = "GLASS_PRICING_CONFIGS"


def configs_dir_from_env() -> Path:
    return Path(os.environ.get(CONFIGS_ENV) or DEFAULT_CONFIGS_DIR)


def _load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_document(path: Path) -> Dict[str, Any]:
    """Read a request/payload file; ``.json`` as JSON, anything else as YAML."""
    if path.suffix.lower() == ".json":
        return json.loads(path.read_text(encoding="utf-8")) or {}
    return _load_yaml(path)


def load_policy(configs_dir: Path) -> PolicyConfig:
    # policy.yaml is optional; defaults cover a bare install
    path = configs_dir / "policy.yaml"
    if not path.exists():
        return PolicyConfig()
    return PolicyConfig(**_load_yaml(path))


def load_catalog(configs_dir: Path) -> CatalogConfig:
    return CatalogConfig(**_load_yaml(configs_dir / "catalog.yaml"))
