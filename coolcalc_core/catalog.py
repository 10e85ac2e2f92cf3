"""
Reference data and design constants.

Tables live as YAML files in ``coolcalc_core/data``. A different directory
can be supplied per call or via the ``COOLCALC_DATA_DIR`` environment variable;
it must hold the same six files.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent / "data"
DATA_DIR_ENV = "COOLCALC_DATA_DIR"

ROOM_TYPES = ("cold_room", "freezer", "blast_freezer")
ROOM_TYPE_ALIASES = {
    "coldroom": "cold_room",
    "cold-room": "cold_room",
    "blastfreezer": "blast_freezer",
    "blast-freezer": "blast_freezer",
}

_CACHE: dict[Path, "Catalog"] = {}


@dataclass(frozen=True)
class ProductProperties:
    name: str
    specific_heat_above: float
    specific_heat_below: float
    latent_heat: float
    freezing_point: float
    density: float
    storage_efficiency: float


@dataclass(frozen=True)
class Catalog:
    products: dict[str, ProductProperties]
    fallback_product: str
    storage_factors: dict[str, float]
    fallback_storage: str
    u_factors: dict[str, dict[float, float]]
    fallback_u: float
    respiration: dict[str, dict[float, float]]
    constants: dict[str, Any]
    room_defaults: dict[str, dict[str, Any]]

    def product(self, name: str | None) -> ProductProperties:
        if name and name in self.products:
            return self.products[name]
        logger.warning("Unknown product type %r, using %r", name, self.fallback_product)
        return self.products[self.fallback_product]

    def storage_factor(self, name: str | None) -> float:
        if name and name in self.storage_factors:
            return self.storage_factors[name]
        logger.warning("Unknown storage type %r, using %r", name, self.fallback_storage)
        return self.storage_factors[self.fallback_storage]

    def respiration_points(self, product_type: str | None) -> dict[float, float]:
        return self.respiration.get(product_type or "", {})

    def defaults(self, room_type: str) -> dict[str, Any]:
        key = normalize_room_type(room_type)
        return dict(self.room_defaults[key])

    def constant(self, *path: str) -> Any:
        node: Any = self.constants
        for part in path:
            if not isinstance(node, dict) or part not in node:
                raise ValueError(f"Missing design constant: {'.'.join(path)}")
            node = node[part]
        return node


def normalize_room_type(room_type: str) -> str:
    key = str(room_type or "").strip().lower()
    key = ROOM_TYPE_ALIASES.get(key, key)
    if key not in ROOM_TYPES:
        raise ValueError(
            f"Unknown room type: {room_type!r} (expected one of {', '.join(ROOM_TYPES)})"
        )
    return key


def _read_yaml(path: Path) -> dict:
    if not path.exists():
        raise ValueError(f"Reference data file not found: {path}")
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Reference data root must be a mapping: {path}")
    return data


def _require_section(data: dict, key: str, path: Path) -> dict:
    section = data.get(key)
    if not isinstance(section, dict) or not section:
        raise ValueError(f"Section '{key}' is required and must be a mapping: {path}")
    return section


def _numeric_table(raw: dict, ctx: str) -> dict[float, float]:
    table: dict[float, float] = {}
    for k, v in raw.items():
        try:
            table[float(k)] = float(v)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Non-numeric entry {k!r}: {v!r} in {ctx}") from exc
    return dict(sorted(table.items()))


def _load_products(path: Path) -> tuple[dict[str, ProductProperties], str]:
    data = _read_yaml(path)
    raw = _require_section(data, "products", path)
    products = {
        str(name): ProductProperties(
            name=str(name),
            specific_heat_above=float(p["specific_heat_above"]),
            specific_heat_below=float(p["specific_heat_below"]),
            latent_heat=float(p["latent_heat"]),
            freezing_point=float(p["freezing_point"]),
            density=float(p["density"]),
            storage_efficiency=float(p["storage_efficiency"]),
        )
        for name, p in raw.items()
    }
    fallback = str(data.get("fallback") or "")
    if fallback not in products:
        raise ValueError(f"Fallback product {fallback!r} is not defined: {path}")
    return products, fallback


def _load_storage_factors(path: Path) -> tuple[dict[str, float], str]:
    data = _read_yaml(path)
    factors = {str(k): float(v) for k, v in _require_section(data, "factors", path).items()}
    fallback = str(data.get("fallback") or "")
    if fallback not in factors:
        raise ValueError(f"Fallback storage type {fallback!r} is not defined: {path}")
    return factors, fallback


def _load_u_factors(path: Path) -> tuple[dict[str, dict[float, float]], float]:
    data = _read_yaml(path)
    raw = _require_section(data, "insulation", path)
    tables = {
        str(kind): _numeric_table(cols, f"{path}:{kind}") for kind, cols in raw.items()
    }
    return tables, float(data.get("fallback_u", 0.25))


def _load_respiration(path: Path) -> dict[str, dict[float, float]]:
    data = _read_yaml(path)
    raw = _require_section(data, "factors", path)
    return {str(name): _numeric_table(pts, f"{path}:{name}") for name, pts in raw.items()}


def resolve_data_dir(data_dir: str | Path | None = None) -> Path:
    if data_dir is None:
        data_dir = os.environ.get(DATA_DIR_ENV) or DATA_DIR
    return Path(data_dir).resolve()


def load_catalog(data_dir: str | Path | None = None) -> Catalog:
    """Load (cached) reference tables from ``data_dir``."""
    root = resolve_data_dir(data_dir)
    if root in _CACHE:
        return _CACHE[root]

    products, fallback_product = _load_products(root / "products.yaml")
    storage_factors, fallback_storage = _load_storage_factors(root / "storage_factors.yaml")
    u_factors, fallback_u = _load_u_factors(root / "u_factors.yaml")
    respiration = _load_respiration(root / "respiration.yaml")
    constants = _read_yaml(root / "constants.yaml")
    defaults_raw = _read_yaml(root / "defaults.yaml")

    room_defaults: dict[str, dict[str, Any]] = {}
    for room_type in ROOM_TYPES:
        room_defaults[room_type] = dict(
            _require_section(defaults_raw, room_type, root / "defaults.yaml")
        )

    catalog = Catalog(
        products=products,
        fallback_product=fallback_product,
        storage_factors=storage_factors,
        fallback_storage=fallback_storage,
        u_factors=u_factors,
        fallback_u=fallback_u,
        respiration=respiration,
        constants=constants,
        room_defaults=room_defaults,
    )
    logger.debug(
        "Loaded catalog from %s: %d products, %d insulation types",
        root,
        len(products),
        len(u_factors),
    )
    _CACHE[root] = catalog
    return catalog


def clear_cache() -> None:
    _CACHE.clear()
