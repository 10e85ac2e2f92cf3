"""
Form inputs per room type.

Values arrive the way a data-entry form stores them: strings, sometimes blank,
sometimes camelCase keys. Anything that does not parse to a finite number
takes the room-type default from the catalog.
"""
from __future__ import annotations

import json
import math
import re
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping

import yaml

from .catalog import Catalog

FORM_SECTIONS = ("room", "conditions", "product", "usage")

# Alternative field names used by older saved forms.
_KEY_ALIASES = {
    "daily_product_load": "daily_load",
    "product_incoming_temp": "incoming_temp",
    "product_outgoing_temp": "outgoing_temp",
    "hours_working": "working_hours",
    "daily_door_openings": "door_openings",
    "storage_capacity": "storage_density",
    "light_load_kw": "light_load",
}

_CAMEL_RE = re.compile(r"(?<!^)(?=[A-Z])")


def parse_number(value: Any, default: float) -> float:
    if value is None or isinstance(value, bool):
        return float(default)
    if isinstance(value, (int, float)):
        num = float(value)
    else:
        text = str(value).strip()
        if not text:
            return float(default)
        try:
            num = float(text)
        except ValueError:
            return float(default)
    if not math.isfinite(num):
        return float(default)
    return num


def parse_optional_number(value: Any) -> float | None:
    if value is None or value == "":
        return None
    num = parse_number(value, math.nan)
    return None if math.isnan(num) else num


def _snake(key: str) -> str:
    return _CAMEL_RE.sub("_", str(key).strip()).lower()


def normalize_form(form: Mapping[str, Any]) -> dict[str, Any]:
    """Flatten form sections and map keys to snake_case field names."""
    flat: dict[str, Any] = {}
    sections = [s for s in FORM_SECTIONS if isinstance(form.get(s), Mapping)]
    for key, value in form.items():
        if key in sections:
            continue
        flat[key] = value
    for section in sections:
        flat.update(form[section])

    out: dict[str, Any] = {}
    for key, value in flat.items():
        name = _snake(key)
        out[_KEY_ALIASES.get(name, name)] = value
    return out


def load_form_file(path: str | Path) -> dict[str, Any]:
    p = Path(path)
    text = p.read_text(encoding="utf-8")
    if p.suffix.lower() == ".json":
        data = json.loads(text)
    else:
        data = yaml.safe_load(text)
    if not isinstance(data, dict):
        raise ValueError(f"Form file root must be a mapping: {p}")
    return data


class _FormInputs:
    ROOM_TYPE = ""
    TEXT_FIELDS: tuple[str, ...] = ("insulation_type", "product_type", "storage_type")
    OPTIONAL_FIELDS: tuple[str, ...] = ()
    # Zero or negative is treated like a value that did not parse.
    POSITIVE_FIELDS: tuple[str, ...] = (
        "length",
        "width",
        "height",
        "door_width",
        "door_height",
        "insulation_thickness",
        "pull_down_time",
    )

    @classmethod
    def from_form(cls, form: Mapping[str, Any], catalog: Catalog):
        defaults = catalog.defaults(cls.ROOM_TYPE)
        values = normalize_form(form)
        kwargs: dict[str, Any] = {}
        for f in fields(cls):
            raw = values.get(f.name)
            if f.name in cls.TEXT_FIELDS:
                text = str(raw).strip() if raw is not None else ""
                kwargs[f.name] = text or str(defaults.get(f.name) or "")
            elif f.name in cls.OPTIONAL_FIELDS:
                kwargs[f.name] = parse_optional_number(raw)
            else:
                if f.name not in defaults:
                    raise ValueError(f"No default for {cls.ROOM_TYPE}.{f.name}")
                num = parse_number(raw, defaults[f.name])
                if f.name in cls.POSITIVE_FIELDS and num <= 0:
                    num = float(defaults[f.name])
                kwargs[f.name] = num
        return cls(**kwargs)

    def as_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class ColdRoomInputs(_FormInputs):
    ROOM_TYPE = "cold_room"

    length: float
    width: float
    height: float
    door_width: float
    door_height: float
    door_openings: float
    insulation_type: str
    insulation_thickness: float
    external_temp: float
    internal_temp: float
    operating_hours: float
    pull_down_time: float
    product_type: str
    daily_load: float
    incoming_temp: float
    outgoing_temp: float
    storage_type: str
    number_of_people: float
    working_hours: float
    lighting_wattage: float
    equipment_load: float


@dataclass(frozen=True)
class FreezerInputs(_FormInputs):
    ROOM_TYPE = "freezer"
    OPTIONAL_FIELDS = ("custom_cp_above", "custom_cp_below", "custom_latent_heat")
    POSITIVE_FIELDS = _FormInputs.POSITIVE_FIELDS + ("internal_floor_thickness",)

    length: float
    width: float
    height: float
    door_width: float
    door_height: float
    door_openings: float
    insulation_type: str
    insulation_thickness: float
    internal_floor_thickness: float
    number_of_floors: float
    external_temp: float
    internal_temp: float
    operating_hours: float
    pull_down_time: float
    room_humidity: float
    air_flow_per_fan: float
    steam_humidifier_load: float
    product_type: str
    daily_load: float
    incoming_temp: float
    outgoing_temp: float
    storage_type: str
    number_of_people: float
    working_hours: float
    lighting_wattage: float
    equipment_load: float
    fan_motor_rating: float
    number_of_fans: float
    fan_operating_hours: float
    door_heaters_load: float
    tray_heaters_load: float
    peripheral_heaters_load: float
    custom_cp_above: float | None = None
    custom_cp_below: float | None = None
    custom_latent_heat: float | None = None


@dataclass(frozen=True)
class BlastFreezerInputs(_FormInputs):
    ROOM_TYPE = "blast_freezer"
    TEXT_FIELDS = ("insulation_type", "product_type")
    POSITIVE_FIELDS = (
        "length",
        "breadth",
        "height",
        "door_width",
        "door_height",
        "wall_thickness",
        "ceiling_thickness",
        "floor_thickness",
        "internal_floor_thickness",
        "batch_hours",
    )

    length: float
    breadth: float
    height: float
    door_width: float
    door_height: float
    insulation_type: str
    wall_thickness: float
    ceiling_thickness: float
    floor_thickness: float
    internal_floor_thickness: float
    ambient_temp: float
    room_temp: float
    batch_hours: float
    operating_hours: float
    product_type: str
    capacity_required: float
    incoming_temp: float
    outgoing_temp: float
    storage_density: float
    number_of_people: float
    working_hours: float
    light_load: float
    fan_motor_rating: float
    peripheral_heaters_qty: float
    peripheral_heaters_capacity: float
    door_heaters_qty: float
    door_heaters_capacity: float
    tray_heaters_qty: float
    tray_heaters_capacity: float
    drain_heaters_qty: float
    drain_heaters_capacity: float
