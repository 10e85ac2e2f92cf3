from __future__ import annotations

import json
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path

import pandas as pd

from .loads import kw_to_kj_per_day, kw_to_tr

BREAKDOWN_COLUMNS = ["group", "component", "kw", "tr", "kj_day"]


def _iso_utc_now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds")


def _details(result) -> dict:
    if result.room_type == "cold_room":
        return {
            "u_factor": result.u_factor.u_factor,
            "respiration_factor_w_per_tonne": result.respiration_factor,
            "air_change_rate": result.air_change_rate,
            "storage_factor": result.storage_factor,
        }
    if result.room_type == "freezer":
        return {
            "wall_u_factor": result.wall_u.u_factor,
            "floor_u_factor": result.floor_u.u_factor,
            "air_change_rate": result.air_change.air_change_rate,
            "air_flow_l_per_s": result.air_change.air_flow_l_per_s,
            "door_heaters_required": result.door.heaters_required,
            "total_air_flow_cfm": result.total_air_flow_cfm,
            "total_sensible_kw": result.total_sensible_kw,
            "total_latent_kw": result.total_latent_kw,
            "shr": result.shr,
            "storage_factor": result.storage_factor,
            "number_of_floors": result.inputs.number_of_floors,
            "room_humidity": result.inputs.room_humidity,
        }
    if result.room_type == "blast_freezer":
        return {
            "u_factors": {
                "walls": result.u_factors.walls.u_factor,
                "ceiling": result.u_factors.ceiling.u_factor,
                "floor": result.u_factors.floor.u_factor,
            },
            "internal_floor_thickness": result.inputs.internal_floor_thickness,
            "batch_hours": result.product_load.batch_hours,
            "product_heat_kj": asdict(result.product_load.heat_kj),
            "air_change_rate": result.air_change.air_change_rate,
            "air_change_kj_day": result.air_change.kj_day,
            "equipment": asdict(result.equipment),
        }
    raise ValueError(f"Unsupported result room type: {result.room_type!r}")


def build_payload(result) -> dict:
    """JSON-ready report of one load calculation."""
    summary = result.summary
    kw_per_tr = summary.kw_per_tr
    breakdown = [
        {
            "group": c.group,
            "component": c.component,
            "kw": c.kw,
            "tr": kw_to_tr(c.kw, kw_per_tr),
            "kj_day": kw_to_kj_per_day(c.kw),
        }
        for c in result.components()
    ]
    return {
        "room_type": result.room_type,
        "generated_at": _iso_utc_now(),
        "inputs": result.inputs.as_dict(),
        "geometry": asdict(result.geometry),
        "product": asdict(result.product),
        "storage": asdict(result.storage),
        "temperature_difference": result.temperature_difference,
        "breakdown": breakdown,
        "details": _details(result),
        "summary": {
            "total_kw": summary.total_kw,
            "total_tr": summary.total_tr,
            "safety_factor": summary.safety_factor,
            "safety_percentage": summary.safety_percentage,
            "safety_margin_kw": summary.safety_margin_kw,
            "safety_margin_tr": summary.safety_margin_tr,
            "final_kw": summary.final_kw,
            "final_tr": summary.final_tr,
            "btu_hr": summary.btu_hr,
            "daily_energy_kwh": summary.daily_energy_kwh,
        },
    }


def breakdown_frame(result) -> pd.DataFrame:
    """One row per load component, then calculated / safety margin / final rows."""
    summary = result.summary
    kw_per_tr = summary.kw_per_tr
    rows = [(c.group, c.component, c.kw) for c in result.components()]
    rows += [
        ("total", "calculated", summary.total_kw),
        ("total", "safety_margin", summary.safety_margin_kw),
        ("total", "final", summary.final_kw),
    ]
    df = pd.DataFrame(rows, columns=["group", "component", "kw"])
    df["tr"] = df["kw"] / kw_per_tr
    df["kj_day"] = df["kw"].map(kw_to_kj_per_day)
    return df[BREAKDOWN_COLUMNS]


def write_json(payload: dict, path: str | Path) -> Path:
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2) + "\n",
        encoding="utf-8",
    )
    return out_path


def write_csv(frame: pd.DataFrame, path: str | Path) -> Path:
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    frame.to_csv(out_path, index=False, encoding="utf-8")
    return out_path
