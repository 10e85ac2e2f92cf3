from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from .catalog import Catalog

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UFactorResolution:
    insulation_type: str
    thickness_input: float
    thickness_clamped: float
    u_factor: float
    fallback: bool = False

    thickness_lo: float | None = None
    thickness_hi: float | None = None
    u_lo: float | None = None
    u_hi: float | None = None


def _clamp(value: float, lo: float, hi: float) -> float:
    if value < lo:
        return lo
    if value > hi:
        return hi
    return value


def resolve_u_factor(
    catalog: Catalog,
    insulation_type: str,
    thickness_mm: float,
    *,
    eps: float = 1e-9,
) -> UFactorResolution:
    """
    Resolve panel U (W/m²·K) for an insulation type and thickness.

    Rules:
    - unknown insulation type -> catalog fallback U
    - thickness clamped into the table range of the type
    - exact column -> table value, otherwise linear interpolation by thickness
    """
    if not isinstance(thickness_mm, (int, float)) or isinstance(thickness_mm, bool):
        raise TypeError("thickness_mm must be a number")
    thickness = float(thickness_mm)
    if math.isnan(thickness) or math.isinf(thickness):
        raise ValueError("thickness_mm must be finite")
    if thickness <= 0:
        raise ValueError("thickness_mm must be positive")

    table = catalog.u_factors.get(insulation_type)
    if not table:
        logger.warning(
            "No U-factor table for insulation %r, using fallback U=%s",
            insulation_type,
            catalog.fallback_u,
        )
        return UFactorResolution(
            insulation_type=insulation_type,
            thickness_input=thickness,
            thickness_clamped=thickness,
            u_factor=catalog.fallback_u,
            fallback=True,
        )

    pts = sorted(table.items())
    clamped = _clamp(thickness, pts[0][0], pts[-1][0])

    for col, u_val in pts:
        if abs(col - clamped) <= eps:
            return UFactorResolution(
                insulation_type=insulation_type,
                thickness_input=thickness,
                thickness_clamped=clamped,
                u_factor=u_val,
            )

    lo = None
    for col, u_val in pts:
        if col < clamped:
            lo = (col, u_val)
        else:
            break
    hi = next(((col, u_val) for col, u_val in pts if col > clamped), None)
    if lo is None or hi is None:
        raise ValueError(
            f"Cannot interpolate U for {insulation_type} at {clamped} mm; "
            "table does not contain bounding thickness columns"
        )

    (t_lo, u_lo), (t_hi, u_hi) = lo, hi
    u = u_lo + ((clamped - t_lo) / (t_hi - t_lo)) * (u_hi - u_lo)
    return UFactorResolution(
        insulation_type=insulation_type,
        thickness_input=thickness,
        thickness_clamped=clamped,
        u_factor=float(u),
        thickness_lo=t_lo,
        thickness_hi=t_hi,
        u_lo=u_lo,
        u_hi=u_hi,
    )


def get_u_factor(catalog: Catalog, insulation_type: str, thickness_mm: float) -> float:
    return resolve_u_factor(catalog, insulation_type, thickness_mm).u_factor
