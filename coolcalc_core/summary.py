from __future__ import annotations

from dataclasses import dataclass

from .catalog import Catalog
from .loads import apply_safety_factor, kw_to_btu_hr, kw_to_tr


@dataclass(frozen=True)
class LoadComponent:
    group: str
    component: str
    kw: float


@dataclass(frozen=True)
class SurfaceLoads:
    walls: float
    ceiling: float
    floor: float

    @property
    def total(self) -> float:
        return self.walls + self.ceiling + self.floor


@dataclass(frozen=True)
class LoadSummary:
    total_kw: float
    safety_factor: float
    safety_margin_kw: float
    final_kw: float
    final_tr: float
    btu_hr: float
    daily_energy_kwh: float
    kw_per_tr: float

    @property
    def total_tr(self) -> float:
        return kw_to_tr(self.total_kw, self.kw_per_tr)

    @property
    def safety_margin_tr(self) -> float:
        return kw_to_tr(self.safety_margin_kw, self.kw_per_tr)

    @property
    def safety_percentage(self) -> float:
        return (self.safety_factor - 1.0) * 100.0


def summarize(total_kw: float, catalog: Catalog) -> LoadSummary:
    factor = float(catalog.constant("safety_factor"))
    kw_per_tr = float(catalog.constant("kw_per_tr"))
    final_kw, margin = apply_safety_factor(total_kw, factor)
    return LoadSummary(
        total_kw=total_kw,
        safety_factor=factor,
        safety_margin_kw=margin,
        final_kw=final_kw,
        final_tr=kw_to_tr(final_kw, kw_per_tr),
        btu_hr=kw_to_btu_hr(final_kw, float(catalog.constant("btu_hr_per_kw"))),
        daily_energy_kwh=final_kw * 24.0,
        kw_per_tr=kw_per_tr,
    )
