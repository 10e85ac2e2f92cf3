"""Load formulas shared by all room types."""
from __future__ import annotations

from dataclasses import dataclass

from .catalog import ProductProperties

SECONDS_PER_HOUR = 3600.0
SECONDS_PER_DAY = 86400.0


@dataclass(frozen=True)
class ProductHeat:
    """Heat removed from the product, kJ, split by stage."""

    sensible_above: float
    latent: float
    sensible_below: float

    @property
    def total(self) -> float:
        return self.sensible_above + self.latent + self.sensible_below


@dataclass(frozen=True)
class StorageCapacity:
    maximum: float
    utilization: float


def transmission_kw(u_factor: float, area_m2: float, dt: float) -> float:
    return u_factor * area_m2 * dt / 1000.0


def product_heat_kj(
    mass_kg: float,
    props: ProductProperties,
    incoming_temp: float,
    outgoing_temp: float,
    *,
    cp_above: float | None = None,
    cp_below: float | None = None,
    latent_heat: float | None = None,
) -> ProductHeat:
    cp_a = props.specific_heat_above if cp_above is None else cp_above
    cp_b = props.specific_heat_below if cp_below is None else cp_below
    lat = props.latent_heat if latent_heat is None else latent_heat
    tf = props.freezing_point

    above = 0.0
    latent = 0.0
    below = 0.0
    if incoming_temp > tf:
        above = mass_kg * cp_a * (incoming_temp - max(outgoing_temp, tf))
        if outgoing_temp < tf:
            latent = mass_kg * lat
    if outgoing_temp < tf:
        below = mass_kg * cp_b * (min(incoming_temp, tf) - outgoing_temp)
    return ProductHeat(
        sensible_above=max(above, 0.0),
        latent=latent,
        sensible_below=max(below, 0.0),
    )


def sensible_heat_kj(mass_kg: float, cp: float, dt: float) -> float:
    return mass_kg * cp * dt


def kj_over_hours_to_kw(kj: float, hours: float) -> float:
    if hours <= 0:
        raise ValueError("hours must be positive")
    return kj / (hours * SECONDS_PER_HOUR)


def kj_per_day_to_kw(kj_day: float) -> float:
    return kj_day / SECONDS_PER_DAY


def kw_to_kj_per_day(kw: float) -> float:
    return kw * SECONDS_PER_DAY


def duty_kw(power_kw: float, hours: float) -> float:
    """Average load over a day of a device running ``hours`` per day."""
    return power_kw * hours / 24.0


def kw_to_tr(kw: float, kw_per_tr: float) -> float:
    return kw / kw_per_tr


def kw_to_btu_hr(kw: float, btu_hr_per_kw: float) -> float:
    return kw * btu_hr_per_kw


def apply_safety_factor(total: float, factor: float) -> tuple[float, float]:
    if factor < 1.0:
        raise ValueError("safety factor must be >= 1")
    final = total * factor
    return final, final - total


def storage_capacity(maximum: float, stored: float) -> StorageCapacity:
    utilization = (stored / maximum) * 100.0 if maximum > 0 else 0.0
    return StorageCapacity(maximum=maximum, utilization=utilization)
