"""
Blast freezer.

A batch of product is frozen within ``batch_hours``; results are reported in
TR as well as kW. U-factors are resolved per surface so walls, ceiling and
floor may carry different insulation thicknesses.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from .catalog import Catalog, ProductProperties
from .geometry import RoomGeometry, room_geometry
from .inputs import BlastFreezerInputs
from .loads import (
    ProductHeat,
    StorageCapacity,
    duty_kw,
    kj_over_hours_to_kw,
    kj_per_day_to_kw,
    kw_to_tr,
    product_heat_kj,
    storage_capacity,
    transmission_kw,
)
from .summary import LoadComponent, LoadSummary, SurfaceLoads, summarize
from .u_factor import UFactorResolution, resolve_u_factor

logger = logging.getLogger(__name__)

ROOM_TYPE = "blast_freezer"


@dataclass(frozen=True)
class SurfaceUFactors:
    walls: UFactorResolution
    ceiling: UFactorResolution
    floor: UFactorResolution


@dataclass(frozen=True)
class BatchProductLoad:
    """Product heat per batch (kJ) and its average load over the batch (kW)."""

    heat_kj: ProductHeat
    batch_hours: float
    sensible_above: float
    latent: float
    sensible_below: float

    @property
    def total(self) -> float:
        return self.sensible_above + self.latent + self.sensible_below


@dataclass(frozen=True)
class BlastAirChange:
    air_change_rate: float
    enthalpy_kj_per_m3: float
    kj_day: float
    load: float


@dataclass(frozen=True)
class BlastInternalLoads:
    occupancy: float
    lighting: float
    fan_motor: float
    peripheral_heaters: float
    door_heaters: float
    tray_heaters: float
    drain_heaters: float

    @property
    def heaters(self) -> float:
        return (
            self.peripheral_heaters
            + self.door_heaters
            + self.tray_heaters
            + self.drain_heaters
        )

    @property
    def total(self) -> float:
        return self.occupancy + self.lighting + self.fan_motor + self.heaters


@dataclass(frozen=True)
class EquipmentSummary:
    """Connected ratings in kW (people as a daily average)."""

    fan_kw: float
    heater_kw: float
    lighting_kw: float
    people_kw: float


@dataclass(frozen=True)
class BlastFreezerResult:
    inputs: BlastFreezerInputs
    geometry: RoomGeometry
    u_factors: SurfaceUFactors
    product: ProductProperties
    temperature_difference: float
    storage: StorageCapacity
    transmission: SurfaceLoads
    product_load: BatchProductLoad
    air_change: BlastAirChange
    internal: BlastInternalLoads
    equipment: EquipmentSummary
    summary: LoadSummary

    room_type: str = ROOM_TYPE

    def tr(self, kw: float) -> float:
        return kw_to_tr(kw, self.summary.kw_per_tr)

    def components(self) -> list[LoadComponent]:
        return [
            LoadComponent("transmission", "walls", self.transmission.walls),
            LoadComponent("transmission", "ceiling", self.transmission.ceiling),
            LoadComponent("transmission", "floor", self.transmission.floor),
            LoadComponent("product", "sensible_above", self.product_load.sensible_above),
            LoadComponent("product", "latent", self.product_load.latent),
            LoadComponent("product", "sensible_below", self.product_load.sensible_below),
            LoadComponent("infiltration", "air_change", self.air_change.load),
            LoadComponent("internal", "occupancy", self.internal.occupancy),
            LoadComponent("internal", "lighting", self.internal.lighting),
            LoadComponent("internal", "fan_motor", self.internal.fan_motor),
            LoadComponent("heaters", "peripheral", self.internal.peripheral_heaters),
            LoadComponent("heaters", "door", self.internal.door_heaters),
            LoadComponent("heaters", "tray", self.internal.tray_heaters),
            LoadComponent("heaters", "drain", self.internal.drain_heaters),
        ]


def _heater_kw(qty: float, capacity_kw: float, hours: float) -> float:
    return duty_kw(qty * capacity_kw, hours)


def calc_blast_freezer_load(inputs: BlastFreezerInputs, catalog: Catalog) -> BlastFreezerResult:
    geo = room_geometry(
        inputs.length, inputs.breadth, inputs.height, inputs.door_width, inputs.door_height
    )
    dt = inputs.ambient_temp - inputs.room_temp
    hours = inputs.operating_hours
    consts = catalog.constant(ROOM_TYPE)
    kw_per_tr = float(catalog.constant("kw_per_tr"))

    u_factors = SurfaceUFactors(
        walls=resolve_u_factor(catalog, inputs.insulation_type, inputs.wall_thickness),
        ceiling=resolve_u_factor(catalog, inputs.insulation_type, inputs.ceiling_thickness),
        floor=resolve_u_factor(catalog, inputs.insulation_type, inputs.floor_thickness),
    )
    transmission = SurfaceLoads(
        walls=transmission_kw(u_factors.walls.u_factor, geo.wall_area, dt),
        ceiling=transmission_kw(u_factors.ceiling.u_factor, geo.ceiling_area, dt),
        floor=transmission_kw(u_factors.floor.u_factor, geo.floor_area, dt),
    )

    product = catalog.product(inputs.product_type)
    heat = product_heat_kj(
        inputs.capacity_required, product, inputs.incoming_temp, inputs.outgoing_temp
    )
    product_load = BatchProductLoad(
        heat_kj=heat,
        batch_hours=inputs.batch_hours,
        sensible_above=kj_over_hours_to_kw(heat.sensible_above, inputs.batch_hours),
        latent=kj_over_hours_to_kw(heat.latent, inputs.batch_hours),
        sensible_below=kj_over_hours_to_kw(heat.sensible_below, inputs.batch_hours),
    )

    ach = float(catalog.constant("air_change_rates", ROOM_TYPE))
    enthalpy = float(consts["air_enthalpy_kj_per_m3"])
    air_kj_day = ach * geo.volume * enthalpy * hours
    air_change = BlastAirChange(
        air_change_rate=ach,
        enthalpy_kj_per_m3=enthalpy,
        kj_day=air_kj_day,
        load=kj_per_day_to_kw(air_kj_day),
    )

    person_kw = float(consts["person_heat_w"]) / 1000.0
    internal = BlastInternalLoads(
        occupancy=duty_kw(inputs.number_of_people * person_kw, inputs.working_hours),
        lighting=duty_kw(inputs.light_load, hours),
        fan_motor=duty_kw(inputs.fan_motor_rating, hours),
        peripheral_heaters=_heater_kw(
            inputs.peripheral_heaters_qty, inputs.peripheral_heaters_capacity, hours
        ),
        door_heaters=_heater_kw(inputs.door_heaters_qty, inputs.door_heaters_capacity, hours),
        tray_heaters=_heater_kw(inputs.tray_heaters_qty, inputs.tray_heaters_capacity, hours),
        drain_heaters=_heater_kw(inputs.drain_heaters_qty, inputs.drain_heaters_capacity, hours),
    )
    equipment = EquipmentSummary(
        fan_kw=inputs.fan_motor_rating,
        heater_kw=(
            inputs.peripheral_heaters_qty * inputs.peripheral_heaters_capacity
            + inputs.door_heaters_qty * inputs.door_heaters_capacity
            + inputs.tray_heaters_qty * inputs.tray_heaters_capacity
            + inputs.drain_heaters_qty * inputs.drain_heaters_capacity
        ),
        lighting_kw=inputs.light_load,
        people_kw=internal.occupancy,
    )

    total_kw = transmission.total + product_load.total + air_change.load + internal.total
    summary = summarize(total_kw, catalog)
    storage = storage_capacity(geo.volume * inputs.storage_density, inputs.capacity_required)
    if storage.maximum > 0 and storage.utilization > 100.0:
        logger.warning(
            "Batch of %.0f kg exceeds blast freezer capacity of %.0f kg",
            inputs.capacity_required,
            storage.maximum,
        )

    logger.info(
        "Blast freezer %.1f m3 dT=%.1f batch=%.1fh: total %.3f TR, final %.3f TR (%.3f kW)",
        geo.volume,
        dt,
        inputs.batch_hours,
        kw_to_tr(total_kw, kw_per_tr),
        summary.final_tr,
        summary.final_kw,
    )
    return BlastFreezerResult(
        inputs=inputs,
        geometry=geo,
        u_factors=u_factors,
        product=product,
        temperature_difference=dt,
        storage=storage,
        transmission=transmission,
        product_load=product_load,
        air_change=air_change,
        internal=internal,
        equipment=equipment,
        summary=summary,
    )
