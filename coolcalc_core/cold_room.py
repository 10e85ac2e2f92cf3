"""
Cold room (chilled storage, above freezing).

All loads are average kW over a day. The product is only cooled, never
frozen, so the product load is sensible heat above freezing; fresh produce
adds heat of respiration.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from .catalog import Catalog, ProductProperties
from .geometry import RoomGeometry, room_geometry
from .inputs import ColdRoomInputs
from .loads import (
    StorageCapacity,
    SECONDS_PER_HOUR,
    duty_kw,
    kj_over_hours_to_kw,
    sensible_heat_kj,
    storage_capacity,
    transmission_kw,
)
from .respiration import respiration_factor, respiration_load_kw
from .summary import LoadComponent, LoadSummary, SurfaceLoads, summarize
from .u_factor import UFactorResolution, resolve_u_factor

logger = logging.getLogger(__name__)

ROOM_TYPE = "cold_room"


@dataclass(frozen=True)
class MiscLoads:
    occupancy: float
    lighting: float
    equipment: float

    @property
    def total(self) -> float:
        return self.occupancy + self.lighting + self.equipment


@dataclass(frozen=True)
class HeaterLoads:
    peripheral: float
    tray: float

    @property
    def total(self) -> float:
        return self.peripheral + self.tray


@dataclass(frozen=True)
class ColdRoomResult:
    inputs: ColdRoomInputs
    geometry: RoomGeometry
    u_factor: UFactorResolution
    product: ProductProperties
    temperature_difference: float
    storage: StorageCapacity
    storage_factor: float
    respiration_factor: float
    air_change_rate: float
    transmission: SurfaceLoads
    product_kw: float
    respiration_kw: float
    air_change_kw: float
    door_kw: float
    misc: MiscLoads
    heaters: HeaterLoads
    summary: LoadSummary

    room_type: str = ROOM_TYPE

    def components(self) -> list[LoadComponent]:
        return [
            LoadComponent("transmission", "walls", self.transmission.walls),
            LoadComponent("transmission", "ceiling", self.transmission.ceiling),
            LoadComponent("transmission", "floor", self.transmission.floor),
            LoadComponent("product", "sensible", self.product_kw),
            LoadComponent("product", "respiration", self.respiration_kw),
            LoadComponent("infiltration", "air_change", self.air_change_kw),
            LoadComponent("infiltration", "door_opening", self.door_kw),
            LoadComponent("internal", "occupancy", self.misc.occupancy),
            LoadComponent("internal", "lighting", self.misc.lighting),
            LoadComponent("internal", "equipment", self.misc.equipment),
            LoadComponent("heaters", "peripheral", self.heaters.peripheral),
            LoadComponent("heaters", "tray", self.heaters.tray),
        ]


def calc_cold_room_load(inputs: ColdRoomInputs, catalog: Catalog) -> ColdRoomResult:
    geo = room_geometry(
        inputs.length, inputs.width, inputs.height, inputs.door_width, inputs.door_height
    )
    dt = inputs.external_temp - inputs.internal_temp
    hours = inputs.operating_hours
    consts = catalog.constant(ROOM_TYPE)

    u_res = resolve_u_factor(catalog, inputs.insulation_type, inputs.insulation_thickness)
    u = u_res.u_factor
    transmission = SurfaceLoads(
        walls=transmission_kw(u, geo.wall_area, dt),
        ceiling=transmission_kw(u, geo.ceiling_area, dt),
        floor=transmission_kw(u, geo.floor_area, dt),
    )

    product = catalog.product(inputs.product_type)
    product_dt = max(inputs.incoming_temp - inputs.outgoing_temp, 0.0)
    product_kj = sensible_heat_kj(inputs.daily_load, product.specific_heat_above, product_dt)
    product_kw = kj_over_hours_to_kw(product_kj, inputs.pull_down_time)

    resp_factor = respiration_factor(
        catalog.respiration_points(inputs.product_type), inputs.internal_temp
    )
    respiration_kw = respiration_load_kw(inputs.daily_load, resp_factor)

    ach = float(catalog.constant("air_change_rates", ROOM_TYPE))
    air_mass_kg_h = geo.volume * float(catalog.constant("air_density")) * ach
    enthalpy_kj_kg = float(catalog.constant("air_specific_heat")) * dt
    air_change_kw = air_mass_kg_h * enthalpy_kj_kg / SECONDS_PER_HOUR

    open_fraction = inputs.door_openings / 100.0
    door_w = geo.door_area * dt * float(consts["door_heater_w_per_m2_k"]) * open_fraction
    door_kw = duty_kw(door_w / 1000.0, hours)

    misc = MiscLoads(
        occupancy=duty_kw(
            inputs.number_of_people * float(consts["person_heat_kw"]), inputs.working_hours
        ),
        lighting=duty_kw(inputs.lighting_wattage / 1000.0, hours),
        equipment=duty_kw(inputs.equipment_load / 1000.0, hours),
    )
    heaters = HeaterLoads(
        peripheral=duty_kw(
            geo.door_area * float(consts["peripheral_heater_w_per_m2"]) / 1000.0, hours
        ),
        tray=duty_kw(float(consts["tray_heater_w"]) / 1000.0, hours),
    )

    total_kw = (
        transmission.total
        + product_kw
        + respiration_kw
        + air_change_kw
        + door_kw
        + misc.total
        + heaters.total
    )
    summary = summarize(total_kw, catalog)

    factor = catalog.storage_factor(inputs.storage_type)
    storage = storage_capacity(
        geo.volume * product.density * product.storage_efficiency * factor,
        inputs.daily_load,
    )

    logger.info(
        "Cold room %.1f m3 dT=%.1f: total %.3f kW, final %.3f kW (%.2f TR)",
        geo.volume,
        dt,
        total_kw,
        summary.final_kw,
        summary.final_tr,
    )
    return ColdRoomResult(
        inputs=inputs,
        geometry=geo,
        u_factor=u_res,
        product=product,
        temperature_difference=dt,
        storage=storage,
        storage_factor=factor,
        respiration_factor=resp_factor,
        air_change_rate=ach,
        transmission=transmission,
        product_kw=product_kw,
        respiration_kw=respiration_kw,
        air_change_kw=air_change_kw,
        door_kw=door_kw,
        misc=misc,
        heaters=heaters,
        summary=summary,
    )
