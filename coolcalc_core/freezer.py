"""
Freezer room (frozen storage).

Product is pulled down through freezing within ``pull_down_time`` hours.
Every component is reported in kW and kJ/day; latent heat (freezing and steam
humidifiers) is tracked separately to give the sensible heat ratio.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from .catalog import Catalog, ProductProperties
from .geometry import RoomGeometry, room_geometry
from .inputs import FreezerInputs
from .loads import (
    ProductHeat,
    SECONDS_PER_HOUR,
    StorageCapacity,
    duty_kw,
    kj_over_hours_to_kw,
    kj_per_day_to_kw,
    kw_to_kj_per_day,
    product_heat_kj,
    storage_capacity,
    transmission_kw,
)
from .summary import LoadComponent, LoadSummary, SurfaceLoads, summarize
from .u_factor import UFactorResolution, resolve_u_factor

logger = logging.getLogger(__name__)

ROOM_TYPE = "freezer"


@dataclass(frozen=True)
class FreezerProductLoad:
    heat_kj: ProductHeat
    sensible_above: float
    latent: float
    sensible_below: float

    @property
    def total(self) -> float:
        return self.sensible_above + self.latent + self.sensible_below


@dataclass(frozen=True)
class AirChangeLoad:
    air_change_rate: float
    air_flow_l_per_s: float
    enthalpy_kj_per_l: float
    load: float

    @property
    def kj_day(self) -> float:
        return kw_to_kj_per_day(self.load)


@dataclass(frozen=True)
class DoorLoad:
    door_clear_opening: float
    heaters_required: bool
    infiltration_kj_day: float
    infiltration: float
    heaters: float

    @property
    def total(self) -> float:
        return self.infiltration + self.heaters


@dataclass(frozen=True)
class FreezerInternalLoads:
    occupancy: float
    lighting: float
    fan_motor: float
    tray_heaters: float
    peripheral_heaters: float
    steam_humidifiers: float
    equipment: float

    @property
    def total(self) -> float:
        return (
            self.occupancy
            + self.lighting
            + self.fan_motor
            + self.tray_heaters
            + self.peripheral_heaters
            + self.steam_humidifiers
            + self.equipment
        )


@dataclass(frozen=True)
class FreezerResult:
    inputs: FreezerInputs
    geometry: RoomGeometry
    wall_u: UFactorResolution
    floor_u: UFactorResolution
    product: ProductProperties
    temperature_difference: float
    storage: StorageCapacity
    storage_factor: float
    total_air_flow_cfm: float
    transmission: SurfaceLoads
    product_load: FreezerProductLoad
    air_change: AirChangeLoad
    door: DoorLoad
    internal: FreezerInternalLoads
    total_sensible_kw: float
    total_latent_kw: float
    shr: float
    summary: LoadSummary

    room_type: str = ROOM_TYPE

    def components(self) -> list[LoadComponent]:
        return [
            LoadComponent("transmission", "walls", self.transmission.walls),
            LoadComponent("transmission", "ceiling", self.transmission.ceiling),
            LoadComponent("transmission", "floor", self.transmission.floor),
            LoadComponent("product", "sensible_above", self.product_load.sensible_above),
            LoadComponent("product", "latent", self.product_load.latent),
            LoadComponent("product", "sensible_below", self.product_load.sensible_below),
            LoadComponent("infiltration", "air_change", self.air_change.load),
            LoadComponent("infiltration", "door_opening", self.door.infiltration),
            LoadComponent("heaters", "door", self.door.heaters),
            LoadComponent("internal", "occupancy", self.internal.occupancy),
            LoadComponent("internal", "lighting", self.internal.lighting),
            LoadComponent("internal", "fan_motor", self.internal.fan_motor),
            LoadComponent("internal", "equipment", self.internal.equipment),
            LoadComponent("heaters", "tray", self.internal.tray_heaters),
            LoadComponent("heaters", "peripheral", self.internal.peripheral_heaters),
            LoadComponent("heaters", "steam_humidifier", self.internal.steam_humidifiers),
        ]


def calc_freezer_load(inputs: FreezerInputs, catalog: Catalog) -> FreezerResult:
    geo = room_geometry(
        inputs.length, inputs.width, inputs.height, inputs.door_width, inputs.door_height
    )
    dt = inputs.external_temp - inputs.internal_temp
    hours = inputs.operating_hours
    consts = catalog.constant(ROOM_TYPE)

    wall_u = resolve_u_factor(catalog, inputs.insulation_type, inputs.insulation_thickness)
    floor_u = resolve_u_factor(catalog, inputs.insulation_type, inputs.internal_floor_thickness)
    transmission = SurfaceLoads(
        walls=transmission_kw(wall_u.u_factor, geo.wall_area, dt),
        ceiling=transmission_kw(wall_u.u_factor, geo.ceiling_area, dt),
        floor=transmission_kw(floor_u.u_factor, geo.floor_area, dt),
    )

    product = catalog.product(inputs.product_type)
    heat = product_heat_kj(
        inputs.daily_load,
        product,
        inputs.incoming_temp,
        inputs.outgoing_temp,
        cp_above=inputs.custom_cp_above,
        cp_below=inputs.custom_cp_below,
        latent_heat=inputs.custom_latent_heat,
    )
    product_load = FreezerProductLoad(
        heat_kj=heat,
        sensible_above=kj_over_hours_to_kw(heat.sensible_above, inputs.pull_down_time),
        latent=kj_over_hours_to_kw(heat.latent, inputs.pull_down_time),
        sensible_below=kj_over_hours_to_kw(heat.sensible_below, inputs.pull_down_time),
    )

    ach = float(catalog.constant("air_change_rates", ROOM_TYPE))
    enthalpy = float(consts["air_enthalpy_kj_per_l"])
    air_flow = geo.volume * ach * 1000.0 / SECONDS_PER_HOUR
    air_change = AirChangeLoad(
        air_change_rate=ach,
        air_flow_l_per_s=air_flow,
        enthalpy_kj_per_l=enthalpy,
        load=air_flow * enthalpy,
    )

    infiltration_kj_day = (
        geo.door_area * float(consts["door_infiltration_kj_per_m2"]) * inputs.door_openings
    )
    door = DoorLoad(
        door_clear_opening=geo.door_area,
        heaters_required=geo.door_area > float(consts["door_heater_threshold_m2"]),
        infiltration_kj_day=infiltration_kj_day,
        infiltration=kj_per_day_to_kw(infiltration_kj_day),
        heaters=duty_kw(inputs.door_heaters_load, hours),
    )

    internal = FreezerInternalLoads(
        occupancy=duty_kw(
            inputs.number_of_people * float(consts["person_heat_kw"]), inputs.working_hours
        ),
        lighting=duty_kw(inputs.lighting_wattage / 1000.0, hours),
        fan_motor=duty_kw(
            inputs.fan_motor_rating * inputs.number_of_fans, inputs.fan_operating_hours
        ),
        tray_heaters=duty_kw(inputs.tray_heaters_load, hours),
        peripheral_heaters=duty_kw(inputs.peripheral_heaters_load, hours),
        steam_humidifiers=duty_kw(inputs.steam_humidifier_load, hours),
        equipment=duty_kw(inputs.equipment_load / 1000.0, hours),
    )

    total_kw = (
        transmission.total
        + product_load.total
        + air_change.load
        + door.total
        + internal.total
    )
    latent_kw = product_load.latent + internal.steam_humidifiers
    sensible_kw = total_kw - latent_kw
    shr = sensible_kw / total_kw if total_kw > 0 else 1.0
    summary = summarize(total_kw, catalog)

    factor = catalog.storage_factor(inputs.storage_type)
    storage = storage_capacity(
        geo.volume * product.density * product.storage_efficiency * factor,
        inputs.daily_load,
    )
    if door.heaters_required and inputs.door_heaters_load <= 0:
        logger.warning(
            "Door opening %.2f m2 needs door heaters but door heater load is 0",
            geo.door_area,
        )

    logger.info(
        "Freezer %.1f m3 dT=%.1f: total %.3f kW, final %.3f kW (%.2f TR), SHR %.3f",
        geo.volume,
        dt,
        total_kw,
        summary.final_kw,
        summary.final_tr,
        shr,
    )
    return FreezerResult(
        inputs=inputs,
        geometry=geo,
        wall_u=wall_u,
        floor_u=floor_u,
        product=product,
        temperature_difference=dt,
        storage=storage,
        storage_factor=factor,
        total_air_flow_cfm=inputs.number_of_fans * inputs.air_flow_per_fan,
        transmission=transmission,
        product_load=product_load,
        air_change=air_change,
        door=door,
        internal=internal,
        total_sensible_kw=sensible_kw,
        total_latent_kw=latent_kw,
        shr=shr,
        summary=summary,
    )
