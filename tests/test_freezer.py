from __future__ import annotations

from dataclasses import replace

import pytest

from coolcalc_core.freezer import calc_freezer_load
from coolcalc_core.inputs import FreezerInputs


def _calc(catalog, **form):
    return calc_freezer_load(FreezerInputs.from_form(form, catalog), catalog)


def test_default_freezer_transmission(catalog) -> None:
    res = _calc(catalog)
    # 4 x 3 x 2.5 m, PUF 150 mm, 35 -> -18 °C
    assert res.temperature_difference == pytest.approx(53.0)
    assert res.wall_u.u_factor == pytest.approx(0.15)
    assert res.transmission.walls == pytest.approx(0.15 * 35 * 53 / 1000)
    assert res.transmission.ceiling == pytest.approx(0.15 * 12 * 53 / 1000)
    assert res.transmission.floor == pytest.approx(0.15 * 12 * 53 / 1000)


def test_floor_uses_internal_floor_thickness(catalog) -> None:
    res = _calc(catalog, internalFloorThickness="100")
    assert res.wall_u.u_factor == pytest.approx(0.15)
    assert res.floor_u.u_factor == pytest.approx(0.22)
    assert res.transmission.floor == pytest.approx(0.22 * 12 * 53 / 1000)


def test_three_stage_product_load(catalog) -> None:
    res = _calc(catalog)
    seconds = 10 * 3600
    assert res.product_load.sensible_above == pytest.approx(1000 * 3.5 * 27 / seconds)
    assert res.product_load.latent == pytest.approx(1000 * 250 / seconds)
    assert res.product_load.sensible_below == pytest.approx(1000 * 1.8 * 16 / seconds)


def test_advanced_product_overrides(catalog) -> None:
    res = _calc(catalog, customLatentHeat="300", customCpBelow="2.0")
    seconds = 10 * 3600
    assert res.product_load.latent == pytest.approx(300000 / seconds)
    assert res.product_load.sensible_below == pytest.approx(1000 * 2.0 * 16 / seconds)
    assert res.product_load.sensible_above == pytest.approx(1000 * 3.5 * 27 / seconds)


def test_air_change_and_door(catalog) -> None:
    res = _calc(catalog)
    assert res.air_change.air_flow_l_per_s == pytest.approx(30 * 0.5 * 1000 / 3600)
    assert res.air_change.load == pytest.approx(30 * 0.5 * 1000 / 3600 * 0.1203)

    assert res.door.infiltration_kj_day == pytest.approx(2.0 * 1800 * 15)
    assert res.door.infiltration == pytest.approx(54000 / 86400)
    assert res.door.heaters == pytest.approx(0.24)
    assert res.door.heaters_required is True


def test_small_door_needs_no_heaters(catalog) -> None:
    res = _calc(catalog, doorWidth="1.0", doorHeight="1.5")
    assert res.door.heaters_required is False
    # heater input still counts when given
    assert res.door.heaters == pytest.approx(0.24)


def test_internal_loads(catalog) -> None:
    res = _calc(catalog, steamHumidifierLoad="1.2", peripheralHeatersLoad="0.6")
    assert res.internal.occupancy == pytest.approx(2 * 0.407 * 4 / 24)
    assert res.internal.lighting == pytest.approx(0.15)
    assert res.internal.fan_motor == pytest.approx(0.37 * 6)
    assert res.internal.tray_heaters == pytest.approx(2.0)
    assert res.internal.peripheral_heaters == pytest.approx(0.6)
    assert res.internal.steam_humidifiers == pytest.approx(1.2)
    assert res.internal.equipment == pytest.approx(0.3)


def test_fan_hours_scale_fan_load(catalog) -> None:
    res = _calc(catalog, fanOperatingHours="12")
    assert res.internal.fan_motor == pytest.approx(0.37 * 6 * 12 / 24)


def test_latent_split_and_shr(catalog) -> None:
    res = _calc(catalog, steamHumidifierLoad="1.2")
    total = sum(c.kw for c in res.components())
    latent = 1000 * 250 / 36000 + 1.2
    assert res.summary.total_kw == pytest.approx(total)
    assert res.total_latent_kw == pytest.approx(latent)
    assert res.total_sensible_kw == pytest.approx(total - latent)
    assert res.shr == pytest.approx((total - latent) / total)
    assert 0.0 < res.shr < 1.0


def test_shr_is_one_without_load(catalog) -> None:
    form = {
        "externalTemp": "-18",
        "dailyLoad": "0",
        "doorOpenings": "0",
        "numberOfPeople": "0",
        "lightingWattage": "0",
        "equipmentLoad": "0",
        "numberOfFans": "0",
        "doorHeatersLoad": "0",
        "trayHeatersLoad": "0",
    }
    # an empty room has no air to change
    inputs = replace(FreezerInputs.from_form(form, catalog), length=0.0)
    res = calc_freezer_load(inputs, catalog)
    assert res.summary.total_kw == pytest.approx(0.0)
    assert res.shr == 1.0


def test_airflow_and_storage(catalog) -> None:
    res = _calc(catalog)
    assert res.total_air_flow_cfm == pytest.approx(12000.0)
    maximum = 30 * 600 * 0.70 * 0.75
    assert res.storage.maximum == pytest.approx(maximum)
    assert res.storage.utilization == pytest.approx(1000 / maximum * 100)


def test_zero_floor_thickness_uses_default(catalog) -> None:
    res = _calc(catalog, internalFloorThickness="0", pullDownTime="-2")
    assert res.inputs.internal_floor_thickness == pytest.approx(150.0)
    assert res.inputs.pull_down_time == pytest.approx(10.0)
    assert res.floor_u.u_factor == pytest.approx(0.15)


def test_zero_counts_where_it_means_none(catalog) -> None:
    res = _calc(catalog, numberOfPeople="0", numberOfFans="0", trayHeatersLoad="0")
    assert res.internal.occupancy == 0.0
    assert res.internal.fan_motor == 0.0
    assert res.internal.tray_heaters == 0.0


def test_missing_door_heaters_warns(catalog, caplog) -> None:
    res = _calc(catalog, doorHeatersLoad="0")
    assert res.door.heaters_required is True
    assert res.door.heaters == 0.0
    assert "needs door heaters" in caplog.text


def test_small_door_without_heaters_does_not_warn(catalog, caplog) -> None:
    _calc(catalog, doorWidth="1.0", doorHeight="1.5", doorHeatersLoad="0")
    assert "needs door heaters" not in caplog.text
