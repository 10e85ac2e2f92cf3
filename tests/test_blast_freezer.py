from __future__ import annotations

import pytest

from coolcalc_core.blast_freezer import calc_blast_freezer_load
from coolcalc_core.inputs import BlastFreezerInputs

KW_PER_TR = 3.517


def _calc(catalog, **form):
    return calc_blast_freezer_load(BlastFreezerInputs.from_form(form, catalog), catalog)


def test_default_transmission(catalog) -> None:
    res = _calc(catalog)
    # 5 x 5 x 3.5 m, 43 -> -35 °C, PUF 150 mm everywhere
    assert res.temperature_difference == pytest.approx(78.0)
    assert res.transmission.walls == pytest.approx(0.15 * 70 * 78 / 1000)
    assert res.transmission.ceiling == pytest.approx(0.15 * 25 * 78 / 1000)
    assert res.transmission.floor == pytest.approx(0.15 * 25 * 78 / 1000)
    assert res.tr(res.transmission.walls) == pytest.approx(0.819 / KW_PER_TR)


def test_u_factor_per_surface(catalog) -> None:
    res = _calc(catalog, wallThickness=100, floorThickness=200)
    assert res.u_factors.walls.u_factor == pytest.approx(0.22)
    assert res.u_factors.ceiling.u_factor == pytest.approx(0.15)
    assert res.u_factors.floor.u_factor == pytest.approx(0.11)


def test_frozen_product_only_sensible_below(catalog) -> None:
    res = _calc(catalog)
    # 2000 kg from -5 to -30 °C, already below the -2 °C freezing point
    heat = res.product_load.heat_kj
    assert heat.sensible_above == 0.0
    assert heat.latent == 0.0
    assert heat.sensible_below == pytest.approx(2000 * 1.8 * 25)
    assert res.product_load.sensible_below == pytest.approx(90000 / (8 * 3600))
    assert res.tr(res.product_load.total) == pytest.approx(90000 / (8 * 3600) / KW_PER_TR)


def test_fresh_product_three_stages(catalog) -> None:
    res = _calc(catalog, incomingTemp="10")
    heat = res.product_load.heat_kj
    assert heat.sensible_above == pytest.approx(2000 * 3.5 * 12)
    assert heat.latent == pytest.approx(2000 * 250)
    assert heat.sensible_below == pytest.approx(2000 * 1.8 * 28)


def test_shorter_batch_raises_product_load(catalog) -> None:
    slow = _calc(catalog, batchHours="8")
    fast = _calc(catalog, batchHours="4")
    assert fast.product_load.total == pytest.approx(2 * slow.product_load.total)


def test_air_change(catalog) -> None:
    res = _calc(catalog)
    assert res.air_change.kj_day == pytest.approx(1.0 * 87.5 * 160 * 24)
    assert res.air_change.load == pytest.approx(336000 / 86400)


def test_internal_and_heaters(catalog) -> None:
    res = _calc(catalog)
    assert res.internal.occupancy == pytest.approx(2 * 420 * 4 / (1000 * 24))
    assert res.internal.lighting == pytest.approx(0.1)
    assert res.internal.fan_motor == pytest.approx(0.37)
    assert res.internal.peripheral_heaters == pytest.approx(1.5)
    assert res.internal.door_heaters == pytest.approx(0.27)
    assert res.internal.tray_heaters == pytest.approx(2.2)
    assert res.internal.drain_heaters == pytest.approx(0.04)
    assert res.internal.heaters == pytest.approx(4.01)


def test_heater_quantity_and_hours(catalog) -> None:
    res = _calc(catalog, trayHeatersQty="3", operatingHours="12")
    assert res.internal.tray_heaters == pytest.approx(3 * 2.2 * 12 / 24)


def test_summary_in_tr(catalog) -> None:
    res = _calc(catalog)
    total_kw = sum(c.kw for c in res.components())
    s = res.summary
    assert s.total_kw == pytest.approx(total_kw)
    assert s.total_tr == pytest.approx(total_kw / KW_PER_TR)
    assert s.final_tr == pytest.approx(total_kw * 1.1 / KW_PER_TR)
    assert s.safety_margin_tr == pytest.approx(total_kw * 0.1 / KW_PER_TR)
    assert s.btu_hr == pytest.approx(total_kw * 1.1 * 3412)
    assert s.daily_energy_kwh == pytest.approx(total_kw * 1.1 * 24)


def test_equipment_summary(catalog) -> None:
    eq = _calc(catalog).equipment
    assert eq.fan_kw == pytest.approx(0.37)
    assert eq.heater_kw == pytest.approx(1.5 + 0.27 + 2.2 + 0.04)
    assert eq.lighting_kw == pytest.approx(0.1)
    assert eq.people_kw == pytest.approx(2 * 420 * 4 / (1000 * 24))


def test_storage_from_density(catalog, caplog) -> None:
    res = _calc(catalog)
    assert res.storage.maximum == pytest.approx(87.5 * 4)
    assert res.storage.utilization == pytest.approx(2000 / 350 * 100)
    assert "exceeds" in caplog.text

    roomy = _calc(catalog, storageDensity="100")
    assert roomy.storage.utilization == pytest.approx(2000 / 8750 * 100)


@pytest.mark.parametrize(
    "form,field,expected",
    [
        ({"batchHours": "0"}, "batch_hours", 8.0),
        ({"wallThickness": 0}, "wall_thickness", 150.0),
        ({"internalFloorThickness": "-1"}, "internal_floor_thickness", 150.0),
        ({"breadth": "0"}, "breadth", 5.0),
    ],
)
def test_non_positive_values_use_default(catalog, form, field, expected) -> None:
    res = _calc(catalog, **form)
    assert getattr(res.inputs, field) == pytest.approx(expected)
    assert res.summary.final_tr > 0


def test_zero_heater_quantity_is_kept(catalog) -> None:
    res = _calc(catalog, drainHeatersQty="0")
    assert res.internal.drain_heaters == 0.0
