from __future__ import annotations

import shutil
from pathlib import Path

import pytest
import yaml

from coolcalc_core.catalog import (
    DATA_DIR,
    DATA_DIR_ENV,
    clear_cache,
    load_catalog,
    normalize_room_type,
)


def test_bundled_catalog_loads(catalog) -> None:
    assert "General Food Items" in catalog.products
    assert set(catalog.u_factors) >= {"PUF", "PIR", "XPS", "EPS", "Rockwool"}
    assert catalog.constant("kw_per_tr") == pytest.approx(3.517)
    assert catalog.constant("air_change_rates", "freezer") == pytest.approx(0.5)


def test_catalog_is_cached() -> None:
    assert load_catalog() is load_catalog()


def test_unknown_product_falls_back(catalog, caplog) -> None:
    props = catalog.product("Unobtainium")
    assert props.name == "General Food Items"
    assert "Unobtainium" in caplog.text


def test_unknown_storage_type_falls_back(catalog) -> None:
    assert catalog.storage_factor("Stacked") == pytest.approx(0.85)
    assert catalog.storage_factor("Boxed") == pytest.approx(0.75)


def test_missing_constant_raises(catalog) -> None:
    with pytest.raises(ValueError, match="freezer.nope"):
        catalog.constant("freezer", "nope")


def test_respiration_points(catalog) -> None:
    assert catalog.respiration_points("Apples")[5.0] == pytest.approx(25.0)
    assert catalog.respiration_points("Beef") == {}


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("cold_room", "cold_room"),
        ("coldroom", "cold_room"),
        ("Freezer", "freezer"),
        (" blastfreezer ", "blast_freezer"),
        ("blast-freezer", "blast_freezer"),
    ],
)
def test_normalize_room_type(raw, expected) -> None:
    assert normalize_room_type(raw) == expected


@pytest.mark.parametrize("raw", ["", "walk-in", None])
def test_unknown_room_type(raw) -> None:
    with pytest.raises(ValueError):
        normalize_room_type(raw)


def test_missing_data_file(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="not found"):
        load_catalog(tmp_path)


def test_data_dir_from_environment(tmp_path: Path, monkeypatch) -> None:
    data_dir = tmp_path / "data"
    shutil.copytree(DATA_DIR, data_dir)
    constants_path = data_dir / "constants.yaml"
    constants = yaml.safe_load(constants_path.read_text(encoding="utf-8"))
    constants["safety_factor"] = 1.25
    constants_path.write_text(yaml.safe_dump(constants), encoding="utf-8")

    monkeypatch.setenv(DATA_DIR_ENV, str(data_dir))
    try:
        assert load_catalog().constant("safety_factor") == pytest.approx(1.25)
    finally:
        clear_cache()


def test_non_mapping_data_file(tmp_path: Path) -> None:
    data_dir = tmp_path / "data"
    shutil.copytree(DATA_DIR, data_dir)
    (data_dir / "constants.yaml").write_text("- 1.1\n- 3.517\n", encoding="utf-8")
    with pytest.raises(ValueError, match="must be a mapping"):
        load_catalog(data_dir)
