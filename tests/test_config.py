"""Tests for loading the vehicle presets."""

from pathlib import Path

import pytest

from ev_engine.config import load_presets
from ev_engine.core.analysis import analyse_vehicle
from ev_engine.core.vehicle import VehicleSpec


def test_default_presets_load() -> None:
    """The shipped preset file loads into VehicleSpec objects."""
    presets = load_presets()
    assert set(presets) >= {"regular", "sport", "suv"}
    for spec in presets.values():
        assert isinstance(spec, VehicleSpec)
        assert spec.name


def test_regular_preset_is_reference_car() -> None:
    """The regular preset matches the reference specification."""
    regular = load_presets()["regular"]
    assert regular == VehicleSpec(name="Regular Car")


def test_presets_analyse_cleanly() -> None:
    """Every preset produces a score in range."""
    for spec in load_presets().values():
        assert 0 <= analyse_vehicle(spec).feasibility.score <= 100


def test_missing_file(tmp_path: Path) -> None:
    """A missing preset file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_presets(tmp_path / "nope.yaml")


def _write(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "presets.yaml"
    path.write_text(body, encoding="utf-8")
    return path


_VALID_ENTRY = """
presets:
  test:
    name: Test
    mass: 1500
    additional_weight: 75
    top_speed: 180
    acceleration_0_to_100: 8.5
    range_km: 400
    tire_radius: 0.32
    drag_coefficient: 0.28
    frontal_area: 2.3
    terrain_type: mixed
    auxiliary_load: normal
"""


def test_custom_file(tmp_path: Path) -> None:
    """A valid custom file is loaded."""
    presets = load_presets(_write(tmp_path, _VALID_ENTRY))
    assert list(presets) == ["test"]
    assert presets["test"].total_mass == 1575.0


def test_missing_field(tmp_path: Path) -> None:
    """Entries without a required field are rejected."""
    body = _VALID_ENTRY.replace("    frontal_area: 2.3\n", "")
    with pytest.raises(ValueError, match="missing required field 'frontal_area'"):
        load_presets(_write(tmp_path, body))


def test_non_numeric_field(tmp_path: Path) -> None:
    """Numeric fields must be numbers."""
    body = _VALID_ENTRY.replace("mass: 1500", "mass: heavy")
    with pytest.raises(ValueError, match="'mass' must be numeric"):
        load_presets(_write(tmp_path, body))


def test_unknown_terrain_rejected(tmp_path: Path) -> None:
    """Preset files must name a known terrain."""
    body = _VALID_ENTRY.replace("terrain_type: mixed", "terrain_type: swamp")
    with pytest.raises(ValueError, match="'terrain_type' must be one of"):
        load_presets(_write(tmp_path, body))


def test_out_of_domain_value(tmp_path: Path) -> None:
    """Spec validation errors are reported with the preset id."""
    body = _VALID_ENTRY.replace("tire_radius: 0.32", "tire_radius: 0")
    with pytest.raises(ValueError, match="Preset 'test': tire_radius must be > 0"):
        load_presets(_write(tmp_path, body))


def test_empty_file(tmp_path: Path) -> None:
    """A file without presets is rejected."""
    with pytest.raises(ValueError, match="non-empty 'presets'"):
        load_presets(_write(tmp_path, ""))


def test_entry_not_a_mapping(tmp_path: Path) -> None:
    """A preset id without a body is rejected with ValueError."""
    body = _VALID_ENTRY + "  empty:\n"
    with pytest.raises(ValueError, match="Preset 'empty' must be a mapping"):
        load_presets(_write(tmp_path, body))


def test_out_of_range_value(tmp_path: Path) -> None:
    """Unphysical preset values are rejected with the preset id."""
    body = _VALID_ENTRY.replace("mass: 1500", "mass: 1.0e+308")
    with pytest.raises(ValueError, match="Preset 'test': mass must be between"):
        load_presets(_write(tmp_path, body))
