"""Preset loader for the EV performance engine."""

import logging
from pathlib import Path

import yaml

from ev_engine.core.constants import AuxiliaryLoad, TerrainType
from ev_engine.core.vehicle import VehicleSpec

logger = logging.getLogger(__name__)

DATA_DIR: Path = Path(__file__).resolve().parent.parent / "data"
PRESETS_PATH: Path = DATA_DIR / "vehicle_presets.yaml"

_NUMERIC_FIELDS: tuple[str, ...] = (
    "mass",
    "additional_weight",
    "top_speed",
    "acceleration_0_to_100",
    "range_km",
    "tire_radius",
    "drag_coefficient",
    "frontal_area",
)

_REQUIRED_FIELDS: tuple[str, ...] = ("name",) + _NUMERIC_FIELDS + (
    "terrain_type",
    "auxiliary_load",
)

_ENUM_FIELDS: dict[str, type] = {
    "terrain_type": TerrainType,
    "auxiliary_load": AuxiliaryLoad,
}


def load_presets(path: Path | None = None) -> dict[str, VehicleSpec]:
    """Load the reference vehicle presets from a YAML file.

    Unlike interactive input, preset files are checked strictly: unknown
    terrain or auxiliary-load values are rejected instead of falling back
    to a default.

    Args:
        path: Optional override for the preset file path.

    Returns:
        Mapping from preset id to :class:`VehicleSpec`, in file order.

    Raises:
        FileNotFoundError: If the preset file does not exist.
        ValueError: If any preset is missing fields or has invalid values.
    """
    presets_path = path or PRESETS_PATH
    if not presets_path.exists():
        raise FileNotFoundError(f"Preset file not found: {presets_path}")

    with open(presets_path, encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}

    entries = data.get("presets")
    if not isinstance(entries, dict) or not entries:
        raise ValueError(f"{presets_path} must define a non-empty 'presets' mapping")

    presets: dict[str, VehicleSpec] = {}
    for key, entry in entries.items():
        if not isinstance(entry, dict):
            raise ValueError(
                f"Preset '{key}' must be a mapping, got {type(entry).__name__}"
            )

        # --- Validate required fields ---
        for field in _REQUIRED_FIELDS:
            if field not in entry:
                raise ValueError(
                    f"Preset '{key}' is missing required field '{field}'"
                )

        # --- Validate numeric fields ---
        for field in _NUMERIC_FIELDS:
            val = entry[field]
            if isinstance(val, bool) or not isinstance(val, (int, float)):
                raise ValueError(
                    f"Preset '{key}': '{field}' must be numeric, "
                    f"got {type(val).__name__}"
                )

        # --- Validate enum fields ---
        for field, enum_type in _ENUM_FIELDS.items():
            allowed = [member.value for member in enum_type]
            if entry[field] not in allowed:
                raise ValueError(
                    f"Preset '{key}': '{field}' must be one of {allowed}, "
                    f"got {entry[field]!r}"
                )

        try:
            presets[str(key)] = VehicleSpec(
                name=str(entry["name"]),
                mass=float(entry["mass"]),
                additional_weight=float(entry["additional_weight"]),
                top_speed=float(entry["top_speed"]),
                acceleration_0_to_100=float(entry["acceleration_0_to_100"]),
                range_km=float(entry["range_km"]),
                tire_radius=float(entry["tire_radius"]),
                drag_coefficient=float(entry["drag_coefficient"]),
                frontal_area=float(entry["frontal_area"]),
                terrain_type=TerrainType(entry["terrain_type"]),
                auxiliary_load=AuxiliaryLoad(entry["auxiliary_load"]),
            )
        except ValueError as exc:
            raise ValueError(f"Preset '{key}': {exc}") from exc

    logger.info("Loaded %d vehicle presets from %s", len(presets), presets_path)
    return presets
