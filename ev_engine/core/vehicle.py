"""Vehicle specification model for the EV performance engine."""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from typing import Any, Mapping

from ev_engine.core.constants import AuxiliaryLoad, TerrainType

# Fields that must be strictly positive; additional_weight only needs >= 0.
_POSITIVE_FIELDS: tuple[str, ...] = (
    "mass",
    "top_speed",
    "acceleration_0_to_100",
    "range_km",
    "tire_radius",
    "drag_coefficient",
    "frontal_area",
)

# Inclusive physical range per numeric field.
FIELD_LIMITS: dict[str, tuple[float, float]] = {
    "mass": (50.0, 50_000.0),
    "additional_weight": (0.0, 20_000.0),
    "top_speed": (1.0, 1_000.0),
    "acceleration_0_to_100": (0.5, 600.0),
    "range_km": (1.0, 10_000.0),
    "tire_radius": (0.05, 5.0),
    "drag_coefficient": (0.01, 5.0),
    "frontal_area": (0.1, 50.0),
}

# Form / export keys used by the presentation layer.
FORM_KEYS: dict[str, str] = {
    "mass": "mass",
    "additional_weight": "additionalWeight",
    "top_speed": "topSpeed",
    "acceleration_0_to_100": "acceleration0to100",
    "range_km": "range",
    "tire_radius": "tireRadius",
    "drag_coefficient": "dragCoefficient",
    "frontal_area": "frontalArea",
    "terrain_type": "terrainType",
    "auxiliary_load": "auxiliaryLoad",
}


def _coerce_number(value: Any) -> float:
    """Parse a raw form value, treating anything unparseable as 0.0."""
    if isinstance(value, bool):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


@dataclass(frozen=True)
class VehicleSpec:
    """Immutable set of vehicle parameters for one calculation.

    Attributes:
        mass: Curb mass in kg (> 0).
        additional_weight: Payload / driver mass in kg (>= 0).
        top_speed: Target top speed in km/h (> 0).
        acceleration_0_to_100: Target 0-100 km/h time in seconds (> 0).
        range_km: Target range in km (> 0).
        tire_radius: Dynamic tyre radius in m (> 0).
        drag_coefficient: Aerodynamic drag coefficient Cd (> 0).
        frontal_area: Frontal area in m^2 (> 0).
        terrain_type: Dominant terrain; strings are parsed with a
            ``mixed`` fallback.
        auxiliary_load: Auxiliary consumer profile; strings are parsed with
            a ``normal`` fallback.
        name: Display label.

    Every numeric field must also lie inside its :data:`FIELD_LIMITS` range.
    """

    mass: float = 1500.0
    additional_weight: float = 75.0
    top_speed: float = 180.0
    acceleration_0_to_100: float = 8.5
    range_km: float = 400.0
    tire_radius: float = 0.32
    drag_coefficient: float = 0.28
    frontal_area: float = 2.3
    terrain_type: TerrainType = TerrainType.MIXED
    auxiliary_load: AuxiliaryLoad = AuxiliaryLoad.NORMAL
    name: str = "Vehicle"

    def __post_init__(self) -> None:
        """Validate the specification and normalise the enum fields."""
        object.__setattr__(self, "terrain_type", TerrainType.parse(self.terrain_type))
        object.__setattr__(
            self, "auxiliary_load", AuxiliaryLoad.parse(self.auxiliary_load)
        )
        for field_name in _POSITIVE_FIELDS + ("additional_weight",):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(
                    f"{field_name} must be numeric, got {type(value).__name__}."
                )
            if not math.isfinite(value):
                raise ValueError(f"{field_name} must be finite, got {value}.")
        for field_name in _POSITIVE_FIELDS:
            if getattr(self, field_name) <= 0.0:
                raise ValueError(f"{field_name} must be > 0.")
        if self.additional_weight < 0.0:
            raise ValueError("additional_weight must be >= 0.")
        for field_name, (low, high) in FIELD_LIMITS.items():
            value = getattr(self, field_name)
            if not low <= value <= high:
                raise ValueError(
                    f"{field_name} must be between {low:g} and {high:g}, "
                    f"got {value:g}."
                )

    @property
    def total_mass(self) -> float:
        """Curb mass plus additional weight in kg."""
        return self.mass + self.additional_weight

    @classmethod
    def from_form(cls, values: Mapping[str, Any]) -> VehicleSpec:
        """Build a spec from raw form values.

        Accepts either the snake_case field names or the camelCase form
        keys.  Numeric fields are coerced with ``float()`` and fall back to
        0.0 when unparseable, so a blank field surfaces as a validation
        error naming that field.  Missing keys keep their defaults.

        Raises:
            ValueError: If a coerced value is outside the valid domain.
        """
        kwargs: dict[str, Any] = {}
        for field_name, form_key in FORM_KEYS.items():
            if field_name in values:
                raw = values[field_name]
            elif form_key in values:
                raw = values[form_key]
            else:
                continue
            if field_name in ("terrain_type", "auxiliary_load"):
                kwargs[field_name] = raw
            else:
                kwargs[field_name] = _coerce_number(raw)
        if "name" in values and values["name"]:
            kwargs["name"] = str(values["name"])
        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        """Return the vehicle parameters keyed by the form/export names."""
        data: dict[str, Any] = {"name": self.name}
        for f in fields(self):
            if f.name == "name":
                continue
            value = getattr(self, f.name)
            if isinstance(value, (TerrainType, AuxiliaryLoad)):
                value = value.value
            data[FORM_KEYS[f.name]] = value
        return data
