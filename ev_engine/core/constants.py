"""Physical constants and terrain / auxiliary-load enums for the EV engine.

The constant tables are built once at import time and exposed through a
frozen :class:`PhysicalConstants` instance.  Mapping-valued tables are
wrapped in :class:`types.MappingProxyType` so nothing can mutate them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping

# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class TerrainType(str, Enum):
    """Road surface category used to select the rolling-resistance coefficient."""

    URBAN = "urban"
    HIGHWAY = "highway"
    MIXED = "mixed"
    OFFROAD = "offroad"

    @classmethod
    def parse(cls, value: object) -> TerrainType:
        """Return the matching terrain, or ``MIXED`` for anything unrecognised."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.MIXED


class AuxiliaryLoad(str, Enum):
    """Auxiliary consumer profile: baseline electronics, or HVAC running."""

    NORMAL = "normal"
    HIGH = "high"

    @classmethod
    def parse(cls, value: object) -> AuxiliaryLoad:
        """Return the matching load profile, or ``NORMAL`` if unrecognised."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.NORMAL


# ---------------------------------------------------------------------------
# Constant tables
# ---------------------------------------------------------------------------


def _frozen(table: dict) -> Mapping:
    return MappingProxyType(dict(table))


@dataclass(frozen=True)
class PhysicalConstants:
    """Read-only physical and drivetrain constants.

    Attributes:
        gravity: Gravitational acceleration in m/s^2.
        air_density: Air density in kg/m^3 (sea level, 15 degC).
        rolling_resistance: Crr per terrain type.
        motor_efficiency: Motor efficiency factors (peak, average, low_speed).
        battery_efficiency: Battery efficiency factors (charge, discharge,
            thermal_loss).
        regen_efficiency: Regenerative-braking recovery factor.
        auxiliary_power: Auxiliary consumers in W (lights, hvac,
            electronics, base).
        gear_ratio: Fixed single-speed reduction ratio.  An assumed value,
            not derived from any drivetrain data.
        reference_distance_km: Distance the four-phase drive cycle is
            taken to represent when normalising consumption per km.  Also
            an approximation.
    """

    gravity: float = 9.81
    air_density: float = 1.225
    rolling_resistance: Mapping[TerrainType, float] = field(
        default_factory=lambda: _frozen(
            {
                TerrainType.URBAN: 0.012,
                TerrainType.HIGHWAY: 0.008,
                TerrainType.MIXED: 0.010,
                TerrainType.OFFROAD: 0.025,
            }
        )
    )
    motor_efficiency: Mapping[str, float] = field(
        default_factory=lambda: _frozen(
            {"peak": 0.95, "average": 0.85, "low_speed": 0.75}
        )
    )
    battery_efficiency: Mapping[str, float] = field(
        default_factory=lambda: _frozen(
            {"charge": 0.95, "discharge": 0.95, "thermal_loss": 0.98}
        )
    )
    regen_efficiency: float = 0.7
    auxiliary_power: Mapping[str, float] = field(
        default_factory=lambda: _frozen(
            {"lights": 200.0, "hvac": 2000.0, "electronics": 300.0, "base": 500.0}
        )
    )
    gear_ratio: float = 10.0
    reference_distance_km: float = 100.0

    def crr(self, terrain_type: object) -> float:
        """Rolling-resistance coefficient for *terrain_type*.

        Unknown terrain values fall back to the ``mixed`` coefficient.
        """
        return self.rolling_resistance[TerrainType.parse(terrain_type)]


CONSTANTS: PhysicalConstants = PhysicalConstants()
