"""Road-load force model for the EV performance engine.

The tractive force the drivetrain must deliver is the sum of four
contributions::

    F = F_roll + F_aero + F_accel + F_grade

    F_roll  = Crr(terrain) * m * g * cos(atan(grade / 100))
    F_aero  = 0.5 * rho * Cd * A * v^2
    F_accel = m * a
    F_grade = m * g * sin(atan(grade / 100))

``grade`` is given in percent.  All functions are defined for any real
input; drag is even in ``v``, so callers pass non-negative speeds for a
physical result.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ev_engine.core.constants import CONSTANTS, TerrainType


def rolling_resistance(
    mass: float,
    terrain_type: TerrainType | str = TerrainType.MIXED,
    grade: float = 0.0,
) -> float:
    """Rolling resistance force in N."""
    grade_radians: float = math.atan(grade / 100.0)
    return CONSTANTS.crr(terrain_type) * mass * CONSTANTS.gravity * math.cos(
        grade_radians
    )


def aerodynamic_drag(
    speed_ms: float,
    drag_coefficient: float,
    frontal_area: float,
    air_density: float = CONSTANTS.air_density,
) -> float:
    """Aerodynamic drag force in N."""
    return 0.5 * air_density * drag_coefficient * frontal_area * speed_ms**2


def acceleration_force(mass: float, acceleration_ms2: float) -> float:
    """Inertial force in N."""
    return mass * acceleration_ms2


def grade_resistance(mass: float, grade: float) -> float:
    """Grade (climbing) resistance force in N."""
    grade_radians: float = math.atan(grade / 100.0)
    return mass * CONSTANTS.gravity * math.sin(grade_radians)


@dataclass(frozen=True)
class ForceBreakdown:
    """The four road-load contributions at one operating point, in N."""

    rolling_resistance: float
    aerodynamic_drag: float
    acceleration_force: float
    grade_resistance: float

    @property
    def total(self) -> float:
        """Tractive force: the sum of all four contributions."""
        return (
            self.rolling_resistance
            + self.aerodynamic_drag
            + self.acceleration_force
            + self.grade_resistance
        )


def force_breakdown(
    mass: float,
    speed_ms: float,
    acceleration_ms2: float,
    drag_coefficient: float,
    frontal_area: float,
    terrain_type: TerrainType | str = TerrainType.MIXED,
    grade: float = 0.0,
) -> ForceBreakdown:
    """Evaluate each road-load contribution for one vehicle state.

    Args:
        mass: Vehicle mass in kg.
        speed_ms: Vehicle speed in m/s.
        acceleration_ms2: Longitudinal acceleration in m/s^2.
        drag_coefficient: Aerodynamic drag coefficient Cd.
        frontal_area: Frontal area in m^2.
        terrain_type: Terrain used to select Crr (``mixed`` if unknown).
        grade: Road grade in percent (0 = flat).

    Returns:
        A :class:`ForceBreakdown` with the four components.
    """
    return ForceBreakdown(
        rolling_resistance=rolling_resistance(mass, terrain_type, grade),
        aerodynamic_drag=aerodynamic_drag(speed_ms, drag_coefficient, frontal_area),
        acceleration_force=acceleration_force(mass, acceleration_ms2),
        grade_resistance=grade_resistance(mass, grade),
    )


def tractive_force(
    mass: float,
    speed_ms: float,
    acceleration_ms2: float,
    drag_coefficient: float,
    frontal_area: float,
    terrain_type: TerrainType | str = TerrainType.MIXED,
    grade: float = 0.0,
) -> float:
    """Total tractive force in N.  See :func:`force_breakdown`."""
    return force_breakdown(
        mass,
        speed_ms,
        acceleration_ms2,
        drag_coefficient,
        frontal_area,
        terrain_type,
        grade,
    ).total
