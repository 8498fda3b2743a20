"""Secondary dynamic limits for the EV performance engine."""

from __future__ import annotations

import math
from dataclasses import dataclass

from ev_engine.core.constants import CONSTANTS, TerrainType
from ev_engine.core.power import SPRINT_SPEED_MS
from ev_engine.core.units import kmh_to_ms, ms_to_kmh, round_half_up, round_int

BRAKING_SPEED_MS: float = kmh_to_ms(100.0)
BRAKING_DECELERATION: float = 8.0  # m/s^2
LATERAL_ACCELERATION_G: float = 0.8
CORNER_RADIUS_M: float = 50.0


@dataclass(frozen=True)
class DynamicsResult:
    """Dynamic limits.

    Attributes:
        max_theoretical_speed: Speed at which drag equals highway rolling
            resistance, in km/h.
        braking_distance: Stopping distance from 100 km/h, in m.
        cornering_speed: Limit speed on a 50 m radius, in km/h.
        power_to_weight: Required power per kg, in W/kg (0 if unknown).
        acceleration_ms2: Mean 0-100 km/h acceleration, in m/s^2.
    """

    max_theoretical_speed: int
    braking_distance: int
    cornering_speed: int
    power_to_weight: int
    acceleration_ms2: float

    def to_dict(self) -> dict[str, float]:
        """Export keys as used by the report and JSON output."""
        return {
            "maxTheoreticalSpeed": self.max_theoretical_speed,
            "brakingDistance": self.braking_distance,
            "corneringSpeed": self.cornering_speed,
            "powerToWeight": self.power_to_weight,
            "accelerationMs2": self.acceleration_ms2,
        }


def vehicle_dynamics(
    mass: float,
    tire_radius: float,
    drag_coefficient: float,
    frontal_area: float,
    top_speed: float,
    accel_0_to_100: float,
    required_power: float | None = None,
) -> DynamicsResult:
    """Compute drag-limited speed, braking and cornering limits.

    The limits are independent of the drive and energy path:

        v_max   = sqrt(2 * m * g * Crr_highway / (rho * Cd * A))
        d_brake = v_100^2 / (2 * 8 m/s^2)
        v_apex  = sqrt(0.8 g * 50 m)

    ``v_max`` is a theoretical ceiling; it ignores motor power and the
    configured top speed.  ``tire_radius`` and ``top_speed`` are accepted
    for call-site symmetry with the other models and do not enter any
    formula.

    Args:
        mass: Total vehicle mass in kg.
        tire_radius: Tyre radius in m.
        drag_coefficient: Cd.
        frontal_area: Frontal area in m^2.
        top_speed: Configured top speed in km/h.
        accel_0_to_100: 0-100 km/h time in s (> 0).
        required_power: Motor rating in kW, echoed as power-to-weight.

    Returns:
        :class:`DynamicsResult`.
    """
    crr_highway: float = CONSTANTS.rolling_resistance[TerrainType.HIGHWAY]
    max_speed_ms: float = math.sqrt(
        (2.0 * mass * CONSTANTS.gravity * crr_highway)
        / (CONSTANTS.air_density * drag_coefficient * frontal_area)
    )

    braking_distance: float = BRAKING_SPEED_MS**2 / (2.0 * BRAKING_DECELERATION)

    lateral_acceleration: float = LATERAL_ACCELERATION_G * CONSTANTS.gravity
    cornering_speed_ms: float = math.sqrt(lateral_acceleration * CORNER_RADIUS_M)

    power_to_weight: float = (
        required_power * 1000.0 / mass if required_power else 0.0
    )

    return DynamicsResult(
        max_theoretical_speed=round_int(ms_to_kmh(max_speed_ms)),
        braking_distance=round_int(braking_distance),
        cornering_speed=round_int(ms_to_kmh(cornering_speed_ms)),
        power_to_weight=round_int(power_to_weight),
        acceleration_ms2=round_half_up(SPRINT_SPEED_MS / accel_0_to_100, 2),
    )
