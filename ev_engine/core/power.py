"""Motor power and torque sizing for the EV performance engine."""

from __future__ import annotations

from dataclasses import asdict, dataclass

from ev_engine.core.constants import CONSTANTS, TerrainType
from ev_engine.core.forces import tractive_force
from ev_engine.core.units import kmh_to_ms, round_int

# 0-100 km/h reference sprint, in m/s.
SPRINT_SPEED_MS: float = kmh_to_ms(100.0)


@dataclass(frozen=True)
class PowerResult:
    """Motor sizing outputs.

    Attributes:
        cruise_power: Power to hold top speed on the flat, in kW.
        acceleration_power: Power for the target acceleration at half of
            top speed, in kW.
        required_power: Motor rating covering both regimes after motor
            losses, in kW.
        required_torque: Motor torque at top speed, in Nm.
        motor_speed: Motor angular speed at top speed, in rad/s.
    """

    cruise_power: int
    acceleration_power: int
    required_power: int
    required_torque: int
    motor_speed: int

    def to_dict(self) -> dict[str, int]:
        """Export keys as used by the report and JSON output."""
        data = asdict(self)
        return {
            "cruisePower": data["cruise_power"],
            "accelerationPower": data["acceleration_power"],
            "requiredPower": data["required_power"],
            "requiredTorque": data["required_torque"],
            "motorSpeed": data["motor_speed"],
        }


def motor_power(
    mass: float,
    top_speed_kmh: float,
    accel_0_to_100_s: float,
    drag_coefficient: float,
    frontal_area: float,
    terrain_type: TerrainType | str = TerrainType.MIXED,
    tire_radius: float = 0.32,
) -> PowerResult:
    """Size the traction motor from top-speed and acceleration targets.

    Two operating points are evaluated:

        cruise:       F(v_top, a=0) * v_top
        acceleration: F(v_top / 2, a_target) * v_top / 2

    with ``a_target = (100 km/h) / t_0_100``.  The motor is rated for the
    larger of the two divided by the average motor efficiency.  Torque
    follows from the motor speed at ``v_top`` through the fixed gear
    ratio::

        omega_motor = v_top / r_tyre * gear_ratio
        torque      = P_required / omega_motor

    Args:
        mass: Total vehicle mass in kg.
        top_speed_kmh: Target top speed in km/h (> 0).
        accel_0_to_100_s: Target 0-100 km/h time in s (> 0).
        drag_coefficient: Cd.
        frontal_area: Frontal area in m^2.
        terrain_type: Terrain for rolling resistance.
        tire_radius: Dynamic tyre radius in m (> 0).

    Returns:
        :class:`PowerResult` with every field rounded to the nearest integer.
    """
    top_speed_ms: float = kmh_to_ms(top_speed_kmh)
    acceleration_ms2: float = SPRINT_SPEED_MS / accel_0_to_100_s

    cruise_force: float = tractive_force(
        mass, top_speed_ms, 0.0, drag_coefficient, frontal_area, terrain_type
    )
    cruise_power_kw: float = cruise_force * top_speed_ms / 1000.0

    # Average speed during the sprint is approximated by half of top speed.
    mid_speed_ms: float = top_speed_ms / 2.0
    accel_force: float = tractive_force(
        mass,
        mid_speed_ms,
        acceleration_ms2,
        drag_coefficient,
        frontal_area,
        terrain_type,
    )
    accel_power_kw: float = accel_force * mid_speed_ms / 1000.0

    required_power_kw: float = (
        max(cruise_power_kw, accel_power_kw) / CONSTANTS.motor_efficiency["average"]
    )

    wheel_speed: float = top_speed_ms / tire_radius
    motor_speed: float = wheel_speed * CONSTANTS.gear_ratio
    required_torque: float = required_power_kw * 1000.0 / motor_speed

    return PowerResult(
        cruise_power=round_int(cruise_power_kw),
        acceleration_power=round_int(accel_power_kw),
        required_power=round_int(required_power_kw),
        required_torque=round_int(required_torque),
        motor_speed=round_int(motor_speed),
    )
