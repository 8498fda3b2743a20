"""Drive-cycle energy consumption and battery sizing for the EV engine.

Consumption is estimated over a coarse four-phase approximation of the
WLTC cycle.  Each phase is driven at constant speed, so only rolling
resistance and drag contribute; the phase weights approximate the share
of each speed band in the real cycle.

The per-phase energy sum is normalised by a fixed reference distance
(``CONSTANTS.reference_distance_km``) rather than by the distance the
phases actually cover.  That constant is an approximation, not a
distance integration.
"""

from __future__ import annotations

from dataclasses import dataclass

from ev_engine.core.constants import CONSTANTS, AuxiliaryLoad, TerrainType
from ev_engine.core.forces import tractive_force
from ev_engine.core.units import kmh_to_ms, round_half_up, round_int

SECONDS_PER_HOUR: float = 3600.0


@dataclass(frozen=True)
class DriveCyclePhase:
    """One constant-speed phase of the drive cycle.

    Attributes:
        speed_kmh: Phase speed in km/h.
        duration_s: Phase duration in seconds.
        weight: Share of the phase in the cycle (weights sum to 1.0).
    """

    speed_kmh: float
    duration_s: float
    weight: float


WLTC_PHASES: tuple[DriveCyclePhase, ...] = (
    DriveCyclePhase(speed_kmh=20.0, duration_s=589.0, weight=0.23),  # low
    DriveCyclePhase(speed_kmh=40.0, duration_s=433.0, weight=0.25),  # medium
    DriveCyclePhase(speed_kmh=60.0, duration_s=455.0, weight=0.26),  # high
    DriveCyclePhase(speed_kmh=80.0, duration_s=323.0, weight=0.26),  # extra high
)


def drivetrain_efficiency() -> float:
    """Compound efficiency from battery terminals to wheel.

    ``motor(average) * battery(discharge) * battery(thermal_loss)``
    """
    return (
        CONSTANTS.motor_efficiency["average"]
        * CONSTANTS.battery_efficiency["discharge"]
        * CONSTANTS.battery_efficiency["thermal_loss"]
    )


@dataclass(frozen=True)
class EnergyResult:
    """Energy consumption outputs.

    Attributes:
        consumption_wh_km: Energy drawn from the battery per km, in Wh/km.
        battery_capacity: Usable capacity needed for the target range, in
            kWh (one decimal).
        total_efficiency: Compound drivetrain efficiency, in percent.
        auxiliary_consumption: Baseline auxiliary draw, in W.
    """

    consumption_wh_km: int
    battery_capacity: float
    total_efficiency: int
    auxiliary_consumption: int

    def to_dict(self) -> dict[str, float]:
        """Export keys as used by the report and JSON output."""
        return {
            "consumptionWhKm": self.consumption_wh_km,
            "batteryCapacity": self.battery_capacity,
            "totalEfficiency": self.total_efficiency,
            "auxiliaryConsumption": self.auxiliary_consumption,
        }


def energy_consumption(
    mass: float,
    drag_coefficient: float,
    frontal_area: float,
    terrain_type: TerrainType | str = TerrainType.MIXED,
    range_km: float = 400.0,
    auxiliary_load: AuxiliaryLoad | str = AuxiliaryLoad.NORMAL,
    phases: tuple[DriveCyclePhase, ...] = WLTC_PHASES,
) -> EnergyResult:
    """Estimate consumption and the battery capacity for a target range.

    For each phase::

        P_i = F(v_i, a=0) * v_i / 1000              [kW]
        E  += P_i * (t_i / 3600) * w_i               [kWh]
        T  += t_i * w_i                              [s]

    Auxiliary draw is then added over ``T``: the 500 W baseline always,
    plus 2 kW HVAC for a ``high`` auxiliary load.  The total is divided by
    :func:`drivetrain_efficiency` and normalised per km::

        consumption = E / eta * 1000 / reference_distance   [Wh/km]
        capacity    = consumption * range / 1000            [kWh]

    Args:
        mass: Total vehicle mass in kg.
        drag_coefficient: Cd.
        frontal_area: Frontal area in m^2.
        terrain_type: Terrain for rolling resistance.
        range_km: Target range in km.
        auxiliary_load: ``normal`` or ``high``; unknown values are treated
            as ``normal``.
        phases: Drive-cycle phases (defaults to :data:`WLTC_PHASES`).

    Returns:
        :class:`EnergyResult`.
    """
    total_energy_kwh: float = 0.0
    total_time_s: float = 0.0

    for phase in phases:
        speed_ms: float = kmh_to_ms(phase.speed_kmh)
        force: float = tractive_force(
            mass, speed_ms, 0.0, drag_coefficient, frontal_area, terrain_type
        )
        power_kw: float = force * speed_ms / 1000.0
        total_energy_kwh += (
            power_kw * (phase.duration_s / SECONDS_PER_HOUR) * phase.weight
        )
        total_time_s += phase.duration_s * phase.weight

    base_aux_kw: float = CONSTANTS.auxiliary_power["base"] / 1000.0
    if AuxiliaryLoad.parse(auxiliary_load) is AuxiliaryLoad.HIGH:
        total_energy_kwh += (
            CONSTANTS.auxiliary_power["hvac"] / 1000.0
        ) * (total_time_s / SECONDS_PER_HOUR)
    total_energy_kwh += base_aux_kw * (total_time_s / SECONDS_PER_HOUR)

    efficiency: float = drivetrain_efficiency()
    consumption_wh_km: float = (
        (total_energy_kwh / efficiency) * 1000.0 / CONSTANTS.reference_distance_km
    )
    battery_capacity_kwh: float = consumption_wh_km * range_km / 1000.0

    return EnergyResult(
        consumption_wh_km=round_int(consumption_wh_km),
        battery_capacity=round_half_up(battery_capacity_kwh, 1),
        total_efficiency=round_int(efficiency * 100.0),
        auxiliary_consumption=round_int(base_aux_kw * 1000.0),
    )
